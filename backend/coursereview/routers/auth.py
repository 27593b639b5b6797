"""Login routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from coursereview.config import settings
from coursereview.database import get_db
from coursereview.schemas.user import LoginRequest, TokenResponse, UserOut
from coursereview.services.auth_service import create_access_token, mock_login
from coursereview.middleware.auth_middleware import get_current_user
from coursereview.models.user import User

router = APIRouter(prefix=f"{settings.API_PREFIX}/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = mock_login(db, request.email)
    token = create_access_token(user.user_id)
    return TokenResponse(access_token=token, user=UserOut.model_validate(user))


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return current_user
