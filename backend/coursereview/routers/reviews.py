"""Review routes."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursereview.config import settings
from coursereview.database import get_db
from coursereview.middleware.auth_middleware import get_current_user
from coursereview.models.user import User
from coursereview.schemas.subject import ReviewCreate, ReviewOut, ReviewUpdate
from coursereview.services import review_service, subject_service

router = APIRouter(prefix=settings.API_PREFIX, tags=["reviews"])


@router.get("/subjects/{subject_id}/reviews", response_model=List[ReviewOut])
def list_reviews(subject_id: str, db: Session = Depends(get_db)):
    subject_service.get_subject(db, subject_id)
    return review_service.list_reviews(db, subject_id)


@router.post("/subjects/{subject_id}/reviews", response_model=ReviewOut, status_code=201)
def create_review(
    subject_id: str,
    data: ReviewCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return review_service.create_review(db, subject_id, data, current_user)


@router.put("/reviews/{review_id}", response_model=ReviewOut)
def update_review(
    review_id: int,
    data: ReviewUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return review_service.update_review(db, review_id, data, current_user)


@router.delete("/reviews/{review_id}")
def delete_review(
    review_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    review_service.delete_review(db, review_id, current_user)
    return {"message": "Review deleted"}
