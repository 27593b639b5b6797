"""Subject routes. Edits and deletions are reserved for moderators."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursereview.config import settings
from coursereview.database import get_db
from coursereview.middleware.auth_middleware import get_current_user, require_roles
from coursereview.models.user import User
from coursereview.schemas.subject import SubjectCreate, SubjectDetailOut, SubjectOut, SubjectUpdate
from coursereview.services import subject_service
from coursereview.utils.permissions import MODERATOR

router = APIRouter(prefix=settings.API_PREFIX, tags=["subjects"])


@router.post("/fields/{field_id}/subjects", response_model=SubjectOut, status_code=201)
def create_subject(
    field_id: int,
    data: SubjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return subject_service.create_subject(db, field_id, data, current_user)


@router.get("/subjects/{subject_id}", response_model=SubjectDetailOut)
def get_subject(subject_id: str, db: Session = Depends(get_db)):
    return subject_service.get_subject(db, subject_id)


@router.put("/subjects/{subject_id}", response_model=SubjectOut)
def update_subject(
    subject_id: str,
    data: SubjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(MODERATOR)),
):
    return subject_service.update_subject(db, subject_id, data, current_user)


@router.delete("/subjects/{subject_id}")
def delete_subject(
    subject_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(MODERATOR)),
):
    subject_service.delete_subject(db, subject_id, current_user)
    return {"message": "Subject deleted"}
