"""Version recording, history feed and view counter routes."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursereview.config import settings
from coursereview.database import get_db
from coursereview.schemas.version import (
    FieldVersionCreate,
    FieldVersionCreated,
    HistoryEntryOut,
    PageVersionOut,
    ReviewVersionCreate,
    ReviewVersionOut,
    SubjectVersionCreate,
    SubjectVersionCreated,
    SubjectVersionOut,
)
from coursereview.services import catalog_service, history_service, subject_service, version_service


router = APIRouter(prefix=settings.API_PREFIX, tags=["versions"])


@router.post("/fields/{field_id}/version", response_model=FieldVersionCreated)
def create_field_version(field_id: int, data: FieldVersionCreate, db: Session = Depends(get_db)):
    row = version_service.record_field_version(
        db,
        field_id=field_id,
        user_id=data.user_id,
        description=data.description,
    )
    return {"version": row.version_number}


@router.post("/subjects/{subject_id}/version", response_model=SubjectVersionCreated)
def create_subject_version(subject_id: str, data: SubjectVersionCreate, db: Session = Depends(get_db)):
    row = version_service.record_subject_version(
        db,
        subject_id=subject_id,
        user_id=data.user_id,
        action_type=data.action_type.value,
        description=data.description,
    )
    return {"message": "Version created", "version": row.version_number}


@router.post("/subjects/{subject_id}/reviews/version", status_code=201)
def create_review_version(subject_id: str, data: ReviewVersionCreate, db: Session = Depends(get_db)):
    version_service.record_review_version(
        db,
        subject_id=subject_id,
        reviews=data.reviews,
        user_id=data.user_id,
        action_type=data.action_type.value,
    )
    return {"message": "Versioning completed"}


@router.get("/history", response_model=List[HistoryEntryOut])
def get_history(db: Session = Depends(get_db)):
    return history_service.get_history(db)


@router.post("/subjects/{subject_id}/increment-view")
def increment_view(subject_id: str, db: Session = Depends(get_db)):
    subject_service.increment_view(db, subject_id)
    return {"message": "View count incremented"}


@router.get("/versions/{version_id}/subjects", response_model=List[str])
def list_subjects_in_version(version_id: int, db: Session = Depends(get_db)):
    return version_service.get_subjects_by_version(db, version_id)


@router.get("/fields/{field_id}/versions", response_model=List[PageVersionOut])
def list_field_versions(field_id: int, db: Session = Depends(get_db)):
    catalog_service.get_field(db, field_id)
    rows = version_service.list_field_versions(db, field_id)
    return [version_service.page_version_to_response(row) for row in rows]


@router.get("/subjects/{subject_id}/versions", response_model=List[SubjectVersionOut])
def list_subject_versions(subject_id: str, db: Session = Depends(get_db)):
    return version_service.list_subject_versions(db, subject_id)


@router.get("/subjects/{subject_id}/reviews/versions", response_model=List[ReviewVersionOut])
def list_review_versions(subject_id: str, db: Session = Depends(get_db)):
    rows = version_service.list_review_versions(db, subject_id)
    return [version_service.review_version_to_response(row) for row in rows]
