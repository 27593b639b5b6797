"""Subject mutations. Each change commits together with its version entry."""

import logging

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from coursereview.models.catalog import Field, Level
from coursereview.models.subject import Subject
from coursereview.models.user import User
from coursereview.schemas.subject import SubjectCreate, SubjectUpdate
from coursereview.schemas.version import SubjectAction
from coursereview.services import version_service

logger = logging.getLogger(__name__)


def get_subject(db: Session, subject_id: str) -> Subject:
    subject = db.query(Subject).filter(Subject.subject_id == subject_id).first()
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")
    return subject


def _ensure_level(db: Session, level_id: int) -> None:
    if not db.query(Level.level_id).filter(Level.level_id == level_id).first():
        raise HTTPException(status_code=400, detail="Unknown level")


def create_subject(db: Session, field_id: int, data: SubjectCreate, current_user: User) -> Subject:
    if not db.query(Field.field_id).filter(Field.field_id == field_id).first():
        raise HTTPException(status_code=404, detail="Field not found")
    _ensure_level(db, data.level_id)

    subject_id = data.subject_id.strip().upper()
    name = data.name.strip()
    name = name[:1].upper() + name[1:].lower()
    exists = (
        db.query(Subject.subject_id)
        .filter(func.lower(Subject.subject_id) == subject_id.lower())
        .first()
    )
    if exists:
        raise HTTPException(status_code=409, detail=f"Subject '{subject_id}' already exists")

    subject = Subject(
        subject_id=subject_id,
        name=name,
        field_id=field_id,
        level_id=data.level_id,
        description=data.description,
    )
    db.add(subject)
    version_service.record_field_version(
        db,
        field_id=field_id,
        user_id=current_user.user_id,
        description=f"Added subject {subject_id}",
        commit=False,
    )
    db.commit()
    db.refresh(subject)
    logger.info("[subject] %s created in field %s by user %s", subject_id, field_id, current_user.user_id)
    return subject


def update_subject(db: Session, subject_id: str, data: SubjectUpdate, current_user: User) -> Subject:
    if data.level_id is None and not data.description:
        raise HTTPException(status_code=400, detail="No updates provided (description or level_id missing)")
    subject = get_subject(db, subject_id)

    changes = []
    if data.level_id is not None:
        _ensure_level(db, data.level_id)
        subject.level_id = data.level_id
        changes.append(f"level -> {data.level_id}")
    if data.description:
        subject.description = data.description
        changes.append("description")

    version_service.record_subject_version(
        db,
        subject_id=subject.subject_id,
        user_id=current_user.user_id,
        action_type=SubjectAction.EDITED.value,
        description="Changed " + ", ".join(changes),
        commit=False,
    )
    db.commit()
    db.refresh(subject)
    return subject


def delete_subject(db: Session, subject_id: str, current_user: User) -> None:
    subject = get_subject(db, subject_id)
    field_id = subject.field_id
    db.delete(subject)
    db.flush()
    version_service.record_subject_version(
        db,
        subject_id=subject_id,
        user_id=current_user.user_id,
        action_type=SubjectAction.DELETED.value,
        description=f"Deleted subject {subject_id}",
        commit=False,
    )
    version_service.record_field_version(
        db,
        field_id=field_id,
        user_id=current_user.user_id,
        description=f"Removed subject {subject_id}",
        commit=False,
    )
    db.commit()
    logger.info("[subject] %s deleted by user %s", subject_id, current_user.user_id)


def increment_view(db: Session, subject_id: str) -> None:
    if not subject_id or not subject_id.strip():
        raise HTTPException(status_code=400, detail="Subject id is required")
    updated = (
        db.query(Subject)
        .filter(Subject.subject_id == subject_id)
        .update({"view_count": Subject.view_count + 1}, synchronize_session=False)
    )
    if not updated:
        db.rollback()
        logger.warning("[subject] view increment for unknown subject %s", subject_id)
        raise HTTPException(status_code=404, detail="Subject not found")
    db.commit()
