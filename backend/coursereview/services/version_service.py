"""Records numbered change-log entries for fields, subjects and subject review lists.

Field and subject versions are numbered per owning entity. The next number is
read as ``max + 1`` and inserted inside a savepoint; the unique constraint on
(owner, version_number) rejects a number another writer took first, in which
case the number is re-read and the insert retried. The max is a locking read
(SELECT ... FOR UPDATE) so a retry sees rows committed after the transaction
started, even under REPEATABLE READ.
"""

import json
import logging
from typing import Any, Callable, Dict, List

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coursereview.config import settings
from coursereview.models.catalog import Field
from coursereview.models.subject import Review, Subject
from coursereview.models.user import User
from coursereview.models.version import PageVersion, SubjectReviewVersion, SubjectVersion

logger = logging.getLogger(__name__)


def _ensure_user(db: Session, user_id: int) -> None:
    if not db.query(User.user_id).filter(User.user_id == user_id).first():
        raise HTTPException(status_code=404, detail="User not found")


def _insert_numbered(db: Session, build_row: Callable[[], Any], label: str):
    for attempt in range(1, settings.VERSION_RETRY_LIMIT + 1):
        row = build_row()
        try:
            with db.begin_nested():
                db.add(row)
        except IntegrityError:
            logger.warning("[version] number %s for %s already taken (attempt %d)", row.version_number, label, attempt)
            continue
        return row
    logger.error("[version] gave up allocating a version number for %s", label)
    raise HTTPException(status_code=409, detail="Version number conflict")


def _finish(db: Session, row, commit: bool):
    if commit:
        db.commit()
        db.refresh(row)
    else:
        db.flush()
    return row


def current_subject_ids(db: Session, field_id: int) -> List[str]:
    return [
        row[0]
        for row in db.query(Subject.subject_id)
        .filter(Subject.field_id == field_id)
        .order_by(Subject.subject_id.asc())
        .all()
    ]


def record_field_version(
    db: Session,
    *,
    field_id: int,
    user_id: int,
    description: str | None,
    commit: bool = True,
) -> PageVersion:
    if not db.query(Field.field_id).filter(Field.field_id == field_id).first():
        raise HTTPException(status_code=404, detail="Field not found")
    _ensure_user(db, user_id)
    # pending subject changes must be visible to the snapshot
    db.flush()

    def build():
        current_max = (
            db.query(func.max(PageVersion.version_number))
            .filter(PageVersion.field_id == field_id)
            .with_for_update()
            .scalar()
        )
        return PageVersion(
            field_id=field_id,
            version_number=(current_max or 0) + 1,
            user_id=user_id,
            subject_ids=json.dumps(current_subject_ids(db, field_id)),
            description=description,
        )

    row = _insert_numbered(db, build, f"field {field_id}")
    logger.info("[version] field %s -> version %s by user %s", field_id, row.version_number, user_id)
    return _finish(db, row, commit)


def record_subject_version(
    db: Session,
    *,
    subject_id: str,
    user_id: int,
    action_type: str,
    description: str | None,
    commit: bool = True,
) -> SubjectVersion:
    _ensure_user(db, user_id)

    def build():
        current_max = (
            db.query(func.max(SubjectVersion.version_number))
            .filter(SubjectVersion.subject_id == subject_id)
            .with_for_update()
            .scalar()
        )
        return SubjectVersion(
            subject_id=subject_id,
            version_number=(current_max or 0) + 1,
            user_id=user_id,
            action_type=action_type,
            description=description,
        )

    row = _insert_numbered(db, build, f"subject {subject_id}")
    logger.info(
        "[version] subject %s -> version %s (%s) by user %s",
        subject_id, row.version_number, action_type, user_id,
    )
    return _finish(db, row, commit)


def record_review_version(
    db: Session,
    *,
    subject_id: str,
    reviews: List[Dict[str, Any]],
    user_id: int,
    action_type: str,
    commit: bool = True,
) -> SubjectReviewVersion:
    _ensure_user(db, user_id)
    row = SubjectReviewVersion(
        subject_id=subject_id,
        reviews=json.dumps(reviews, ensure_ascii=False, default=str),
        user_id=user_id,
        action_type=action_type,
    )
    db.add(row)
    logger.info("[version] review list of %s (%d reviews, %s) by user %s", subject_id, len(reviews), action_type, user_id)
    return _finish(db, row, commit)


def snapshot_reviews(db: Session, subject_id: str) -> List[Dict[str, Any]]:
    rows = (
        db.query(Review)
        .filter(Review.subject_id == subject_id)
        .order_by(Review.review_id.desc())
        .all()
    )
    return [
        {
            "review_id": r.review_id,
            "text": r.text,
            "stars": r.stars,
            "submitter_name": r.submitter_name,
            "user_id": r.user_id,
            "created_at": r.created_at.isoformat() if r.created_at else None,
        }
        for r in rows
    ]


def parse_subject_ids(row: PageVersion) -> List[str]:
    try:
        return json.loads(row.subject_ids or "[]")
    except json.JSONDecodeError:
        return []


def parse_reviews(row: SubjectReviewVersion) -> List[Dict[str, Any]]:
    try:
        return json.loads(row.reviews or "[]")
    except json.JSONDecodeError:
        return []


def get_subjects_by_version(db: Session, version_id: int) -> List[str]:
    row = db.query(PageVersion).filter(PageVersion.version_id == version_id).first()
    if not row:
        return []
    return parse_subject_ids(row)


def list_field_versions(db: Session, field_id: int) -> List[PageVersion]:
    return (
        db.query(PageVersion)
        .filter(PageVersion.field_id == field_id)
        .order_by(PageVersion.version_number.desc())
        .all()
    )


def list_subject_versions(db: Session, subject_id: str) -> List[SubjectVersion]:
    return (
        db.query(SubjectVersion)
        .filter(SubjectVersion.subject_id == subject_id)
        .order_by(SubjectVersion.version_number.desc())
        .all()
    )


def list_review_versions(db: Session, subject_id: str) -> List[SubjectReviewVersion]:
    return (
        db.query(SubjectReviewVersion)
        .filter(SubjectReviewVersion.subject_id == subject_id)
        .order_by(SubjectReviewVersion.version_id.desc())
        .all()
    )


def page_version_to_response(row: PageVersion) -> Dict[str, Any]:
    return {
        "version_id": row.version_id,
        "field_id": row.field_id,
        "version_number": row.version_number,
        "user_id": row.user_id,
        "subject_ids": parse_subject_ids(row),
        "description": row.description,
        "created_at": row.created_at,
    }


def review_version_to_response(row: SubjectReviewVersion) -> Dict[str, Any]:
    return {
        "version_id": row.version_id,
        "subject_id": row.subject_id,
        "reviews": parse_reviews(row),
        "user_id": row.user_id,
        "action_type": row.action_type,
        "created_at": row.created_at,
    }
