"""Review mutations. Every change also stores a snapshot of the subject's review list."""

import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from coursereview.models.subject import Review
from coursereview.models.user import User
from coursereview.schemas.subject import ReviewCreate, ReviewUpdate
from coursereview.schemas.version import ReviewAction
from coursereview.services import version_service
from coursereview.services.subject_service import get_subject
from coursereview.utils.permissions import can_delete_review, can_edit_review

logger = logging.getLogger(__name__)


def list_reviews(db: Session, subject_id: str) -> List[Review]:
    return (
        db.query(Review)
        .filter(Review.subject_id == subject_id)
        .order_by(Review.review_id.desc())
        .all()
    )


def get_review(db: Session, review_id: int) -> Review:
    review = db.query(Review).filter(Review.review_id == review_id).first()
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


def _record_snapshot(db: Session, subject_id: str, current_user: User, action: ReviewAction) -> None:
    db.flush()
    version_service.record_review_version(
        db,
        subject_id=subject_id,
        reviews=version_service.snapshot_reviews(db, subject_id),
        user_id=current_user.user_id,
        action_type=action.value,
        commit=False,
    )


def create_review(db: Session, subject_id: str, data: ReviewCreate, current_user: User) -> Review:
    subject = get_subject(db, subject_id)
    review = Review(
        subject_id=subject.subject_id,
        text=data.text,
        stars=data.stars,
        submitter_name=current_user.name,
        user_id=current_user.user_id,
    )
    db.add(review)
    _record_snapshot(db, subject.subject_id, current_user, ReviewAction.COMMENTED)
    db.commit()
    db.refresh(review)
    logger.info("[review] %s added to %s by user %s", review.review_id, subject.subject_id, current_user.user_id)
    return review


def update_review(db: Session, review_id: int, data: ReviewUpdate, current_user: User) -> Review:
    review = get_review(db, review_id)
    if not can_edit_review(review, current_user):
        logger.warning("[review] user %s may not edit review %s", current_user.user_id, review_id)
        raise HTTPException(status_code=403, detail="Not authorized to edit this review")
    review.text = data.text
    review.stars = data.stars
    _record_snapshot(db, review.subject_id, current_user, ReviewAction.EDITED_COMMENT)
    db.commit()
    db.refresh(review)
    return review


def delete_review(db: Session, review_id: int, current_user: User) -> None:
    review = get_review(db, review_id)
    if not can_delete_review(review, current_user):
        logger.warning("[review] user %s may not delete review %s", current_user.user_id, review_id)
        raise HTTPException(status_code=403, detail="Not authorized to delete this review")
    subject_id = review.subject_id
    db.delete(review)
    _record_snapshot(db, subject_id, current_user, ReviewAction.DELETED_COMMENT)
    db.commit()
