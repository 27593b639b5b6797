"""Merges the three change-log tables into one reverse-chronological feed."""

import logging
from typing import Any, Dict, List

from sqlalchemy import String, cast, literal, select, union_all
from sqlalchemy.orm import Session

from coursereview.models.user import User
from coursereview.models.version import PageVersion, SubjectReviewVersion, SubjectVersion
from coursereview.schemas.version import FIELD_HISTORY_ACTION

logger = logging.getLogger(__name__)


def _history_union():
    field_rows = (
        select(
            PageVersion.version_number.label("version_number"),
            PageVersion.created_at.label("timestamp"),
            User.name.label("user_name"),
            literal(FIELD_HISTORY_ACTION, String).label("action_type"),
            literal("field", String).label("source"),
            cast(PageVersion.field_id, String).label("entity_id"),
        )
        .join(User, User.user_id == PageVersion.user_id)
    )
    subject_rows = (
        select(
            SubjectVersion.version_number,
            SubjectVersion.created_at,
            User.name,
            SubjectVersion.action_type,
            literal("subject", String),
            SubjectVersion.subject_id,
        )
        .join(User, User.user_id == SubjectVersion.user_id)
    )
    # review-list entries are not numbered per subject; the row id stands in
    review_rows = (
        select(
            SubjectReviewVersion.version_id,
            SubjectReviewVersion.created_at,
            User.name,
            SubjectReviewVersion.action_type,
            literal("review", String),
            SubjectReviewVersion.subject_id,
        )
        .join(User, User.user_id == SubjectReviewVersion.user_id)
    )
    return union_all(field_rows, subject_rows, review_rows).subquery("history")


def get_history(db: Session) -> List[Dict[str, Any]]:
    history = _history_union()
    # same-second entries: subject before review before field, newest number first
    stmt = select(history).order_by(
        history.c.timestamp.desc(),
        history.c.source.desc(),
        history.c.version_number.desc(),
    )
    rows = db.execute(stmt).mappings().all()
    logger.debug("[history] loaded %d entries", len(rows))
    return [dict(row) for row in rows]
