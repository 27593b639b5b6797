"""SQLAlchemy model package."""

from coursereview.models.user import User
from coursereview.models.catalog import Campus, Field, Level
from coursereview.models.subject import Subject, Review
from coursereview.models.version import PageVersion, SubjectVersion, SubjectReviewVersion

__all__ = [
    "User",
    "Campus", "Field", "Level",
    "Subject", "Review",
    "PageVersion", "SubjectVersion", "SubjectReviewVersion",
]
