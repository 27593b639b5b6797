"""Append-only change-log models for fields, subjects and subject review lists."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.sql import func

from coursereview.database import Base


class PageVersion(Base):
    __tablename__ = "page_versions"

    version_id = Column(Integer, primary_key=True, autoincrement=True)
    field_id = Column(Integer, ForeignKey("fields.field_id"), nullable=False)
    version_number = Column(Integer, nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    subject_ids = Column(Text, nullable=False)  # JSON list of subject codes
    description = Column(Text)
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("field_id", "version_number", name="uq_page_versions_field_version"),
    )


class SubjectVersion(Base):
    __tablename__ = "subject_versions"

    version_id = Column(Integer, primary_key=True, autoincrement=True)
    # no FK: entries outlive the subject they describe
    subject_id = Column(String(20), nullable=False)
    version_number = Column(Integer, nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    action_type = Column(String(30), nullable=False)  # edited/deleted
    description = Column(Text)
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("subject_id", "version_number", name="uq_subject_versions_subject_version"),
    )


class SubjectReviewVersion(Base):
    __tablename__ = "subject_review_versions"

    version_id = Column(Integer, primary_key=True, autoincrement=True)
    subject_id = Column(String(20), nullable=False)
    reviews = Column(Text, nullable=False)  # JSON list of review dicts
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    action_type = Column(String(30), nullable=False)  # commented on/edited a comment on/deleted a comment on
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_subject_review_versions_subject", "subject_id", "created_at"),
    )
