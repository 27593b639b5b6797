"""Subject and Review models."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from coursereview.database import Base


class Subject(Base):
    __tablename__ = "subjects"

    subject_id = Column(String(20), primary_key=True)  # course code, e.g. TDT4120
    name = Column(String(200), nullable=False)
    field_id = Column(Integer, ForeignKey("fields.field_id"), nullable=False, index=True)
    level_id = Column(Integer, ForeignKey("levels.level_id"), nullable=True)
    description = Column(Text)
    view_count = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime, server_default=func.now())

    field = relationship("Field", back_populates="subjects")
    level = relationship("Level")
    reviews = relationship(
        "Review",
        back_populates="subject",
        cascade="all, delete-orphan",
        order_by="Review.review_id.desc()",
    )


class Review(Base):
    __tablename__ = "reviews"

    review_id = Column(Integer, primary_key=True, autoincrement=True)
    subject_id = Column(String(20), ForeignKey("subjects.subject_id"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    stars = Column(Integer, nullable=False)
    submitter_name = Column(String(100))  # None for anonymous reviews
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    subject = relationship("Subject", back_populates="reviews")
    author = relationship("User", back_populates="reviews")

    __table_args__ = (
        CheckConstraint("stars BETWEEN 1 AND 5", name="ck_reviews_stars_range"),
    )
