"""Campus, field of study and study level models."""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from coursereview.database import Base


class Campus(Base):
    __tablename__ = "campuses"

    campus_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)

    fields = relationship("Field", back_populates="campus")


class Field(Base):
    __tablename__ = "fields"

    field_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False)
    campus_id = Column(Integer, ForeignKey("campuses.campus_id"), nullable=False)

    campus = relationship("Campus", back_populates="fields")
    subjects = relationship("Subject", back_populates="field")


class Level(Base):
    __tablename__ = "levels"

    level_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
