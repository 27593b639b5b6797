"""Read-only lookups for campuses, fields of study and study levels."""

from typing import Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from coursereview.models.catalog import Campus, Field, Level
from coursereview.models.subject import Subject


def list_campuses(db: Session) -> List[Campus]:
    return db.query(Campus).order_by(Campus.name.asc()).all()


def list_fields_by_campus(db: Session, campus_name: str) -> List[Field]:
    campus = db.query(Campus).filter(Campus.name == campus_name).first()
    if not campus:
        raise HTTPException(status_code=404, detail="Campus not found")
    return db.query(Field).filter(Field.campus_id == campus.campus_id).order_by(Field.name.asc()).all()


def get_field(db: Session, field_id: int) -> Field:
    field = db.query(Field).filter(Field.field_id == field_id).first()
    if not field:
        raise HTTPException(status_code=404, detail="Field not found")
    return field


def list_subjects_by_field(db: Session, field_id: int, level_id: Optional[int] = None) -> List[Subject]:
    q = db.query(Subject).filter(Subject.field_id == field_id)
    if level_id is not None:
        q = q.filter(Subject.level_id == level_id)
    return q.order_by(Subject.subject_id.asc()).all()


def subject_counts_by_level(db: Session, field_id: int) -> List[Dict]:
    rows = (
        db.query(Subject.level_id, func.count(Subject.subject_id))
        .filter(Subject.field_id == field_id, Subject.level_id.isnot(None))
        .group_by(Subject.level_id)
        .order_by(Subject.level_id.asc())
        .all()
    )
    counts = [{"level_id": level_id, "count": int(count)} for level_id, count in rows]
    # grand total row, level_id None; counts subjects without a level too
    total = db.query(func.count(Subject.subject_id)).filter(Subject.field_id == field_id).scalar()
    counts.append({"level_id": None, "count": int(total or 0)})
    return counts


def list_levels(db: Session) -> List[Level]:
    return db.query(Level).order_by(Level.level_id.asc()).all()
