"""Campus, field and level browsing routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursereview.config import settings
from coursereview.database import get_db
from coursereview.schemas.catalog import CampusOut, FieldOut, LevelCountOut, LevelOut
from coursereview.schemas.subject import SubjectOut
from coursereview.services import catalog_service

router = APIRouter(prefix=settings.API_PREFIX, tags=["catalog"])


@router.get("/campuses", response_model=List[CampusOut])
def list_campuses(db: Session = Depends(get_db)):
    return catalog_service.list_campuses(db)


@router.get("/campuses/{campus_name}/fields", response_model=List[FieldOut])
def list_campus_fields(campus_name: str, db: Session = Depends(get_db)):
    return catalog_service.list_fields_by_campus(db, campus_name)


@router.get("/fields/{field_id}", response_model=FieldOut)
def get_field(field_id: int, db: Session = Depends(get_db)):
    return catalog_service.get_field(db, field_id)


@router.get("/fields/{field_id}/subjects", response_model=List[SubjectOut])
def list_field_subjects(field_id: int, level_id: Optional[int] = None, db: Session = Depends(get_db)):
    catalog_service.get_field(db, field_id)
    return catalog_service.list_subjects_by_field(db, field_id, level_id)


@router.get("/fields/{field_id}/subject-counts", response_model=List[LevelCountOut])
def subject_counts(field_id: int, db: Session = Depends(get_db)):
    catalog_service.get_field(db, field_id)
    return catalog_service.subject_counts_by_level(db, field_id)


@router.get("/levels", response_model=List[LevelOut])
def list_levels(db: Session = Depends(get_db)):
    return catalog_service.list_levels(db)
