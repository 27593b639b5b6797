"""Subject and review request/response contracts."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class SubjectCreate(BaseModel):
    subject_id: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=200)
    level_id: int
    description: str = Field(min_length=1)


class SubjectUpdate(BaseModel):
    level_id: Optional[int] = None
    description: Optional[str] = None


class SubjectOut(BaseModel):
    subject_id: str
    name: str
    field_id: int
    level_id: Optional[int]
    description: Optional[str]
    view_count: int

    model_config = {"from_attributes": True}


class ReviewCreate(BaseModel):
    text: str = Field(min_length=1)
    stars: int = Field(ge=1, le=5)


class ReviewUpdate(BaseModel):
    text: str = Field(min_length=1)
    stars: int = Field(ge=1, le=5)


class ReviewOut(BaseModel):
    review_id: int
    subject_id: str
    text: str
    stars: int
    submitter_name: Optional[str]
    user_id: int
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}


class SubjectDetailOut(SubjectOut):
    reviews: List[ReviewOut] = []
