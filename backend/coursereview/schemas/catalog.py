"""Campus, field and level response contracts."""

from pydantic import BaseModel
from typing import Optional


class CampusOut(BaseModel):
    campus_id: int
    name: str

    model_config = {"from_attributes": True}


class FieldOut(BaseModel):
    field_id: int
    name: str
    campus_id: int

    model_config = {"from_attributes": True}


class LevelOut(BaseModel):
    level_id: int
    name: str

    model_config = {"from_attributes": True}


class LevelCountOut(BaseModel):
    level_id: Optional[int]
    count: int
