"""Pydantic contracts for version recording and the history feed."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SubjectAction(str, Enum):
    EDITED = "edited"
    DELETED = "deleted"


class ReviewAction(str, Enum):
    COMMENTED = "commented on"
    EDITED_COMMENT = "edited a comment on"
    DELETED_COMMENT = "deleted a comment on"


# field-level entries always show up as additions in the history feed
FIELD_HISTORY_ACTION = "added"


class FieldVersionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(validation_alias=AliasChoices("userId", "user_id"))
    description: Optional[str] = None


class SubjectVersionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(validation_alias=AliasChoices("userId", "user_id"))
    action_type: SubjectAction = Field(validation_alias=AliasChoices("actionType", "action_type"))
    description: Optional[str] = None


class ReviewVersionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reviews: List[Dict[str, Any]] = []
    user_id: int = Field(validation_alias=AliasChoices("userId", "user_id"))
    action_type: ReviewAction = Field(validation_alias=AliasChoices("actionType", "action_type"))


class FieldVersionCreated(BaseModel):
    version: int


class SubjectVersionCreated(BaseModel):
    message: str
    version: int


class PageVersionOut(BaseModel):
    version_id: int
    field_id: int
    version_number: int
    user_id: int
    subject_ids: List[str]
    description: Optional[str]
    created_at: datetime


class SubjectVersionOut(BaseModel):
    version_id: int
    subject_id: str
    version_number: int
    user_id: int
    action_type: str
    description: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}


class ReviewVersionOut(BaseModel):
    version_id: int
    subject_id: str
    reviews: List[Dict[str, Any]]
    user_id: int
    action_type: str
    created_at: datetime


class HistoryEntryOut(BaseModel):
    version_number: int
    timestamp: datetime
    user_name: str
    action_type: str
    source: str  # field/subject/review
    entity_id: str
