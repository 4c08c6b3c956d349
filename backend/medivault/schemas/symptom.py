"""
Pydantic schemas for symptom tracking.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator

from medivault.schemas.base import CamelModel

SEVERITY_MIN = 1
SEVERITY_MAX = 10


def _none_as_empty(v):
    return [] if v is None else v


class SymptomCreate(CamelModel):
    """Request body for logging a symptom."""

    symptom_name: str = Field(..., min_length=1)
    severity: int = Field(..., ge=SEVERITY_MIN, le=SEVERITY_MAX, description="1-10 scale")
    description: Optional[str] = None
    location: Optional[str] = Field(None, description="Body part/area")
    duration: Optional[str] = Field(None, description="minutes, hours, days")
    triggers: List[str] = Field(default_factory=list)
    medications: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    date_recorded: date
    time_of_day: Optional[str] = Field(
        None, description="morning, afternoon, evening or night"
    )

    @field_validator("triggers", "medications", mode="before")
    @classmethod
    def null_list_as_empty(cls, v):
        return _none_as_empty(v)


class SymptomUpdate(CamelModel):
    """Partial update; only fields present in the body are applied."""

    symptom_name: Optional[str] = Field(None, min_length=1)
    severity: Optional[int] = Field(None, ge=SEVERITY_MIN, le=SEVERITY_MAX)
    description: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    triggers: Optional[List[str]] = None
    medications: Optional[List[str]] = None
    notes: Optional[str] = None
    date_recorded: Optional[date] = None
    time_of_day: Optional[str] = None

    @field_validator("symptom_name", "severity", "date_recorded")
    @classmethod
    def required_columns_not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class SymptomResponse(CamelModel):
    """Symptom as returned by the API."""

    id: int
    user_id: str
    symptom_name: str
    severity: int
    description: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    triggers: List[str] = []
    medications: List[str] = []
    notes: Optional[str] = None
    date_recorded: date
    time_of_day: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("triggers", "medications", mode="before")
    @classmethod
    def null_list_as_empty(cls, v):
        return _none_as_empty(v)
