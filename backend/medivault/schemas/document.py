"""
Pydantic schemas for medical document requests and responses.
"""

import json
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from medivault.schemas.base import CamelModel


class DocumentType(str, Enum):
    """Valid medical document types."""

    LAB_RESULT = "lab_result"
    PRESCRIPTION = "prescription"
    X_RAY = "x_ray"
    CONSULTATION = "consultation"
    OTHER = "other"


def _coerce_tag_list(v):
    if v is None or v == "":
        return []
    if isinstance(v, str):
        try:
            return json.loads(v)
        except json.JSONDecodeError:
            raise ValueError("tags must be a JSON-encoded array of strings")
    return v


# ============================================================
# DOCUMENT SCHEMAS
# ============================================================


class MedicalDocumentCreate(CamelModel):
    """Validated metadata for a newly uploaded document."""

    model_config = ConfigDict(use_enum_values=True)

    user_id: str
    title: str = Field(..., min_length=1, description="Document title")
    description: Optional[str] = None
    document_type: DocumentType = Field(
        ..., description="lab_result, prescription, x_ray, consultation or other"
    )
    file_name: str = Field(..., description="Original name of the uploaded file")
    file_path: str = Field(..., description="Server-side storage location")
    file_size: str
    mime_type: str
    document_date: date = Field(..., description="Date in YYYY-MM-DD format")
    doctor_name: Optional[str] = None
    facility_name: Optional[str] = None
    tags: List[str] = Field(
        default_factory=list,
        description="Tags, sent as a JSON-encoded array in multipart bodies",
    )

    @field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, v):
        """Accept a JSON-encoded string as well as a plain list."""
        return _coerce_tag_list(v)


class MedicalDocumentResponse(CamelModel):
    """Medical document as returned by the API."""

    id: int
    user_id: str
    title: str
    description: Optional[str] = None
    document_type: str
    file_name: str
    file_path: str
    file_size: str
    mime_type: str
    document_date: date
    doctor_name: Optional[str] = None
    facility_name: Optional[str] = None
    tags: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_as_empty(cls, v):
        return v or []


# ============================================================
# GENERIC RESPONSES
# ============================================================


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class HealthCheck(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    version: str
    timestamp: datetime = Field(default_factory=datetime.now)
