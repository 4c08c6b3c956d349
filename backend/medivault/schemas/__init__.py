"""
Schemas package initialization.
"""

from medivault.schemas.document import (
    DocumentType,
    MedicalDocumentCreate,
    MedicalDocumentResponse,
    MessageResponse,
    HealthCheck,
)
from medivault.schemas.symptom import SymptomCreate, SymptomUpdate, SymptomResponse
from medivault.schemas.user import UpsertUser, UserResponse
from medivault.schemas.waitlist import WaitlistRequest, WaitlistResponse

__all__ = [
    "DocumentType",
    "MedicalDocumentCreate",
    "MedicalDocumentResponse",
    "MessageResponse",
    "HealthCheck",
    "SymptomCreate",
    "SymptomUpdate",
    "SymptomResponse",
    "UpsertUser",
    "UserResponse",
    "WaitlistRequest",
    "WaitlistResponse",
]
