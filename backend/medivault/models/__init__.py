"""Database models."""

from .base import Base
from .user import User
from .document import MedicalDocument, DOCUMENT_TYPES
from .symptom import Symptom
from .appointment import Appointment, APPOINTMENT_STATUSES
from .session import Session
from .waitlist import WaitlistSignup

__all__ = [
    "Base",
    "User",
    "MedicalDocument",
    "DOCUMENT_TYPES",
    "Symptom",
    "Appointment",
    "APPOINTMENT_STATUSES",
    "Session",
    "WaitlistSignup",
]
