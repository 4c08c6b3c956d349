"""User schemas."""

from datetime import datetime
from typing import Optional

from medivault.schemas.base import CamelModel


class UpsertUser(CamelModel):
    """Profile fields written on every successful login."""

    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserResponse(CamelModel):
    """Current user profile."""

    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
