"""Waitlist schemas."""

from typing import Optional

from pydantic import BaseModel

from medivault.schemas.base import CamelModel


class WaitlistRequest(CamelModel):
    """Signup form; required fields are checked by the route."""

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    source: Optional[str] = None


class WaitlistResponse(BaseModel):
    message: str
    email: str
