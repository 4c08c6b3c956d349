"""Waitlist signup model."""

from sqlalchemy import Column, String, Integer
from .base import Base, TimestampMixin


class WaitlistSignup(Base, TimestampMixin):
    """Someone who asked to be notified at launch."""

    __tablename__ = "waitlist_signups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String, unique=True, nullable=False, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=True)
    source = Column(String, nullable=False, default="unknown")
