"""Server-side session storage."""

from sqlalchemy import Column, String, DateTime, JSON, Index
from .base import Base


class Session(Base):
    """
    Login session keyed by session id.

    ``sess`` holds the serialized session payload written at login, including
    the authenticated claims (``{"user": {"claims": {"sub": ...}}}``).
    """

    __tablename__ = "sessions"

    sid = Column(String, primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime, nullable=False)

    __table_args__ = (Index("IDX_session_expire", "expire"),)
