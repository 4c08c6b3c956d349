"""Session-backed authentication.

The identity provider handshake lives outside this service. Once a login
succeeds, ``establish_session`` is handed the provider's claims: the user
row is upserted and a server-side session is stored in ``sessions``.
Requests carry the session id in a cookie and ``resolve_user_id`` maps it
back to the ``sub`` claim.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ..core.config import Settings
from ..models import Session
from ..schemas.user import UpsertUser
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


class AuthService:
    """Creates, resolves and ends login sessions."""

    def __init__(self, db: DBSession, settings: Settings):
        self.db = db
        self.settings = settings

    def establish_session(self, claims: dict) -> str:
        """Upsert the user described by ``claims`` and open a session for them."""
        user = DatabaseService(self.db).upsert_user(
            UpsertUser(
                id=claims["sub"],
                email=claims.get("email"),
                first_name=claims.get("first_name"),
                last_name=claims.get("last_name"),
                profile_image_url=claims.get("profile_image_url"),
            )
        )

        sid = secrets.token_urlsafe(32)
        self.db.add(
            Session(
                sid=sid,
                sess={"user": {"claims": claims}},
                expire=datetime.utcnow()
                + timedelta(hours=self.settings.session_ttl_hours),
            )
        )
        self.db.commit()
        logger.info("Session opened for user %s", user.id)
        return sid

    def resolve_user_id(self, sid: Optional[str]) -> Optional[str]:
        """User id for a live session, or None if missing or expired."""
        if not sid:
            return None
        session = (
            self.db.query(Session)
            .filter(Session.sid == sid, Session.expire > datetime.utcnow())
            .first()
        )
        if session is None:
            return None
        claims = (session.sess or {}).get("user", {}).get("claims", {})
        return claims.get("sub")

    def end_session(self, sid: Optional[str]) -> bool:
        if not sid:
            return False
        deleted = (
            self.db.query(Session)
            .filter(Session.sid == sid)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0

    def purge_expired_sessions(self) -> int:
        """Remove expired sessions; returns how many were deleted."""
        deleted = (
            self.db.query(Session)
            .filter(Session.expire <= datetime.utcnow())
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted
