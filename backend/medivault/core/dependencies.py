"""
Shared dependencies for FastAPI dependency injection.
"""

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session
from medivault.core.config import get_settings, Settings
from medivault.core.database import get_db
from medivault.services.auth_service import AuthService
from medivault.services.database_service import DatabaseService
from medivault.services.storage_service import FileStorageService


def get_settings_dependency() -> Settings:
    """Dependency to get application settings."""
    return get_settings()


def get_database_service(db: Session = Depends(get_db)) -> DatabaseService:
    """Dependency to get database service instance."""
    return DatabaseService(db)


def get_file_storage(
    settings: Settings = Depends(get_settings_dependency),
) -> FileStorageService:
    """Dependency to get the upload storage service."""
    return FileStorageService(settings)


def is_authenticated(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_dependency),
) -> str:
    """
    Resolve the session cookie to the caller's user id.

    Raises:
        HTTPException: 401 when there is no live session
    """
    sid = request.cookies.get(settings.session_cookie_name)
    user_id = AuthService(db, settings).resolve_user_id(sid)
    if not user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id
