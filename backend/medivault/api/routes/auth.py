"""Current-user and logout endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from medivault.core.config import Settings
from medivault.core.database import get_db
from medivault.core.dependencies import (
    get_database_service,
    get_settings_dependency,
    is_authenticated,
)
from medivault.schemas.user import UserResponse
from medivault.services.auth_service import AuthService
from medivault.services.database_service import DatabaseService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.get("/auth/user", response_model=UserResponse)
async def get_current_user(
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    try:
        user = db_service.get_user(user_id)
    except Exception as e:
        logger.error(f"Error fetching user: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch user")

    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/logout")
async def logout(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_dependency),
):
    """End the current session and send the browser home."""
    AuthService(db, settings).end_session(
        request.cookies.get(settings.session_cookie_name)
    )
    response = RedirectResponse(url="/")
    response.delete_cookie(settings.session_cookie_name)
    return response
