"""Waitlist signup endpoint for the landing page."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import EmailStr, TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from medivault.core.database import get_db
from medivault.models import WaitlistSignup
from medivault.schemas.waitlist import WaitlistRequest, WaitlistResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/waitlist", tags=["waitlist"])

email_adapter = TypeAdapter(EmailStr)


@router.post("", response_model=WaitlistResponse)
async def join_waitlist(signup: WaitlistRequest, db: Session = Depends(get_db)):
    """Record a waitlist signup. Signing up twice with one email is a no-op."""
    if not signup.email or not signup.first_name:
        raise HTTPException(
            status_code=400, detail="Email and first name are required"
        )
    try:
        email_adapter.validate_python(signup.email)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid email address")

    try:
        existing = (
            db.query(WaitlistSignup)
            .filter(WaitlistSignup.email == signup.email)
            .first()
        )
        if existing is None:
            db.add(
                WaitlistSignup(
                    email=signup.email,
                    first_name=signup.first_name,
                    last_name=signup.last_name,
                    source=signup.source or "unknown",
                )
            )
            db.commit()
            logger.info(
                f"Waitlist signup: {signup.email} (source: {signup.source or 'unknown'})"
            )
    except Exception as e:
        db.rollback()
        logger.error(f"Waitlist signup error: {e}", exc_info=True)
        raise HTTPException(
            status_code=500, detail="Failed to join waitlist. Please try again."
        )

    return WaitlistResponse(
        message="Successfully joined the waitlist", email=signup.email
    )
