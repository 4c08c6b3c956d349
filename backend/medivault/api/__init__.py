"""
API routes aggregation.
"""

from fastapi import APIRouter
from medivault.api.routes.auth import router as auth_router
from medivault.api.routes.documents import router as documents_router
from medivault.api.routes.symptoms import router as symptoms_router
from medivault.api.routes.files import router as files_router
from medivault.api.routes.waitlist import router as waitlist_router

router = APIRouter()

# Include sub-routers
router.include_router(auth_router)
router.include_router(documents_router)
router.include_router(symptoms_router)
router.include_router(files_router)
router.include_router(waitlist_router)
