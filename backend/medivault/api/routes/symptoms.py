"""
Symptom log endpoints.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from medivault.core.dependencies import get_database_service, is_authenticated
from medivault.schemas.document import MessageResponse
from medivault.schemas.symptom import SymptomCreate, SymptomResponse, SymptomUpdate
from medivault.services.database_service import DatabaseService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/symptoms", tags=["symptoms"])


@router.get("", response_model=List[SymptomResponse])
async def list_symptoms(
    limit: Optional[int] = Query(None, ge=1, description="Max symptoms to return"),
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    try:
        return db_service.get_symptoms(user_id, limit)
    except Exception as e:
        logger.error(f"Error fetching symptoms: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch symptoms")


@router.post("", response_model=SymptomResponse, status_code=201)
async def create_symptom(
    symptom: SymptomCreate,
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    """Log a symptom. Severity must be between 1 and 10."""
    try:
        return db_service.create_symptom(user_id, symptom)
    except Exception as e:
        db_service.db.rollback()
        logger.error(f"Error creating symptom: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create symptom")


@router.get("/search", response_model=List[SymptomResponse])
async def search_symptoms(
    q: Optional[str] = Query(None, description="Part of a symptom name"),
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    if not q:
        raise HTTPException(status_code=400, detail="Search query is required")
    try:
        return db_service.get_symptoms_by_name(user_id, q)
    except Exception as e:
        logger.error(f"Error searching symptoms: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to search symptoms")


@router.put("/{symptom_id}", response_model=SymptomResponse)
async def update_symptom(
    symptom_id: int,
    updates: SymptomUpdate,
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    """Partial update: fields left out of the body keep their values."""
    try:
        symptom = db_service.update_symptom(symptom_id, user_id, updates)
    except Exception as e:
        db_service.db.rollback()
        logger.error(f"Error updating symptom: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update symptom")

    if not symptom:
        raise HTTPException(status_code=404, detail="Symptom not found")
    return symptom


@router.delete("/{symptom_id}", response_model=MessageResponse)
async def delete_symptom(
    symptom_id: int,
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    try:
        deleted = db_service.delete_symptom(symptom_id, user_id)
    except Exception as e:
        logger.error(f"Error deleting symptom: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete symptom")

    if not deleted:
        raise HTTPException(status_code=404, detail="Symptom not found")
    return {"message": "Symptom deleted successfully"}
