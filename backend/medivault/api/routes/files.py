"""File serving endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from medivault.core.dependencies import (
    get_database_service,
    get_file_storage,
    is_authenticated,
)
from medivault.services.database_service import DatabaseService
from medivault.services.storage_service import FileStorageService

router = APIRouter(prefix="/files", tags=["files"])


@router.get("/{filename}")
async def get_file(
    filename: str,
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
    file_storage: FileStorageService = Depends(get_file_storage),
):
    """
    Stream an uploaded file back to its owner.

    Only files attached to one of the caller's documents are served; any
    other name gets the same 404 as a missing file.
    """
    file_path = file_storage.resolve(filename)
    if file_path is None:
        raise HTTPException(status_code=404, detail="File not found")

    document = db_service.get_medical_document_by_file_path(user_id, file_path)
    if document is None:
        raise HTTPException(status_code=404, detail="File not found")

    return FileResponse(file_path, media_type=document.mime_type)
