"""
Medical document endpoints: upload, list, search, filter, detail, delete.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from pydantic import ValidationError

from medivault.core.dependencies import (
    get_database_service,
    get_file_storage,
    is_authenticated,
)
from medivault.core.errors import validation_error_body
from medivault.schemas.document import (
    MedicalDocumentCreate,
    MedicalDocumentResponse,
    MessageResponse,
)
from medivault.services.database_service import DatabaseService
from medivault.services.storage_service import FileStorageService, UploadRejectedError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=List[MedicalDocumentResponse])
async def list_documents(
    limit: Optional[int] = Query(None, ge=1, description="Max documents to return"),
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    """List the caller's documents, most recent document date first."""
    try:
        return db_service.get_medical_documents(user_id, limit)
    except Exception as e:
        logger.error(f"Error fetching documents: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch documents")


@router.get("/search", response_model=List[MedicalDocumentResponse])
async def search_documents(
    q: Optional[str] = Query(None, description="Text to look for"),
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    """Case-insensitive search over title, description, doctor and facility."""
    if not q:
        raise HTTPException(status_code=400, detail="Search query is required")
    try:
        return db_service.search_medical_documents(user_id, q)
    except Exception as e:
        logger.error(f"Error searching documents: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to search documents")


@router.get("/type/{document_type}", response_model=List[MedicalDocumentResponse])
async def list_documents_by_type(
    document_type: str,
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    try:
        return db_service.get_medical_documents_by_type(user_id, document_type)
    except Exception as e:
        logger.error(f"Error fetching documents by type: {e}", exc_info=True)
        raise HTTPException(
            status_code=500, detail="Failed to fetch documents by type"
        )


@router.post("", response_model=MedicalDocumentResponse, status_code=201)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    document_type: Optional[str] = Form(None, alias="documentType"),
    document_date: Optional[str] = Form(None, alias="documentDate"),
    doctor_name: Optional[str] = Form(None, alias="doctorName"),
    facility_name: Optional[str] = Form(None, alias="facilityName"),
    tags: Optional[str] = Form(None, description="JSON-encoded array of strings"),
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
    file_storage: FileStorageService = Depends(get_file_storage),
):
    """
    Upload a medical document (PDF or image) with its metadata.

    Flow:
    1. Require a file part
    2. Store it, enforcing the MIME allowlist and size limit
    3. Validate the metadata; on failure remove the stored file
    4. Save the document record
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        stored = await file_storage.save_upload(file)
    except UploadRejectedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error storing upload: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to upload document")

    # Keyed by wire name so validation errors point at the form fields
    form_fields = {
        "title": title,
        "description": description,
        "documentType": document_type,
        "documentDate": document_date,
        "doctorName": doctor_name,
        "facilityName": facility_name,
        "tags": tags,
    }
    payload = {k: v for k, v in form_fields.items() if v is not None}
    payload.update(
        userId=user_id,
        fileName=stored.original_name,
        filePath=stored.file_path,
        fileSize=str(stored.size),
        mimeType=stored.mime_type,
    )

    try:
        document_data = MedicalDocumentCreate.model_validate(payload)
    except ValidationError as e:
        await file_storage.delete_file(stored.file_path)
        raise HTTPException(status_code=400, detail=validation_error_body(e.errors()))

    try:
        document = db_service.create_medical_document(document_data)
    except Exception as e:
        db_service.db.rollback()
        await file_storage.delete_file(stored.file_path)
        logger.error(f"Error uploading document: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to upload document")

    logger.info(f"Document {document.id} uploaded by user {user_id}")
    return document


@router.get("/{document_id}", response_model=MedicalDocumentResponse)
async def get_document(
    document_id: int,
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
):
    try:
        document = db_service.get_medical_document(document_id, user_id)
    except Exception as e:
        logger.error(f"Error fetching document: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch document")

    if not document:
        raise HTTPException(status_code=404, detail="Document not found")
    return document


@router.delete("/{document_id}", response_model=MessageResponse)
async def delete_document(
    document_id: int,
    user_id: str = Depends(is_authenticated),
    db_service: DatabaseService = Depends(get_database_service),
    file_storage: FileStorageService = Depends(get_file_storage),
):
    """Delete the document row, then remove its file (best effort)."""
    try:
        document = db_service.get_medical_document(document_id, user_id)
        if not document:
            raise HTTPException(status_code=404, detail="Document not found")

        file_path = document.file_path
        deleted = db_service.delete_medical_document(document_id, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting document: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete document")

    if not deleted:
        raise HTTPException(status_code=500, detail="Failed to delete document")

    if not await file_storage.delete_file(file_path):
        logger.warning(f"Document {document_id} deleted but file {file_path} was not")
    return {"message": "Document deleted successfully"}
