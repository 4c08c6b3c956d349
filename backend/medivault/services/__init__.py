"""Services package."""

from .database_service import DatabaseService
from .storage_service import (
    FileStorageService,
    StoredFile,
    UploadRejectedError,
    UnsupportedFileTypeError,
    FileTooLargeError,
)
from .auth_service import AuthService

__all__ = [
    "DatabaseService",
    "FileStorageService",
    "StoredFile",
    "UploadRejectedError",
    "UnsupportedFileTypeError",
    "FileTooLargeError",
    "AuthService",
]
