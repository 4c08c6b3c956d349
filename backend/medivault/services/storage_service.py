"""
Local disk storage for uploaded medical documents.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from fastapi import UploadFile

from medivault.core.config import Settings
from medivault.utils.file_utils import (
    ensure_upload_dir,
    format_file_size,
    generate_unique_filename,
    is_allowed_mime_type,
    is_bare_filename,
)

logger = logging.getLogger(__name__)


class UploadRejectedError(Exception):
    """Upload refused before any document row was created."""


class UnsupportedFileTypeError(UploadRejectedError):
    pass


class FileTooLargeError(UploadRejectedError):
    pass


@dataclass
class StoredFile:
    """A file written to the upload directory."""

    file_path: str
    original_name: str
    size: int
    mime_type: str

    @property
    def filename(self) -> str:
        return os.path.basename(self.file_path)


class FileStorageService:
    """Service for managing uploaded files in the local upload directory."""

    CHUNK_SIZE = 1024 * 1024

    def __init__(self, settings: Settings):
        """
        Initialize storage service.

        Args:
            settings: Application settings
        """
        self.upload_dir = os.path.abspath(settings.upload_dir)
        self.max_bytes = settings.max_upload_bytes
        self.allowed_mime_types = list(settings.allowed_mime_types)
        ensure_upload_dir(self.upload_dir)

    async def save_upload(self, upload: UploadFile) -> StoredFile:
        """
        Stream an upload to disk under a server-generated name.

        The content type is checked before anything is written. Once more
        than ``max_bytes`` have been read the partial file is removed.

        Args:
            upload: Multipart file part

        Returns:
            StoredFile describing the written file

        Raises:
            UnsupportedFileTypeError: content type not on the allowlist
            FileTooLargeError: upload exceeds the size limit
        """
        if not is_allowed_mime_type(upload.content_type, self.allowed_mime_types):
            raise UnsupportedFileTypeError(
                "Invalid file type. Only PDF and image files are allowed."
            )

        file_path = self.path_for(generate_unique_filename(upload.filename))
        size = 0
        try:
            with open(file_path, "wb") as out:
                while True:
                    chunk = await upload.read(self.CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise FileTooLargeError(
                            f"File too large. Maximum size: {format_file_size(self.max_bytes)}"
                        )
                    out.write(chunk)
        except Exception:
            self._remove(file_path)
            raise

        logger.info(
            "Stored upload %s as %s (%s)",
            upload.filename,
            os.path.basename(file_path),
            format_file_size(size),
        )
        return StoredFile(
            file_path=file_path,
            original_name=upload.filename or os.path.basename(file_path),
            size=size,
            mime_type=upload.content_type,
        )

    async def delete_file(self, file_path: str) -> bool:
        """
        Delete a stored file. Failures are logged, never raised.

        Args:
            file_path: Path to the file

        Returns:
            True if deleted successfully, False otherwise
        """
        return self._remove(file_path)

    def path_for(self, filename: str) -> str:
        """Location inside the upload directory for a bare filename."""
        return os.path.join(self.upload_dir, filename)

    def resolve(self, filename: str) -> Optional[str]:
        """
        Map a bare filename to an existing file in the upload directory.

        Returns:
            Absolute path, or None if the name is not a bare filename or the
            file does not exist
        """
        if not is_bare_filename(filename):
            return None
        file_path = self.path_for(filename)
        if not os.path.isfile(file_path):
            return None
        return file_path

    def _remove(self, file_path: str) -> bool:
        try:
            os.remove(file_path)
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning("Could not delete file %s: %s", file_path, e)
            return False
