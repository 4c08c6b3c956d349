"""
File handling utilities.
"""

import os
import uuid
from pathlib import Path
from typing import Iterable


def generate_unique_filename(original_filename: str) -> str:
    """
    Generate a unique filename using UUID.

    Args:
        original_filename: Original name of the file

    Returns:
        Unique filename with original extension
    """
    extension = get_file_extension(original_filename or "")
    unique_id = str(uuid.uuid4())
    return f"{unique_id}{extension}"


def ensure_upload_dir(upload_dir: str) -> None:
    """
    Ensure upload directory exists.

    Args:
        upload_dir: Path to the upload directory
    """
    os.makedirs(upload_dir, exist_ok=True)


def get_file_extension(filename: str) -> str:
    """
    Get file extension in lowercase.

    Args:
        filename: Name of the file

    Returns:
        File extension (e.g., '.pdf', '.jpg')
    """
    return Path(filename).suffix.lower()


def is_allowed_mime_type(mime_type: str, allowed_mime_types: Iterable[str]) -> bool:
    """
    Check if a MIME type is on the allowlist.

    Args:
        mime_type: Content type reported for the upload
        allowed_mime_types: Accepted content types

    Returns:
        True if the content type is allowed, False otherwise
    """
    return bool(mime_type) and mime_type in set(allowed_mime_types)


def is_bare_filename(filename: str) -> bool:
    """True if ``filename`` has no directory component and is not a dot entry."""
    if not filename or filename in (".", ".."):
        return False
    return "/" not in filename and "\\" not in filename and "\x00" not in filename


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., '2.45 MB')
    """
    for unit in ["B", "KB", "MB", "GB"]:
        if size_bytes < 1024.0:
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.2f} TB"
