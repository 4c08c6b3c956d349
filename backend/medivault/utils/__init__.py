"""
Utils package initialization.
"""

from medivault.utils.file_utils import (
    generate_unique_filename,
    ensure_upload_dir,
    get_file_extension,
    is_allowed_mime_type,
    is_bare_filename,
    format_file_size,
)

__all__ = [
    "generate_unique_filename",
    "ensure_upload_dir",
    "get_file_extension",
    "is_allowed_mime_type",
    "is_bare_filename",
    "format_file_size",
]
