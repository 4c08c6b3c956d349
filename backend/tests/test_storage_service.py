"""
Test local upload storage.
"""

import asyncio
import io
import os

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from medivault.core.config import Settings
from medivault.services.storage_service import (
    FileStorageService,
    FileTooLargeError,
    UnsupportedFileTypeError,
)


def make_upload(content: bytes, filename="scan.png", mime_type="image/png") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": mime_type}),
    )


@pytest.fixture
def storage(tmp_path):
    return FileStorageService(
        Settings(upload_dir=str(tmp_path / "uploads"), max_upload_bytes=16)
    )


def test_upload_dir_created(storage):
    assert os.path.isdir(storage.upload_dir)


def test_save_upload_uses_generated_name(storage):
    stored = asyncio.run(storage.save_upload(make_upload(b"png-bytes")))

    assert stored.original_name == "scan.png"
    assert stored.filename != "scan.png"
    assert stored.filename.endswith(".png")
    assert stored.size == len(b"png-bytes")
    assert stored.mime_type == "image/png"
    with open(stored.file_path, "rb") as f:
        assert f.read() == b"png-bytes"


def test_file_at_size_limit_is_accepted(storage):
    stored = asyncio.run(storage.save_upload(make_upload(b"x" * 16)))
    assert stored.size == 16


def test_file_over_size_limit_is_rejected_and_removed(storage):
    with pytest.raises(FileTooLargeError):
        asyncio.run(storage.save_upload(make_upload(b"x" * 17)))
    assert os.listdir(storage.upload_dir) == []


def test_disallowed_type_is_rejected_before_writing(storage):
    with pytest.raises(UnsupportedFileTypeError):
        asyncio.run(
            storage.save_upload(
                make_upload(b"PK", filename="a.zip", mime_type="application/zip")
            )
        )
    assert os.listdir(storage.upload_dir) == []


def test_delete_file_is_best_effort(storage):
    stored = asyncio.run(storage.save_upload(make_upload(b"data")))
    assert asyncio.run(storage.delete_file(stored.file_path)) is True
    assert asyncio.run(storage.delete_file(stored.file_path)) is False


def test_resolve(storage):
    stored = asyncio.run(storage.save_upload(make_upload(b"data")))

    assert storage.resolve(stored.filename) == stored.file_path
    assert storage.resolve("missing.png") is None
    assert storage.resolve("../" + stored.filename) is None
