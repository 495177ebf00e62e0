"""Disk storage for uploaded images and videos."""
from __future__ import annotations

import logging
import os
import re
import secrets
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

logger = logging.getLogger(__name__)

ALLOWED_PREFIXES = ("image/", "video/")
CHUNK_SIZE = 1024 * 1024
_EXT_PATTERN = re.compile(r"\.[A-Za-z0-9]{1,10}")


class UploadError(Exception):
    """Base class for rejected uploads."""


class UnsupportedMediaError(UploadError):
    pass


class UploadTooLargeError(UploadError):
    pass


@dataclass
class StoredUpload:
    filename: str
    url: str
    path: Path


def _safe_extension(original: str | None) -> str:
    ext = os.path.splitext(os.path.basename(original or ""))[1]
    return ext.lower() if _EXT_PATTERN.fullmatch(ext) else ""


def unique_filename(original: str | None) -> str:
    """``<epoch ms>-<random>`` plus the original extension."""
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{_safe_extension(original)}"


def is_allowed_type(content_type: str | None) -> bool:
    return (content_type or "").lower().startswith(ALLOWED_PREFIXES)


class UploadService:
    """Validates media uploads and writes them under the uploads directory."""

    def __init__(self, uploads_dir: str | Path, max_bytes: int, url_prefix: str = "/uploads") -> None:
        self.uploads_dir = Path(uploads_dir)
        self.max_bytes = max_bytes
        self.url_prefix = url_prefix.rstrip("/")

    def save(self, upload: UploadFile) -> StoredUpload:
        if not is_allowed_type(upload.content_type):
            raise UnsupportedMediaError("Only image and video files are allowed!")
        self.uploads_dir.mkdir(parents=True, exist_ok=True)
        filename = unique_filename(upload.filename)
        dest = self.uploads_dir / filename
        written = 0
        try:
            with dest.open("wb") as out:
                while True:
                    chunk = upload.file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise UploadTooLargeError("File too large")
                    out.write(chunk)
        except UploadTooLargeError:
            dest.unlink(missing_ok=True)
            raise
        logger.info("Stored upload %s (%d bytes)", filename, written)
        return StoredUpload(filename=filename, url=f"{self.url_prefix}/{filename}", path=dest)

    def save_optional(self, upload: Optional[UploadFile]) -> Optional[StoredUpload]:
        """Save ``upload`` when the client actually sent a file."""
        if upload is None or not upload.filename:
            return None
        return self.save(upload)
