from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from salon.core.errors import store_errors
from salon.services.upload_service import UnsupportedMediaError, UploadService, UploadTooLargeError
from salon.routers.deps import get_upload_service, require_admin

router = APIRouter(prefix="/api", tags=["uploads"])


@contextmanager
def upload_errors(uploads: UploadService) -> Iterator[None]:
    """Map rejected uploads raised inside the block to 400/413 responses."""
    try:
        yield
    except UnsupportedMediaError as exc:
        raise HTTPException(400, str(exc))
    except UploadTooLargeError:
        limit_mb = uploads.max_bytes // (1024 * 1024)
        raise HTTPException(413, f"File too large (max {limit_mb}MB)")


@router.post("/upload", dependencies=[Depends(require_admin)])
def upload_image(image: UploadFile | None = File(None), uploads: UploadService = Depends(get_upload_service)):
    if image is None or not image.filename:
        raise HTTPException(400, "No file uploaded")
    with store_errors("Upload failed"), upload_errors(uploads):
        stored = uploads.save(image)
    return {"success": True, "filename": stored.filename, "url": stored.url}
