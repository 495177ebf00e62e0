"""Gallery images and videos."""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from salon.core.errors import store_errors
from salon.services.media_service import MediaService
from salon.routers.deps import get_media_service, record_id_or_404, require_admin
from salon.routers.uploads import upload_errors

router = APIRouter(prefix="/api", tags=["media"])


# ---------------------- gallery ----------------------
@router.get("/gallery")
def list_gallery(media: MediaService = Depends(get_media_service)):
    return media.gallery()


@router.post("/gallery", dependencies=[Depends(require_admin)])
def add_gallery_image(
    title: str = Form(""),
    category: str = Form(""),
    image: UploadFile | None = File(None),
    media: MediaService = Depends(get_media_service),
):
    with store_errors("Failed to add image"), upload_errors(media.uploads):
        item = media.add_image(title=title, category=category, image=image)
    return {"success": True, "image": item}


@router.delete("/gallery/{image_id}", dependencies=[Depends(require_admin)])
def delete_gallery_image(image_id: str, media: MediaService = Depends(get_media_service)):
    record_id = record_id_or_404(image_id, "Image")
    with store_errors("Failed to delete image"):
        removed = media.delete_image(record_id)
    if not removed:
        raise HTTPException(404, "Image not found")
    return {"success": True}


# ---------------------- videos ----------------------
@router.get("/videos")
def list_videos(media: MediaService = Depends(get_media_service)):
    return media.videos()


@router.post("/videos", dependencies=[Depends(require_admin)])
def add_video(
    title: str = Form(""),
    description: str = Form(""),
    video: UploadFile | None = File(None),
    media: MediaService = Depends(get_media_service),
):
    with store_errors("Failed to add video"), upload_errors(media.uploads):
        item = media.add_video(title=title, description=description, video=video)
    return {"success": True, "video": item}


@router.put("/videos/{video_id}", dependencies=[Depends(require_admin)])
def update_video(
    video_id: str,
    title: str = Form(""),
    description: str = Form(""),
    video: UploadFile | None = File(None),
    media: MediaService = Depends(get_media_service),
):
    record_id = record_id_or_404(video_id, "Video")
    with store_errors("Failed to update video"), upload_errors(media.uploads):
        item = media.update_video(record_id, title=title, description=description, video=video)
    if not item:
        raise HTTPException(404, "Video not found")
    return {"success": True, "video": item}


@router.delete("/videos/{video_id}", dependencies=[Depends(require_admin)])
def delete_video(video_id: str, media: MediaService = Depends(get_media_service)):
    record_id = record_id_or_404(video_id, "Video")
    with store_errors("Failed to delete video"):
        removed = media.delete_video(record_id)
    if not removed:
        raise HTTPException(404, "Video not found")
    return {"success": True}
