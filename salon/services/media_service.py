"""
Gallery images and videos.

Files are written to disk before the record is stored. If the store write
then fails the file stays behind unreferenced; nothing reconciles the two.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import UploadFile

from salon.core.utils import sanitize_text
from salon.repositories.json_storage import RecordStore
from salon.services.upload_service import UploadService

GALLERY = "gallery"
VIDEOS = "videos"


@dataclass
class MediaService:
    store: RecordStore
    uploads: UploadService

    # -------------------------------------- gallery --------------------------------------
    def gallery(self) -> list[dict]:
        return self.store.read(GALLERY)

    def add_image(self, title: str = "", category: str = "", image: Optional[UploadFile] = None) -> dict:
        stored = self.uploads.save_optional(image)
        return self.store.insert(
            GALLERY,
            {
                "title": sanitize_text(title or "Untitled Image"),
                "image_url": stored.url if stored else "",
                "category": sanitize_text(category or "styling"),
            },
        )

    def delete_image(self, image_id: int) -> bool:
        return self.store.delete(GALLERY, image_id)

    # -------------------------------------- videos --------------------------------------
    def videos(self) -> list[dict]:
        return self.store.read(VIDEOS)

    def add_video(self, title: str = "", description: str = "", video: Optional[UploadFile] = None) -> dict:
        stored = self.uploads.save_optional(video)
        return self.store.insert(
            VIDEOS,
            {
                "title": sanitize_text(title or "Untitled Video"),
                "video_url": stored.url if stored else "",
                "thumbnail_url": "",
                "description": sanitize_text(description or ""),
            },
        )

    def update_video(
        self,
        video_id: int,
        title: str = "",
        description: str = "",
        video: Optional[UploadFile] = None,
    ) -> Optional[dict]:
        existing = self.store.find_by_id(VIDEOS, video_id)
        if not existing:
            return None
        stored = self.uploads.save_optional(video)
        return self.store.update(
            VIDEOS,
            video_id,
            {
                "title": sanitize_text(title) if title else existing.get("title", ""),
                "description": sanitize_text(description) if description else existing.get("description", ""),
                "video_url": stored.url if stored else existing.get("video_url", ""),
            },
        )

    def delete_video(self, video_id: int) -> bool:
        return self.store.delete(VIDEOS, video_id)
