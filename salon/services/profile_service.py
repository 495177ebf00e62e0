"""Admin profile cards shown on the dashboard (the ``profiles`` table)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import UploadFile

from salon.core.utils import sanitize_text
from salon.repositories.json_storage import RecordStore
from salon.services.upload_service import UploadService

TABLE = "profiles"


def _truthy(value: str | bool | None) -> bool:
    if isinstance(value, bool):
        return value
    return (value or "").strip().lower() == "true"


@dataclass
class ProfileService:
    store: RecordStore
    uploads: UploadService

    def list(self) -> list[dict]:
        return self.store.read(TABLE)

    def get(self, profile_id: int) -> Optional[dict]:
        return self.store.find_by_id(TABLE, profile_id)

    def find_by_user(self, user_id: str) -> Optional[dict]:
        for profile in self.store.read(TABLE):
            if profile.get("userId") == user_id:
                return profile
        return None

    def save(
        self,
        user_id: str,
        name: str = "",
        email: str = "",
        phone: str = "",
        bio: str = "",
        delete_photo: str | bool | None = None,
        photo: Optional[UploadFile] = None,
    ) -> Optional[dict]:
        """Create the profile for ``user_id`` or update the existing one."""
        stored = self.uploads.save_optional(photo)
        photo_url = stored.url if stored else ""
        drop_photo = _truthy(delete_photo)
        existing = self.find_by_user(user_id)
        if existing:
            return self.store.update(
                TABLE,
                existing["id"],
                {
                    "name": sanitize_text(name) if name else existing.get("name", ""),
                    "email": sanitize_text(email) if email else existing.get("email", ""),
                    "phone": sanitize_text(phone) if phone else existing.get("phone", ""),
                    "bio": sanitize_text(bio) if bio else existing.get("bio", ""),
                    "photo_url": "" if drop_photo else (photo_url or existing.get("photo_url", "")),
                },
            )
        return self.store.insert(
            TABLE,
            {
                "userId": user_id,
                "name": sanitize_text(name or "Admin"),
                "email": sanitize_text(email or "admin@example.com"),
                "phone": sanitize_text(phone or ""),
                "bio": sanitize_text(bio or ""),
                "photo_url": "" if drop_photo else photo_url,
            },
        )

    def clear_photo(self, profile_id: int) -> Optional[dict]:
        if not self.store.find_by_id(TABLE, profile_id):
            return None
        return self.store.update(TABLE, profile_id, {"photo_url": ""})
