from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from salon.core.errors import store_errors
from salon.services.profile_service import ProfileService
from salon.routers.deps import get_profile_service, record_id_or_404, require_admin
from salon.routers.uploads import upload_errors

router = APIRouter(prefix="/api", tags=["profiles"], dependencies=[Depends(require_admin)])


@router.get("/profiles")
def list_profiles(profiles: ProfileService = Depends(get_profile_service)):
    return profiles.list()


@router.get("/profile/{profile_id}")
def get_profile(profile_id: str, profiles: ProfileService = Depends(get_profile_service)):
    record_id = record_id_or_404(profile_id, "Profile")
    profile = profiles.get(record_id)
    if not profile:
        raise HTTPException(404, "Profile not found")
    return profile


@router.post("/profile")
def save_profile(
    userId: str = Form(""),
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    bio: str = Form(""),
    deletePhoto: str = Form(""),
    photo: UploadFile | None = File(None),
    profiles: ProfileService = Depends(get_profile_service),
):
    with store_errors("Failed to save profile"), upload_errors(profiles.uploads):
        profile = profiles.save(
            userId,
            name=name,
            email=email,
            phone=phone,
            bio=bio,
            delete_photo=deletePhoto,
            photo=photo,
        )
    if not profile:
        raise HTTPException(404, "Profile not found")
    return {"success": True, "profile": profile}


@router.delete("/profile/{profile_id}/photo")
def delete_profile_photo(profile_id: str, profiles: ProfileService = Depends(get_profile_service)):
    record_id = record_id_or_404(profile_id, "Profile")
    with store_errors("Failed to delete photo"):
        profile = profiles.clear_photo(record_id)
    if not profile:
        raise HTTPException(404, "Profile not found")
    return {"success": True, "profile": profile}
