"""Shared router dependencies: services from app state and the admin guard."""
from __future__ import annotations

from fastapi import HTTPException, Request

from salon.core.utils import parse_record_id
from salon.db.models import AdminSession
from salon.services.auth_service import AuthService
from salon.services.booking_service import BookingService
from salon.services.catalog_service import CatalogService
from salon.services.media_service import MediaService
from salon.services.product_service import ProductService
from salon.services.profile_service import ProfileService
from salon.services.session_service import SessionService
from salon.services.upload_service import UploadService


def _state_attr(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} not configured")
    return value


def get_auth_service(request: Request) -> AuthService:
    return _state_attr(request, "auth_service")


def get_upload_service(request: Request) -> UploadService:
    return _state_attr(request, "upload_service")


def get_product_service(request: Request) -> ProductService:
    return _state_attr(request, "product_service")


def get_booking_service(request: Request) -> BookingService:
    return _state_attr(request, "booking_service")


def get_catalog_service(request: Request) -> CatalogService:
    return _state_attr(request, "catalog_service")


def get_media_service(request: Request) -> MediaService:
    return _state_attr(request, "media_service")


def get_profile_service(request: Request) -> ProfileService:
    return _state_attr(request, "profile_service")


def get_session_service(request: Request) -> SessionService:
    return _state_attr(request, "session_service")


def require_admin(request: Request) -> AdminSession:
    sess = get_session_service(request).current_session(request)
    if not sess:
        raise HTTPException(401, "Authentication required")
    return sess


def record_id_or_404(raw: str, what: str) -> int:
    record_id = parse_record_id(raw)
    if record_id is None:
        raise HTTPException(404, f"{what} not found")
    return record_id
