import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from markupsafe import Markup
from starlette.middleware.base import BaseHTTPMiddleware

from salon.core.config import Settings, get_settings
from salon.core.errors import install_error_handlers
from salon.core.log_config import configure_logging
from salon.core.rate_limiter import RateLimiter
from salon.db.create_tables import create_all
from salon.repositories.json_storage import JsonFileStore, RecordStore
from salon.routers import admin as admin_router
from salon.routers import bookings as bookings_router
from salon.routers import catalog as catalog_router
from salon.routers import media as media_router
from salon.routers import pages as pages_router
from salon.routers import products as products_router
from salon.routers import profiles as profiles_router
from salon.routers import uploads as uploads_router
from salon.services.auth_service import AuthService
from salon.services.booking_service import BookingService
from salon.services.catalog_service import CatalogService
from salon.services.media_service import MediaService
from salon.services.product_service import ProductService
from salon.services.profile_service import ProfileService
from salon.services.session_service import SessionService
from salon.services.upload_service import UploadService

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "web")
TEMPLATES = os.path.join(BASE, "templates")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; "
            "img-src 'self' data: https:; "
            "media-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "script-src 'self'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=TEMPLATES)
    # Stored text is HTML-escaped on the way in; render it without escaping twice.
    templates.env.filters["stored"] = lambda value: Markup("" if value is None else str(value))
    return templates


def create_app(settings: Settings | None = None, store: RecordStore | None = None) -> FastAPI:
    """Build the application; ``store`` replaces the JSON files (tests pass a MemoryStore)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Salon API")
    install_error_handlers(app)
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.enable_https)

    store = store or JsonFileStore(settings.data_dir)
    store.initialize()
    sessions = SessionService(settings)
    create_all(settings.database_url)
    purged = sessions.purge_expired_sessions()
    if purged:
        logger.info("Removed %d expired admin sessions", purged)

    os.makedirs(settings.uploads_dir, exist_ok=True)
    uploads = UploadService(settings.uploads_dir, settings.max_upload_bytes)

    app.state.settings = settings
    app.state.templates = _templates()
    app.state.rate_limiter = RateLimiter()
    app.state.session_service = sessions
    app.state.upload_service = uploads
    app.state.auth_service = AuthService(store)
    app.state.product_service = ProductService(store)
    app.state.catalog_service = CatalogService(store)
    app.state.booking_service = BookingService(store, settings.whatsapp_number, settings.business_name)
    app.state.media_service = MediaService(store, uploads)
    app.state.profile_service = ProfileService(store, uploads)

    app.mount("/static", StaticFiles(directory=WEB), name="static")
    app.mount("/uploads", StaticFiles(directory=settings.uploads_dir), name="uploads")

    app.include_router(admin_router.router)
    app.include_router(uploads_router.router)
    app.include_router(products_router.router)
    app.include_router(bookings_router.router)
    app.include_router(catalog_router.router)
    app.include_router(media_router.router)
    app.include_router(profiles_router.router)
    app.include_router(pages_router.router)

    logger.info("Salon backend ready (data=%s, uploads=%s)", settings.data_dir, settings.uploads_dir)
    return app
