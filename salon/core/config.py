"""
Configuration helpers for the salon backend.

Settings are read once from the environment (a local .env file is loaded
first) so that routers/services never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    port: int
    data_dir: str
    uploads_dir: str
    database_url: str
    session_ttl_seconds: int
    enable_https: bool
    trust_proxy: bool
    login_window_seconds: int
    max_login_attempts: int
    max_upload_bytes: int
    whatsapp_number: str
    business_name: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    load_dotenv(PROJECT_ROOT / ".env")

    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    data_dir = os.getenv("DATA_DIR") or str(PROJECT_ROOT / "data")
    uploads_dir = os.getenv("UPLOADS_DIR") or str(PROJECT_ROOT / "uploads")
    database_url = os.getenv("DATABASE_URL") or f"sqlite:///{Path(data_dir) / 'sessions.db'}"

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        port=_int(os.getenv("PORT"), 5000),
        data_dir=data_dir,
        uploads_dir=uploads_dir,
        database_url=database_url,
        session_ttl_seconds=_int(os.getenv("SESSION_MAX_AGE"), 2 * 60 * 60),
        enable_https=_bool(os.getenv("ENABLE_HTTPS"), False),
        trust_proxy=_bool(os.getenv("TRUST_PROXY"), False),
        login_window_seconds=_int(os.getenv("LOGIN_WINDOW_SECONDS"), 15 * 60),
        max_login_attempts=_int(os.getenv("MAX_LOGIN_ATTEMPTS"), 5),
        max_upload_bytes=_int(os.getenv("MAX_UPLOAD_BYTES"), 100 * 1024 * 1024),
        whatsapp_number=os.getenv("WHATSAPP_NUMBER", "2348167559196").strip().lstrip("+"),
        business_name=os.getenv("BUSINESS_NAME", "Deny's Beauty World"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
