"""Admin session helpers (issue tokens, cookies, validation)."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request, Response

from salon.core.config import Settings
from salon.db.models import AdminSession
from salon.repositories.sql_repository import SQLRepository

SESSION_COOKIE_NAME = "admin_session"


def _aware(value: datetime | None) -> datetime | None:
    # SQLite hands timestamps back without tzinfo; they are stored as UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SessionService:
    """Admin sessions stored in the database and TTL named by ``settings``."""

    def __init__(self, settings: Settings, repository: SQLRepository | None = None) -> None:
        self.settings = settings
        self.repository = repository or SQLRepository(settings.database_url)

    @property
    def ttl_seconds(self) -> int:
        return max(60, self.settings.session_ttl_seconds)

    def issue_session(self, admin: dict) -> str:
        """Create a new session token for an admin record and persist it."""
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=self.ttl_seconds)
        return self.repository.create_admin_session(int(admin["id"]), admin["email"], expires_at)

    def load_session(self, token: str | None) -> Optional[AdminSession]:
        """Return the live session for ``token``; expired sessions are removed."""
        if not token:
            return None
        sess = self.repository.get_admin_session(token)
        if not sess:
            return None
        expires_at = _aware(sess.expires_at)
        if expires_at and expires_at < datetime.now(timezone.utc):
            self.repository.delete_admin_session(token)
            return None
        return sess

    def current_session(self, request: Request) -> Optional[AdminSession]:
        return self.load_session(request.cookies.get(SESSION_COOKIE_NAME))

    def set_session_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            SESSION_COOKIE_NAME,
            token,
            httponly=True,
            secure=self.settings.enable_https,
            samesite="strict",
            max_age=self.ttl_seconds,
            path="/",
        )

    def clear_session_cookie(self, response: Response) -> None:
        response.delete_cookie(SESSION_COOKIE_NAME, path="/")

    def delete_session(self, token: str | None) -> None:
        if not token:
            return
        self.repository.delete_admin_session(token)

    def purge_expired_sessions(self) -> int:
        return self.repository.delete_expired_sessions()
