"""Admin session persistence backed by SQLAlchemy."""
from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete

from salon.db.models import AdminSession
from salon.db.session import get_session


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session for one database URL."""

    def __init__(self, database_url: str | None = None) -> None:
        self.database_url = database_url

    def create_admin_session(self, admin_id: int, email: str, expires_at: datetime) -> str:
        token = secrets.token_urlsafe(32)
        entity = AdminSession(token=token, admin_id=admin_id, email=email, expires_at=expires_at)
        with get_session(self.database_url) as session:
            session.add(entity)
            session.commit()
        return token

    def get_admin_session(self, token: str) -> Optional[AdminSession]:
        with get_session(self.database_url) as session:
            return session.get(AdminSession, token)

    def delete_admin_session(self, token: str) -> None:
        with get_session(self.database_url) as session:
            session.execute(delete(AdminSession).where(AdminSession.token == token))
            session.commit()

    def delete_expired_sessions(self, now: datetime | None = None) -> int:
        cutoff = now or datetime.now(timezone.utc)
        with get_session(self.database_url) as session:
            result = session.execute(delete(AdminSession).where(AdminSession.expires_at < cutoff))
            session.commit()
            return result.rowcount or 0
