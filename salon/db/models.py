"""SQLAlchemy models for server-side admin sessions."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, String, func

from .session import Base


class AdminSession(Base):
    __tablename__ = "admin_sessions"

    token = Column(String(128), primary_key=True)
    admin_id = Column(BigInteger, nullable=False)
    email = Column(String(255), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
