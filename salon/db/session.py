"""Engine/session helpers for the admin session database."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from salon.core.config import get_settings

Base = declarative_base()

# One engine and sessionmaker per database URL.
_engines: dict[str, Engine] = {}
_sessionmakers: dict[str, sessionmaker] = {}
_lock = threading.Lock()


def _resolve_url(database_url: str | None) -> str:
    url = (database_url or get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to store admin sessions.")
    return url


def get_engine(database_url: str | None = None) -> Engine:
    """Engine for ``database_url``, falling back to the configured DATABASE_URL."""
    url = _resolve_url(database_url)
    with _lock:
        engine = _engines.get(url)
        if engine is None:
            if url.startswith("sqlite:///"):
                Path(url[len("sqlite:///") :]).parent.mkdir(parents=True, exist_ok=True)
                engine = create_engine(url, future=True, connect_args={"check_same_thread": False})
            else:
                engine = create_engine(url, future=True, pool_pre_ping=True)
            _engines[url] = engine
        return engine


def _get_sessionmaker(database_url: str | None = None) -> sessionmaker:
    url = _resolve_url(database_url)
    engine = get_engine(url)
    with _lock:
        maker = _sessionmakers.get(url)
        if maker is None:
            maker = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True, expire_on_commit=False)
            _sessionmakers[url] = maker
        return maker


def dispose_engines() -> None:
    """Close every pooled connection and forget cached engines."""
    with _lock:
        for engine in _engines.values():
            engine.dispose()
        _engines.clear()
        _sessionmakers.clear()


@contextmanager
def get_session(database_url: str | None = None) -> Session:
    session: Session = _get_sessionmaker(database_url)()
    try:
        yield session
    finally:
        session.close()
