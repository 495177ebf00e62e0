from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Make the salon package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from salon.core import config as core_config  # noqa: E402
from salon.db import session as db_session  # noqa: E402


class FakeClock:
    """Deterministic clock for store tests; advance it by hand."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 5, 1, 10, 20, 30, 123000, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += timedelta(milliseconds=ms)


@pytest.fixture()
def clock():
    return FakeClock()


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.dispose_engines()


@pytest.fixture()
def app_env(tmp_path, monkeypatch):
    """Point data, uploads and the session database at a temp dir and reset caches."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("UPLOADS_DIR", str(tmp_path / "uploads"))
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'sessions.db'}")
    monkeypatch.delenv("ENABLE_HTTPS", raising=False)
    monkeypatch.delenv("TRUST_PROXY", raising=False)
    monkeypatch.delenv("MAX_UPLOAD_BYTES", raising=False)
    monkeypatch.setenv("WHATSAPP_NUMBER", "2348167559196")
    monkeypatch.setenv("BUSINESS_NAME", "Deny's Beauty World")
    _reset_caches()

    yield tmp_path

    _reset_caches()


@pytest.fixture()
def app(app_env):
    from salon.app import create_app

    return create_app()


@pytest.fixture()
def client(app):
    from fastapi.testclient import TestClient

    with TestClient(app) as test_client:
        yield test_client


ADMIN_EMAIL = "owner@example.com"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture()
def admin_client(client):
    """A TestClient that carries a logged-in admin session cookie."""
    res = client.post(
        "/api/admin/create",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD, "full_name": "Deny Owner"},
    )
    assert res.status_code == 200, res.text
    res = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert res.status_code == 200, res.text
    return client
