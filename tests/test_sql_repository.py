"""
Smoke tests for admin session persistence against a temporary SQLite database.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import inspect

from salon.core.config import get_settings
from salon.db import create_tables
from salon.db.create_tables import create_all
from salon.db.session import get_engine
from salon.repositories.sql_repository import SQLRepository
from salon.services.session_service import SessionService


@pytest.fixture()
def temp_db(app_env):
    create_all()
    return app_env


@pytest.fixture()
def sessions(temp_db):
    return SessionService(get_settings())


def test_admin_session(temp_db):
    repo = SQLRepository()
    expires = datetime.now(timezone.utc) + timedelta(hours=1)
    tok = repo.create_admin_session(1714558830123, "admin@example.com", expires)

    sess = repo.get_admin_session(tok)
    assert sess is not None
    assert sess.email == "admin@example.com"
    assert sess.admin_id == 1714558830123

    repo.delete_admin_session(tok)
    assert repo.get_admin_session(tok) is None


def test_expired_session_is_dropped_on_lookup(sessions):
    repo = SQLRepository()
    tok = repo.create_admin_session(1, "old@example.com", datetime.now(timezone.utc) - timedelta(minutes=1))

    assert sessions.load_session(tok) is None
    assert repo.get_admin_session(tok) is None


def test_issue_session_uses_configured_ttl(sessions):
    tok = sessions.issue_session({"id": 5, "email": "a@example.com"})

    sess = sessions.load_session(tok)
    assert sess is not None
    expires_at = sess.expires_at if sess.expires_at.tzinfo else sess.expires_at.replace(tzinfo=timezone.utc)
    remaining = expires_at - datetime.now(timezone.utc)
    assert timedelta(hours=1, minutes=59) < remaining <= timedelta(hours=2)


def test_purge_removes_only_expired(temp_db):
    repo = SQLRepository()
    now = datetime.now(timezone.utc)
    live = repo.create_admin_session(1, "a@example.com", now + timedelta(hours=1))
    dead = repo.create_admin_session(2, "b@example.com", now - timedelta(hours=1))

    assert repo.delete_expired_sessions() == 1
    assert repo.get_admin_session(live) is not None
    assert repo.get_admin_session(dead) is None


def test_session_service_writes_to_its_own_database(app_env):
    url = f"sqlite:///{app_env / 'other.db'}"
    create_all(url)
    sessions = SessionService(replace(get_settings(), database_url=url, session_ttl_seconds=300))

    tok = sessions.issue_session({"id": 7, "email": "b@example.com"})

    assert SQLRepository(url).get_admin_session(tok) is not None
    assert not (app_env / "sessions.db").exists()


def test_create_tables_command_accepts_database_url(app_env):
    url = f"sqlite:///{app_env / 'nested' / 'cli.db'}"

    create_tables.main(["--database-url", url])

    assert "admin_sessions" in inspect(get_engine(url)).get_table_names()
    assert not (app_env / "sessions.db").exists()


def test_create_tables_command_defaults_to_configured_url(app_env):
    create_tables.main([])

    assert (app_env / "sessions.db").exists()
    assert "admin_sessions" in inspect(get_engine()).get_table_names()
