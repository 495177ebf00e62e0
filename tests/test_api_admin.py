from __future__ import annotations

import json
from dataclasses import replace

from fastapi.testclient import TestClient

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD
from salon.app import create_app
from salon.core.config import get_settings


def test_first_admin_can_be_created_without_session(client, app_env):
    res = client.post(
        "/api/admin/create",
        json={"email": "First@Example.com", "password": "abcdef", "full_name": "First Admin"},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["admin"]["email"] == "first@example.com"
    assert "password" not in body["admin"]

    stored = json.loads((app_env / "data" / "admins.json").read_text(encoding="utf-8"))
    assert stored[0]["password"].startswith("argon2$")
    assert stored[0]["provider"] == "email"


def test_create_requires_all_fields(client):
    res = client.post("/api/admin/create", json={"email": "a@b.co", "password": "abcdef"})

    assert res.status_code == 400
    assert res.json() == {"error": "All fields required"}


def test_second_admin_needs_authenticated_admin(admin_client):
    admin_client.post("/api/admin/logout")
    payload = {"email": "second@example.com", "password": "abcdef", "full_name": "Second"}

    assert admin_client.post("/api/admin/create", json=payload).status_code == 401

    admin_client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert admin_client.post("/api/admin/create", json=payload).status_code == 200


def test_duplicate_admin_is_rejected(admin_client):
    res = admin_client.post(
        "/api/admin/create",
        json={"email": ADMIN_EMAIL.upper(), "password": "abcdef", "full_name": "Again"},
    )

    assert res.status_code == 400
    assert res.json()["error"] == "Admin already exists"


def test_login_validates_input(client):
    res = client.post("/api/admin/login", json={"email": "not-an-email", "password": "123"})

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid input"
    assert {d["field"] for d in body["details"]} == {"email", "password"}


def test_login_with_wrong_password_is_401(admin_client):
    admin_client.post("/api/admin/logout")

    res = admin_client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": "wrong-pass"})

    assert res.status_code == 401
    assert res.json() == {"error": "Invalid credentials"}


def test_login_sets_session_cookie_and_me_returns_admin(client):
    client.post(
        "/api/admin/create",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD, "full_name": "Deny <Owner>"},
    )

    res = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    assert res.status_code == 200
    assert "admin_session" in res.cookies
    cookie_header = res.headers["set-cookie"].lower()
    assert "httponly" in cookie_header
    assert "samesite=strict" in cookie_header
    assert res.json()["admin"]["full_name"] == "Deny &lt;Owner&gt;"

    me = client.get("/api/admin/me")
    assert me.status_code == 200
    assert me.json()["admin"]["email"] == ADMIN_EMAIL


def test_logout_ends_the_session(admin_client):
    assert admin_client.get("/api/admin/me").status_code == 200

    res = admin_client.post("/api/admin/logout")

    assert res.json() == {"success": True}
    assert admin_client.get("/api/admin/me").status_code == 401


def test_login_is_rate_limited_per_client(client):
    for _ in range(5):
        res = client.post("/api/admin/login", json={"email": "who@example.com", "password": "whatever"})
        assert res.status_code == 401

    res = client.post("/api/admin/login", json={"email": "who@example.com", "password": "whatever"})

    assert res.status_code == 429
    assert "Too many login attempts" in res.json()["error"]


def test_forwarded_for_header_does_not_reset_the_login_limit(client):
    for n in range(5):
        res = client.post(
            "/api/admin/login",
            json={"email": "who@example.com", "password": "whatever"},
            headers={"X-Forwarded-For": f"10.0.0.{n}"},
        )
        assert res.status_code == 401

    res = client.post(
        "/api/admin/login",
        json={"email": "who@example.com", "password": "whatever"},
        headers={"X-Forwarded-For": "10.0.0.99"},
    )

    assert res.status_code == 429


def test_forwarded_for_is_honoured_behind_trusted_proxy(app_env, monkeypatch):
    monkeypatch.setenv("TRUST_PROXY", "true")
    get_settings.cache_clear()
    with TestClient(create_app()) as client:
        for _ in range(5):
            res = client.post(
                "/api/admin/login",
                json={"email": "who@example.com", "password": "whatever"},
                headers={"X-Forwarded-For": "203.0.113.7"},
            )
            assert res.status_code == 401

        blocked = client.post(
            "/api/admin/login",
            json={"email": "who@example.com", "password": "whatever"},
            headers={"X-Forwarded-For": "203.0.113.7"},
        )
        other = client.post(
            "/api/admin/login",
            json={"email": "who@example.com", "password": "whatever"},
            headers={"X-Forwarded-For": "203.0.113.8"},
        )

    assert blocked.status_code == 429
    assert other.status_code == 401


def test_malformed_login_bodies_count_towards_the_limit(client):
    for _ in range(5):
        res = client.post("/api/admin/login", json={"email": "nope", "password": "1"})
        assert res.status_code == 400

    res = client.post("/api/admin/login", json={"email": "nope", "password": "1"})

    assert res.status_code == 429


def test_app_sessions_follow_the_settings_passed_to_create_app(app_env):
    custom_db = app_env / "custom.db"
    settings = replace(get_settings(), database_url=f"sqlite:///{custom_db}", session_ttl_seconds=120)

    with TestClient(create_app(settings=settings)) as client:
        client.post(
            "/api/admin/create",
            json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD, "full_name": "Deny Owner"},
        )
        res = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

        assert res.status_code == 200
        assert "max-age=120" in res.headers["set-cookie"].lower()
        assert client.get("/api/admin/me").status_code == 200

    assert custom_db.exists()
    assert not (app_env / "sessions.db").exists()
