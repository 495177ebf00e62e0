from __future__ import annotations


def test_services_crud(admin_client, client):
    res = admin_client.post(
        "/api/services",
        json={"name": "Ventilation", "description": "Hand-tied", "price": 80, "duration": "3h"},
    )

    assert res.status_code == 200
    service = res.json()["service"]
    assert service["duration"] == "3h"
    assert client.get("/api/services").json() == [service]

    assert admin_client.delete(f"/api/services/{service['id']}").json() == {"success": True}
    assert admin_client.delete(f"/api/services/{service['id']}").status_code == 404


def test_service_requires_name(admin_client):
    res = admin_client.post("/api/services", json={"name": "   "})

    assert res.status_code == 400
    assert res.json()["error"] == "Invalid input"


def test_service_changes_require_login(client):
    assert client.post("/api/services", json={"name": "Styling"}).status_code == 401
    assert client.delete("/api/services/1").status_code == 401
