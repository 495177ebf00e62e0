from __future__ import annotations

from urllib.parse import parse_qs, urlparse

BOOKING = {
    "customer_name": "Ada Obi",
    "customer_phone": "+234 800 000 0000",
    "service_name": "Wig installation",
    "booking_date": "2024-06-01",
    "booking_time": "14:30",
    "notes": "First visit & excited",
}


def _whatsapp_text(url: str) -> str:
    parsed = urlparse(url)
    assert parsed.netloc == "wa.me"
    assert parsed.path == "/2348167559196"
    return parse_qs(parsed.query)["text"][0]


def test_public_booking_is_stored_as_pending(client):
    res = client.post("/api/bookings", json=BOOKING)

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    booking = body["booking"]
    assert booking["status"] == "pending"
    assert booking["notes"] == "First visit &amp; excited"
    assert booking["customer_email"] == ""
    text = _whatsapp_text(body["whatsapp_url"])
    assert text.startswith("Hello! I would like to book an appointment at Deny's Beauty World:")
    assert "Notes: First visit & excited" in text


def test_booking_requires_contact_and_slot(client):
    res = client.post("/api/bookings", json={"customer_name": "Ada"})

    assert res.status_code == 400
    assert res.json()["error"].startswith("Missing required fields: customer_phone")


def test_listing_bookings_is_admin_only(client):
    assert client.get("/api/bookings").status_code == 401


def test_admin_updates_booking_status(admin_client):
    booking = admin_client.post("/api/bookings", json=BOOKING).json()["booking"]

    res = admin_client.put(f"/api/bookings/{booking['id']}", json={"status": "Confirmed"})

    assert res.status_code == 200
    assert res.json()["booking"]["status"] == "confirmed"
    assert admin_client.get("/api/bookings").json()[0]["status"] == "confirmed"


def test_invalid_status_and_unknown_booking(admin_client):
    booking = admin_client.post("/api/bookings", json=BOOKING).json()["booking"]

    assert admin_client.put(f"/api/bookings/{booking['id']}", json={"status": "lost"}).status_code == 400
    assert admin_client.put("/api/bookings/1", json={"status": "completed"}).status_code == 404


def test_delete_all_bookings(admin_client):
    admin_client.post("/api/bookings", json=BOOKING)
    admin_client.post("/api/bookings", json=BOOKING)

    res = admin_client.delete("/api/bookings/all")

    assert res.json() == {"success": True}
    assert admin_client.get("/api/bookings").json() == []


def test_booking_form_redirects_to_whatsapp(client):
    res = client.post(
        "/book",
        data={"name": "Ada", "phone": "0800", "service": "Styling", "date": "2024-06-01", "time": "10:00"},
        follow_redirects=False,
    )

    assert res.status_code == 303
    text = _whatsapp_text(res.headers["location"])
    assert "Name: Ada\nPhone: 0800\nService: Styling\nDate: 2024-06-01\nTime: 10:00" in text
    assert "Notes:" not in text


def test_booking_form_with_missing_fields_rerenders(client):
    res = client.post("/book", data={"name": "Ada"}, follow_redirects=False)

    assert res.status_code == 400
    assert "Please fill in all required fields" in res.text
    assert 'value="Ada"' in res.text
