"""Booking use cases: persist the request and build the WhatsApp hand-off."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from salon.core.utils import sanitize_text
from salon.repositories.json_storage import RecordStore

TABLE = "bookings"
STATUSES = ("pending", "confirmed", "completed", "cancelled")
REQUIRED_FIELDS = ("customer_name", "customer_phone", "service_name", "booking_date", "booking_time")


class BookingError(Exception):
    pass


class MissingFieldsError(BookingError):
    def __init__(self, fields: list[str]):
        super().__init__(", ".join(fields))
        self.fields = fields


class InvalidStatusError(BookingError):
    pass


def whatsapp_message(booking: dict, business_name: str) -> str:
    lines = [
        f"Hello! I would like to book an appointment at {business_name}:",
        "",
        f"Name: {booking.get('customer_name', '')}",
        f"Phone: {booking.get('customer_phone', '')}",
        f"Service: {booking.get('service_name', '')}",
        f"Date: {booking.get('booking_date', '')}",
        f"Time: {booking.get('booking_time', '')}",
    ]
    notes = booking.get("notes") or ""
    if notes:
        lines.append(f"Notes: {notes}")
    return "\n".join(lines)


def whatsapp_url(number: str, message: str) -> str:
    digits = "".join(ch for ch in number or "" if ch.isdigit())
    return f"https://wa.me/{digits}?text={quote(message, safe='')}"


@dataclass
class BookingService:
    store: RecordStore
    whatsapp_number: str
    business_name: str

    def list(self) -> list[dict]:
        return self.store.read(TABLE)

    def create(
        self,
        customer_name: str,
        customer_phone: str,
        service_name: str,
        booking_date: str,
        booking_time: str,
        customer_email: str = "",
        notes: str = "",
    ) -> tuple[dict, str]:
        """Store a pending booking; returns it with its WhatsApp link."""
        raw = {
            "customer_name": (customer_name or "").strip(),
            "customer_phone": (customer_phone or "").strip(),
            "customer_email": (customer_email or "").strip(),
            "service_name": (service_name or "").strip(),
            "booking_date": (booking_date or "").strip(),
            "booking_time": (booking_time or "").strip(),
            "notes": (notes or "").strip(),
        }
        missing = [name for name in REQUIRED_FIELDS if not raw[name]]
        if missing:
            raise MissingFieldsError(missing)
        # The WhatsApp text carries what the customer typed; the stored copy is escaped.
        link = whatsapp_url(self.whatsapp_number, whatsapp_message(raw, self.business_name))
        record = {name: sanitize_text(value) for name, value in raw.items()}
        record["status"] = "pending"
        booking = self.store.insert(TABLE, record)
        return booking, link

    def set_status(self, booking_id: int, status: str) -> Optional[dict]:
        value = (status or "").strip().lower()
        if value not in STATUSES:
            raise InvalidStatusError(value)
        return self.store.update(TABLE, booking_id, {"status": value})

    def clear(self) -> None:
        self.store.write(TABLE, [])
