"""Domain helpers for table names, record ids and timestamps."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

TABLES = (
    "admins",
    "products",
    "services",
    "bookings",
    "gallery",
    "videos",
    "profiles",
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``2024-05-01T10:20:30.123Z``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def millis(moment: datetime) -> int:
    """Milliseconds since the Unix epoch, computed without float rounding."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    delta = moment - EPOCH
    return (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000


def canonical_id(value: Any) -> str | None:
    """
    Canonical string form of a record id.

    Numbers and their string spellings collapse to the same key so that
    ``5``, ``5.0`` and ``"5"`` all identify the same record.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    text = str(value).strip()
    if not text:
        return None
    try:
        return str(int(text))
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return text
    return str(int(number)) if number.is_integer() else repr(number)


def same_id(left: Any, right: Any) -> bool:
    key = canonical_id(left)
    return key is not None and key == canonical_id(right)
