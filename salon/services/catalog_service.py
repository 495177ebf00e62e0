"""Salon service menu (the ``services`` table)."""
from __future__ import annotations

from dataclasses import dataclass

from salon.core.utils import sanitize_text
from salon.repositories.json_storage import RecordStore

TABLE = "services"


@dataclass
class CatalogService:
    store: RecordStore

    def list(self) -> list[dict]:
        return self.store.read(TABLE)

    def create(self, name: str, description: str = "", price: float | None = None, duration: str = "") -> dict:
        return self.store.insert(
            TABLE,
            {
                "name": sanitize_text(name),
                "description": sanitize_text(description or ""),
                "price": price,
                "duration": sanitize_text(duration or ""),
            },
        )

    def delete(self, service_id: int) -> bool:
        return self.store.delete(TABLE, service_id)
