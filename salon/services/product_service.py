"""Product catalogue (shop items) backed by the ``products`` table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from salon.core.utils import sanitize_text
from salon.repositories.json_storage import RecordStore

TABLE = "products"
CATEGORIES = ("revamping", "styling", "wig-installation", "retouching", "ventilation")
DEFAULT_UPDATE_CATEGORY = "wig"


@dataclass
class ProductService:
    store: RecordStore

    def list(self) -> list[dict]:
        return self.store.read(TABLE)

    def create(self, name: str, price: float, category: str, description: str = "", image_url: str = "") -> dict:
        return self.store.insert(
            TABLE,
            {
                "name": sanitize_text(name),
                "description": sanitize_text(description or ""),
                "price": float(price),
                "image_url": sanitize_text(image_url or ""),
                "category": sanitize_text(category),
                "in_stock": True,
            },
        )

    def update(
        self,
        product_id: int,
        name: str,
        price: float,
        description: str = "",
        image_url: str = "",
        category: str = "",
    ) -> Optional[dict]:
        return self.store.update(
            TABLE,
            product_id,
            {
                "name": sanitize_text(name),
                "description": sanitize_text(description or ""),
                "price": float(price),
                "image_url": sanitize_text(image_url or ""),
                "category": sanitize_text(category or DEFAULT_UPDATE_CATEGORY),
            },
        )

    def delete(self, product_id: int) -> bool:
        return self.store.delete(TABLE, product_id)
