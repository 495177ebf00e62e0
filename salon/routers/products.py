from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from salon.core.errors import store_errors
from salon.domain.schemas import ProductCreate, ProductUpdate
from salon.services.product_service import ProductService
from salon.routers.deps import get_product_service, record_id_or_404, require_admin

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def list_products(products: ProductService = Depends(get_product_service)):
    return products.list()


@router.post("", dependencies=[Depends(require_admin)])
def add_product(payload: ProductCreate, products: ProductService = Depends(get_product_service)):
    with store_errors("Failed to add product"):
        product = products.create(
            name=payload.name,
            price=payload.price,
            category=payload.category,
            description=payload.description or "",
            image_url=payload.image_url or "",
        )
    return {"success": True, "product": product}


@router.put("/{product_id}", dependencies=[Depends(require_admin)])
def update_product(product_id: str, payload: ProductUpdate, products: ProductService = Depends(get_product_service)):
    record_id = record_id_or_404(product_id, "Product")
    if not (payload.name or "").strip() or not payload.price:
        raise HTTPException(400, "Name and price are required")
    with store_errors("Failed to update product"):
        product = products.update(
            record_id,
            name=payload.name.strip(),
            price=payload.price,
            description=payload.description or "",
            image_url=payload.image_url or "",
            category=payload.category or "",
        )
    if not product:
        raise HTTPException(404, "Product not found")
    return {"success": True, "product": product}


@router.delete("/{product_id}", dependencies=[Depends(require_admin)])
def delete_product(product_id: str, products: ProductService = Depends(get_product_service)):
    record_id = record_id_or_404(product_id, "Product")
    with store_errors("Failed to delete product"):
        removed = products.delete(record_id)
    if not removed:
        raise HTTPException(404, "Product not found")
    return {"success": True}
