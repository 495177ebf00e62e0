from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from salon.core.errors import store_errors
from salon.domain.schemas import ServiceCreate
from salon.services.catalog_service import CatalogService
from salon.routers.deps import get_catalog_service, record_id_or_404, require_admin

router = APIRouter(prefix="/api/services", tags=["services"])


@router.get("")
def list_services(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list()


@router.post("", dependencies=[Depends(require_admin)])
def add_service(payload: ServiceCreate, catalog: CatalogService = Depends(get_catalog_service)):
    with store_errors("Failed to add service"):
        service = catalog.create(
            name=payload.name,
            description=payload.description or "",
            price=payload.price,
            duration="" if payload.duration is None else str(payload.duration),
        )
    return {"success": True, "service": service}


@router.delete("/{service_id}", dependencies=[Depends(require_admin)])
def delete_service(service_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    record_id = record_id_or_404(service_id, "Service")
    with store_errors("Failed to delete service"):
        removed = catalog.delete(record_id)
    if not removed:
        raise HTTPException(404, "Service not found")
    return {"success": True}
