from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from salon.core.errors import store_errors
from salon.domain.schemas import BookingCreate, BookingStatusUpdate
from salon.services.booking_service import BookingService, InvalidStatusError, MissingFieldsError, STATUSES
from salon.routers.deps import get_booking_service, record_id_or_404, require_admin

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.get("", dependencies=[Depends(require_admin)])
def list_bookings(bookings: BookingService = Depends(get_booking_service)):
    return bookings.list()


@router.post("")
def add_booking(payload: BookingCreate, bookings: BookingService = Depends(get_booking_service)):
    with store_errors("Failed to save booking"):
        try:
            booking, whatsapp_url = bookings.create(
                customer_name=payload.customer_name,
                customer_phone=payload.customer_phone,
                service_name=payload.service_name,
                booking_date=payload.booking_date,
                booking_time=payload.booking_time,
                customer_email=payload.customer_email or "",
                notes=payload.notes or "",
            )
        except MissingFieldsError as exc:
            raise HTTPException(400, f"Missing required fields: {', '.join(exc.fields)}")
    return {"success": True, "booking": booking, "whatsapp_url": whatsapp_url}


@router.delete("/all", dependencies=[Depends(require_admin)])
def delete_all_bookings(bookings: BookingService = Depends(get_booking_service)):
    with store_errors("Failed to delete all bookings"):
        bookings.clear()
    return {"success": True}


@router.put("/{booking_id}", dependencies=[Depends(require_admin)])
def update_booking(booking_id: str, payload: BookingStatusUpdate, bookings: BookingService = Depends(get_booking_service)):
    record_id = record_id_or_404(booking_id, "Booking")
    with store_errors("Failed to update booking"):
        try:
            booking = bookings.set_status(record_id, payload.status)
        except InvalidStatusError:
            raise HTTPException(400, f"Invalid status (use one of: {', '.join(STATUSES)})")
    if not booking:
        raise HTTPException(404, "Booking not found")
    return {"success": True, "booking": booking}
