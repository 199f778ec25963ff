"""
Booking endpoints: placement, lookup, status, tracking and cancellation.
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_booking_service
from api.schemas import BookingCreateRequest, StatusUpdateRequest, TrackingEventRequest
from features.booking import BookingService
from utils.response import standard_response

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("")
def create_booking(body: BookingCreateRequest, service: BookingService = Depends(get_booking_service)):
    booking_id = service.create_booking(body.model_dump(by_alias=True))
    return standard_response(True, message="Booking created successfully", bookingId=booking_id)


@router.get("/user/{email}")
def list_user_bookings(
    email: str,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    service: BookingService = Depends(get_booking_service),
):
    result = service.list_user_bookings(email, page=page, limit=limit)
    return standard_response(
        True,
        data=result["data"],
        total=result["total"],
        page=result["page"],
        limit=result["limit"],
    )


@router.get("/{booking_id}")
def get_booking(booking_id: str, service: BookingService = Depends(get_booking_service)):
    return standard_response(True, data=service.get_booking(booking_id))


@router.patch("/{booking_id}/status")
def update_booking_status(
    booking_id: str,
    body: StatusUpdateRequest,
    service: BookingService = Depends(get_booking_service),
):
    service.update_status(booking_id, body.status)
    return standard_response(True, message="Booking status updated successfully")


@router.post("/{booking_id}/tracking")
def add_tracking_event(
    booking_id: str,
    body: TrackingEventRequest,
    service: BookingService = Depends(get_booking_service),
):
    service.add_tracking_event(booking_id, body.model_dump())
    return standard_response(True, message="Tracking info added successfully")


@router.delete("/{booking_id}")
def cancel_booking(booking_id: str, service: BookingService = Depends(get_booking_service)):
    service.cancel_booking(booking_id)
    return standard_response(True, message="Booking cancelled successfully")
