import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Request
from app.errors import Conflict, NotFound, StorageError, ValidationError
from app.models import AvailabilitySummary, Booking
from app.services.availability import compute_availability
from app.services.booking_store import BookingStore
from app.services.sms_service import TwilioService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> BookingStore:
    """Booking store owned by the running app"""
    return request.app.state.store


def get_sms(request: Request) -> TwilioService:
    return request.app.state.sms


def get_clock(request: Request) -> Callable[[], datetime]:
    return request.app.state.clock


@router.get("/api/availability", response_model=list[AvailabilitySummary])
def get_availability(
    start: Optional[str] = None,
    end: Optional[str] = None,
    store: BookingStore = Depends(get_store),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    """
    Get slot availability per day.

    - start, end: ISO dates, both required, inclusive range
    """
    if not start or not end:
        raise HTTPException(status_code=400, detail="Start and end dates are required")

    try:
        return compute_availability(start, end, store.list_bookings(), now=clock())
    except ValidationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/api/bookings", response_model=list[Booking])
def list_bookings(date: Optional[str] = None, store: BookingStore = Depends(get_store)):
    """Get all bookings, optionally only those on one date"""
    return store.list_bookings(date)


@router.get("/api/bookings/{booking_id}", response_model=Booking)
def get_booking(booking_id: str, store: BookingStore = Depends(get_store)):
    """Get a booking by id"""
    try:
        return store.get_booking(booking_id)
    except NotFound as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except StorageError:
        logger.exception("Error getting booking %s", booking_id)
        raise HTTPException(status_code=500, detail="Failed to get booking")


@router.post("/api/bookings", response_model=Booking, status_code=201)
def create_booking(
    payload: Any = Body(...),
    store: BookingStore = Depends(get_store),
    sms: TwilioService = Depends(get_sms),
):
    """
    Create a booking.

    - Validate fields and reject an already booked slot
    - Persist the booking
    - Send a confirmation SMS (failures do not fail the booking)
    """
    try:
        booking = store.create_booking(payload)
    except (ValidationError, Conflict) as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except StorageError:
        logger.exception("Error creating booking")
        raise HTTPException(status_code=500, detail="Failed to create booking")

    result = sms.send_booking_confirmation(booking)
    if result.get("status") != "success":
        logger.warning("Confirmation SMS failed for booking %s: %s", booking.id, result.get("message"))

    return booking


@router.delete("/api/bookings/{booking_id}")
def delete_booking(
    booking_id: str,
    store: BookingStore = Depends(get_store),
    sms: TwilioService = Depends(get_sms),
):
    """Cancel a booking and notify the customer"""
    try:
        booking = store.delete_booking(booking_id)
    except NotFound as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except StorageError:
        logger.exception("Error deleting booking %s", booking_id)
        raise HTTPException(status_code=500, detail="Failed to delete booking")

    result = sms.send_cancellation_notice(booking)
    if result.get("status") != "success":
        logger.warning("Cancellation SMS failed for booking %s: %s", booking.id, result.get("message"))

    return {"message": "Booking deleted successfully"}


@router.get("/health")
def health_check(request: Request):
    """Health check endpoint"""
    return {"status": "ok", "app": request.app.title}
