from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ehotel.db import get_db
from ehotel.models.booking import Booking
from ehotel.schemas.booking import BookingCreate, BookingResponse, CheckInResponse, CheckInStatus
from ehotel.schemas.rental import RentalResponse
from ehotel.services.checkin import check_in
from ehotel.services.reservation import book_room
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
)


@router.post(
    "/",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Book a room",
    description="Book a room for a guest. Guests not yet on file are registered as customers.",
)
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db),
):
    """
    Book a room for a guest.

    - **sin_customer**: Guest's national identifier (123-456-789).
    - **firstname**, **lastname**, address fields: Used only when the guest is new.
    - **room_id**: ID of the room to book.
    - **start_date** / **end_date**: Stay, end on or after start.

    Returns the created booking.
    """
    logger.debug(f"Creating booking for customer: {booking.sin_customer}, room_id: {booking.room_id}")

    db_booking = book_room(db, booking)
    if db_booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return db_booking


@router.get(
    "/",
    response_model=List[BookingResponse],
    summary="List all bookings",
    description="Retrieve a paginated list of bookings."
)
def get_bookings(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    """
    Retrieve a list of all bookings.

    - **skip**: Number of bookings to skip.
    - **limit**: Maximum number of bookings to return.
    """
    bookings = db.query(Booking).order_by(Booking.id).offset(skip).limit(limit).all()
    logger.debug(f"Retrieved {len(bookings)} bookings")
    return bookings


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Get a booking by ID",
    description="Retrieve a specific booking by its ID."
)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
):
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        logger.error(f"Booking not found: {booking_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.post(
    "/{booking_id}/check-in",
    response_model=CheckInResponse,
    summary="Check a guest in",
    description="Turn a booking into a rental. An unknown booking is reported, not treated as an error."
)
def check_in_booking(
    booking_id: int,
    db: Session = Depends(get_db),
):
    """
    Check in the guest of a booking.

    - **booking_id**: ID of the booking to turn into a rental.

    Returns `checked_in` with the new rental, or `not_found` when there is
    no such booking.
    """
    rental = check_in(db, booking_id)
    if rental is None:
        return CheckInResponse(status=CheckInStatus.NOT_FOUND)
    return CheckInResponse(status=CheckInStatus.CHECKED_IN, rental=RentalResponse.model_validate(rental))
