from typing import Optional
from sqlalchemy.orm import Session
from ehotel.models.booking import Booking
from ehotel.models.customer import Customer
from ehotel.models.room import Room
from ehotel.schemas.booking import BookingCreate
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)


def book_room(db: Session, booking: BookingCreate) -> Optional[Booking]:
    """
    Book a room for a guest, registering the guest on the fly.

    An existing customer is reused as stored: names and address sent with the
    booking are ignored for them. The customer insert and the booking insert
    are committed together.

    Returns None when the room does not exist; nothing is written then.
    """
    room = db.query(Room).filter(Room.id == booking.room_id).first()
    if room is None:
        logger.warning(f"Booking rejected, room not found: {booking.room_id}")
        return None

    try:
        customer = db.query(Customer).filter(Customer.sin_customer == booking.sin_customer).first()
        if customer is None:
            customer = Customer(
                sin_customer=booking.sin_customer,
                firstname=booking.firstname,
                lastname=booking.lastname,
                check_in_date=booking.check_in_date,
                street_number=booking.street_number,
                street_name=booking.street_name,
                city=booking.city,
                postal_code=booking.postal_code,
                country=booking.country,
            )
            db.add(customer)
            logger.debug(f"Registering new customer: {booking.sin_customer}")

        db_booking = Booking(
            customer=customer,
            room=room,
            start_date=booking.start_date,
            end_date=booking.end_date,
        )
        db.add(db_booking)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(db_booking)
    logger.debug(f"Created booking: {db_booking.id}, room_id: {room.id}, customer: {customer.sin_customer}")
    return db_booking
