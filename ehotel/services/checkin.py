from typing import Optional
from sqlalchemy.orm import Session
from ehotel.models.booking import Booking
from ehotel.models.rental import Rental
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)


def check_in(db: Session, booking_id: int) -> Optional[Rental]:
    """
    Turn a booking into a rental: the rental copies the booking's customer,
    room and dates, gets its own id, and the booking is deleted.

    Both writes share one transaction. Returns None, without touching the
    database, when the booking does not exist.
    """
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if booking is None:
        logger.warning(f"Check-in skipped, booking not found: {booking_id}")
        return None

    rental = Rental(
        sin_customer=booking.sin_customer,
        room_id=booking.room_id,
        start_date=booking.start_date,
        end_date=booking.end_date,
    )
    try:
        db.add(rental)
        db.flush()
        db.delete(booking)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(rental)
    logger.debug(f"Checked in booking {booking_id} as rental {rental.id}")
    return rental
