from typing import List
from sqlalchemy import exists
from sqlalchemy.orm import Session
from ehotel.models.booking import Booking
from ehotel.models.hotel import Hotel
from ehotel.models.room import Room
from ehotel.schemas.room import RoomSearchCriteria


def find_available_rooms(db: Session, criteria: RoomSearchCriteria) -> List[Room]:
    """
    Rooms matching the search criteria that have no booking intersecting
    [start_date, end_date]. Both ends are inclusive, so a booking that ends on
    the requested start date still blocks the room.

    The date range is expected to be validated already.
    """
    overlapping_booking = exists().where(
        Booking.room_id == Room.id,
        Booking.start_date <= criteria.end_date,
        Booking.end_date >= criteria.start_date,
    )
    return (
        db.query(Room)
        .join(Hotel, Room.hotel_id == Hotel.id)
        .filter(
            Room.availability.is_(True),
            Room.capacity == criteria.capacity,
            Room.price <= criteria.max_price,
            Hotel.hotel_chain_id == criteria.hotel_chain_id,
            Hotel.star_rating >= criteria.min_stars,
            Hotel.rooms_number >= criteria.min_rooms_number,
            ~overlapping_booking,
        )
        .all()
    )
