from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ehotel.db import get_db
from ehotel.models.hotel import Hotel
from ehotel.models.room import Room
from ehotel.schemas.room import (
    CommodityResponse,
    ProblemResponse,
    RoomCreate,
    RoomResponse,
    RoomSearchCriteria,
    RoomUpdate,
)
from ehotel.services.availability import find_available_rooms
from ehotel.services.identifiers import find_unused_id
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

router = APIRouter(
    prefix="/rooms",
    tags=["rooms"],
)


def get_room_or_404(db: Session, room_id: int) -> Room:
    room = db.query(Room).filter(Room.id == room_id).first()
    if not room:
        logger.error(f"Room not found: {room_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return room


@router.post(
    "/search",
    response_model=List[RoomResponse],
    summary="Search available rooms",
    description="Find rooms matching the criteria with no booking overlapping the requested stay.",
)
def search_rooms(criteria: RoomSearchCriteria, db: Session = Depends(get_db)):
    """
    Search for rooms that can be booked for a stay.

    - **capacity**: simple, double, triple or quadruple.
    - **max_price**: Highest acceptable nightly price.
    - **hotel_chain_id**: Chain the hotel belongs to.
    - **min_stars**: Lowest acceptable star rating (1-5).
    - **min_rooms_number**: Smallest acceptable hotel size.
    - **start_date** / **end_date**: Requested stay, both days included.

    Returns the matching rooms in no particular order.
    """
    rooms = find_available_rooms(db, criteria)
    logger.debug(f"Room search {criteria.model_dump()} matched {len(rooms)} rooms")
    return rooms


@router.post("/", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(room: RoomCreate, db: Session = Depends(get_db)):
    """
    Create a room in an existing hotel. The room id is assigned by the service.
    """
    hotel = db.query(Hotel).filter(Hotel.id == room.hotel_id).first()
    if not hotel:
        logger.error(f"Hotel not found: {room.hotel_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")

    db_room = Room(id=find_unused_id(db, Room), **room.model_dump())
    db.add(db_room)
    db.commit()
    db.refresh(db_room)
    logger.debug(f"Created room: {db_room.id}, hotel_id: {hotel.id}")
    return db_room


@router.get("/", response_model=List[RoomResponse])
def get_rooms(
    hotel_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    """
    Retrieve rooms, optionally only those of one hotel.
    """
    query = db.query(Room)
    if hotel_id is not None:
        query = query.filter(Room.hotel_id == hotel_id)
    return query.order_by(Room.id).offset(skip).limit(limit).all()


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a specific room by ID.
    """
    return get_room_or_404(db, room_id)


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(room_id: int, room_update: RoomUpdate, db: Session = Depends(get_db)):
    """
    Update a room's details. The hotel a room belongs to cannot change.
    """
    db_room = get_room_or_404(db, room_id)

    update_data = room_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_room, key, value)

    db.commit()
    db.refresh(db_room)
    return db_room


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(room_id: int, db: Session = Depends(get_db)):
    """
    Delete a room. Rejected by the database while bookings or rentals reference it.
    """
    db_room = get_room_or_404(db, room_id)

    db.delete(db_room)
    db.commit()
    logger.debug(f"Deleted room: {room_id}")
    return None


@router.get("/{room_id}/commodities", response_model=List[CommodityResponse])
def get_room_commodities(room_id: int, db: Session = Depends(get_db)):
    db_room = get_room_or_404(db, room_id)
    return [link.commodity for link in db_room.commodities]


@router.get("/{room_id}/problems", response_model=List[ProblemResponse])
def get_room_problems(room_id: int, db: Session = Depends(get_db)):
    db_room = get_room_or_404(db, room_id)
    return [link.problem for link in db_room.problems]
