from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ehotel.db import get_db
from ehotel.models.employee import Employee
from ehotel.models.hotel import Hotel
from ehotel.models.hotel_chain import HotelChain
from ehotel.schemas.hotel import HotelCreate, HotelResponse, HotelUpdate
from ehotel.services.identifiers import find_unused_id
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

router = APIRouter(
    prefix="/hotels",
    tags=["hotels"],
)


def get_hotel_or_404(db: Session, hotel_id: int) -> Hotel:
    hotel = db.query(Hotel).filter(Hotel.id == hotel_id).first()
    if not hotel:
        logger.error(f"Hotel not found: {hotel_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    return hotel


def check_references(db: Session, hotel_chain_id=None, sin_manager=None):
    """Reject a hotel whose chain or manager is not on file."""
    if hotel_chain_id is not None:
        if not db.query(HotelChain).filter(HotelChain.id == hotel_chain_id).first():
            logger.error(f"Hotel chain not found: {hotel_chain_id}")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel chain not found")
    if sin_manager is not None:
        if not db.query(Employee).filter(Employee.sin_employee == sin_manager).first():
            logger.error(f"Manager not found: {sin_manager}")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Manager not found")


@router.post(
    "/",
    response_model=HotelResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a hotel",
    description="Create a hotel in a chain with an existing employee as manager. The hotel id is assigned by the service."
)
def create_hotel(hotel: HotelCreate, db: Session = Depends(get_db)):
    check_references(db, hotel.hotel_chain_id, hotel.sin_manager)

    db_hotel = Hotel(id=find_unused_id(db, Hotel), **hotel.model_dump())
    db.add(db_hotel)
    db.commit()
    db.refresh(db_hotel)
    logger.debug(f"Created hotel: {db_hotel.id}, chain: {hotel.hotel_chain_id}")
    return db_hotel


@router.get("/", response_model=List[HotelResponse])
def get_hotels(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return db.query(Hotel).order_by(Hotel.id).offset(skip).limit(limit).all()


@router.get("/{hotel_id}", response_model=HotelResponse)
def get_hotel(hotel_id: int, db: Session = Depends(get_db)):
    return get_hotel_or_404(db, hotel_id)


@router.put("/{hotel_id}", response_model=HotelResponse)
def update_hotel(hotel_id: int, hotel_update: HotelUpdate, db: Session = Depends(get_db)):
    """
    Update a hotel's details. A new chain or manager must already exist.
    """
    db_hotel = get_hotel_or_404(db, hotel_id)
    check_references(db, hotel_update.hotel_chain_id, hotel_update.sin_manager)

    update_data = hotel_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_hotel, key, value)

    db.commit()
    db.refresh(db_hotel)
    return db_hotel


@router.delete("/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_hotel(hotel_id: int, db: Session = Depends(get_db)):
    db_hotel = get_hotel_or_404(db, hotel_id)

    db.delete(db_hotel)
    db.commit()
    logger.debug(f"Deleted hotel: {hotel_id}")
    return None
