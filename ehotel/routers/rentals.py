from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ehotel.db import get_db
from ehotel.models.rental import Rental
from ehotel.schemas.rental import RentalResponse
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

router = APIRouter(
    prefix="/rentals",
    tags=["rentals"],
)


@router.get("/", response_model=List[RentalResponse], summary="List active rentals")
def get_rentals(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    """
    Retrieve rentals created by check-in.
    """
    return db.query(Rental).order_by(Rental.id).offset(skip).limit(limit).all()


@router.get("/{rental_id}", response_model=RentalResponse, summary="Get a rental by ID")
def get_rental(rental_id: int, db: Session = Depends(get_db)):
    rental = db.query(Rental).filter(Rental.id == rental_id).first()
    if not rental:
        logger.error(f"Rental not found: {rental_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rental not found")
    return rental
