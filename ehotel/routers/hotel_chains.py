from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ehotel.db import get_db
from ehotel.models.hotel_chain import HotelChain
from ehotel.schemas.hotel_chain import HotelChainResponse

router = APIRouter(
    prefix="/hotel-chains",
    tags=["hotel chains"],
)


@router.get("/", response_model=List[HotelChainResponse])
def get_hotel_chains(db: Session = Depends(get_db)):
    """
    Retrieve all hotel chains with their contact details. Chains are reference data and read-only.
    """
    return db.query(HotelChain).order_by(HotelChain.id).all()


@router.get("/{hotel_chain_id}", response_model=HotelChainResponse)
def get_hotel_chain(hotel_chain_id: int, db: Session = Depends(get_db)):
    hotel_chain = db.query(HotelChain).filter(HotelChain.id == hotel_chain_id).first()
    if not hotel_chain:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel chain not found")
    return hotel_chain
