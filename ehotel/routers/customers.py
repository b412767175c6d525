from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ehotel.db import get_db
from ehotel.models.customer import Customer
from ehotel.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

router = APIRouter(
    prefix="/customers",
    tags=["customers"],
)


def get_customer_or_404(db: Session, sin_customer: str) -> Customer:
    customer = db.query(Customer).filter(Customer.sin_customer == sin_customer).first()
    if not customer:
        logger.error(f"Customer not found: {sin_customer}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.post("/", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(customer: CustomerCreate, db: Session = Depends(get_db)):
    """
    Register a customer. A SIN already on file is rejected by the database.
    """
    db_customer = Customer(**customer.model_dump())
    db.add(db_customer)
    db.commit()
    db.refresh(db_customer)
    logger.debug(f"Created customer: {db_customer.sin_customer}")
    return db_customer


@router.get("/", response_model=List[CustomerResponse])
def get_customers(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return db.query(Customer).order_by(Customer.sin_customer).offset(skip).limit(limit).all()


@router.get("/{sin_customer}", response_model=CustomerResponse)
def get_customer(sin_customer: str, db: Session = Depends(get_db)):
    return get_customer_or_404(db, sin_customer)


@router.put("/{sin_customer}", response_model=CustomerResponse)
def update_customer(sin_customer: str, customer_update: CustomerUpdate, db: Session = Depends(get_db)):
    """
    Update a customer's details. The SIN itself never changes.
    """
    db_customer = get_customer_or_404(db, sin_customer)

    update_data = customer_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_customer, key, value)

    db.commit()
    db.refresh(db_customer)
    return db_customer


@router.delete("/{sin_customer}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(sin_customer: str, db: Session = Depends(get_db)):
    """
    Delete a customer. Rejected by the database while bookings or rentals reference them.
    """
    db_customer = get_customer_or_404(db, sin_customer)

    db.delete(db_customer)
    db.commit()
    logger.debug(f"Deleted customer: {sin_customer}")
    return None
