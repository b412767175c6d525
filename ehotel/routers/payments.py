from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ehotel.db import get_db
from ehotel.models.payment import Payment
from ehotel.models.rental import Rental
from ehotel.schemas.payment import PaymentCreate, PaymentResponse
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

router = APIRouter(
    prefix="/payments",
    tags=["payments"],
)


@router.post(
    "/",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a payment",
    description="Record a payment, or one installment of it, against a rental."
)
def create_payment(payment: PaymentCreate, db: Session = Depends(get_db)):
    """
    Record a payment for a rental.

    - **rental_id**: Rental being paid.
    - **payment_date**: Today or a later date.
    - **amount**: Strictly positive amount.
    - **payment_method** / **payment_status**: Free text.
    """
    rental = db.query(Rental).filter(Rental.id == payment.rental_id).first()
    if not rental:
        logger.error(f"Rental not found: {payment.rental_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rental not found")

    db_payment = Payment(**payment.model_dump())
    db.add(db_payment)
    db.commit()
    db.refresh(db_payment)
    logger.debug(f"Recorded payment: {db_payment.id}, rental_id: {rental.id}, amount: {db_payment.amount}")
    return db_payment


@router.get("/", response_model=List[PaymentResponse], summary="List payments")
def get_payments(
    rental_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    query = db.query(Payment)
    if rental_id is not None:
        query = query.filter(Payment.rental_id == rental_id)
    return query.order_by(Payment.id).offset(skip).limit(limit).all()
