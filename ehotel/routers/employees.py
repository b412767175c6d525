from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ehotel.db import get_db
from ehotel.models.employee import Employee
from ehotel.models.hotel import Hotel
from ehotel.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

router = APIRouter(
    prefix="/employees",
    tags=["employees"],
)


def get_employee_or_404(db: Session, sin_employee: str) -> Employee:
    employee = db.query(Employee).filter(Employee.sin_employee == sin_employee).first()
    if not employee:
        logger.error(f"Employee not found: {sin_employee}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


def check_hotel(db: Session, hotel_id):
    if hotel_id is not None and not db.query(Hotel).filter(Hotel.id == hotel_id).first():
        logger.error(f"Hotel not found: {hotel_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(employee: EmployeeCreate, db: Session = Depends(get_db)):
    """
    Hire an employee, optionally assigned to a hotel.
    """
    check_hotel(db, employee.hotel_id)

    db_employee = Employee(**employee.model_dump())
    db.add(db_employee)
    db.commit()
    db.refresh(db_employee)
    logger.debug(f"Created employee: {db_employee.sin_employee}")
    return db_employee


@router.get("/", response_model=List[EmployeeResponse])
def get_employees(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return db.query(Employee).order_by(Employee.sin_employee).offset(skip).limit(limit).all()


@router.get("/{sin_employee}", response_model=EmployeeResponse)
def get_employee(sin_employee: str, db: Session = Depends(get_db)):
    return get_employee_or_404(db, sin_employee)


@router.put("/{sin_employee}", response_model=EmployeeResponse)
def update_employee(sin_employee: str, employee_update: EmployeeUpdate, db: Session = Depends(get_db)):
    db_employee = get_employee_or_404(db, sin_employee)
    check_hotel(db, employee_update.hotel_id)

    update_data = employee_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_employee, key, value)

    db.commit()
    db.refresh(db_employee)
    return db_employee


@router.delete("/{sin_employee}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(sin_employee: str, db: Session = Depends(get_db)):
    db_employee = get_employee_or_404(db, sin_employee)

    db.delete(db_employee)
    db.commit()
    logger.debug(f"Deleted employee: {sin_employee}")
    return None
