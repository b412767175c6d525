from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from ehotel.db import Base


class Employee(Base):
    __tablename__ = "employee"

    sin_employee = Column(String(11), primary_key=True)
    firstname = Column(String(50), nullable=False)
    lastname = Column(String(50), nullable=False)
    role = Column(String, nullable=True)
    street_number = Column(Integer, nullable=False)
    street_name = Column(String(50), nullable=False)
    city = Column(String(50), nullable=False)
    postal_code = Column(String(7), nullable=False)
    country = Column(String, nullable=False)
    # hotel.sin_manager points back here; use_alter breaks the table cycle.
    hotel_id = Column(
        Integer,
        ForeignKey("hotel.id", use_alter=True, name="fk_employee_hotel"),
        nullable=True,
    )

    hotel = relationship("Hotel", foreign_keys=[hotel_id])
