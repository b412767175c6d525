from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from ehotel.db import Base


class Hotel(Base):
    __tablename__ = "hotel"

    # Assigned by ehotel.services.identifiers, not by the database.
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(50), nullable=False)
    rooms_number = Column(Integer, nullable=False)
    star_rating = Column(Integer, nullable=False)
    email = Column(String, nullable=False)
    street_number = Column(Integer, nullable=False)
    street_name = Column(String(50), nullable=False)
    city = Column(String(50), nullable=False)
    postal_code = Column(String(7), unique=True, nullable=False)
    country = Column(String, nullable=False)
    hotel_chain_id = Column(Integer, ForeignKey("hotel_chain.id"), nullable=False)
    sin_manager = Column(String(11), ForeignKey("employee.sin_employee"), unique=True, nullable=True)

    hotel_chain = relationship("HotelChain")
    manager = relationship("Employee", foreign_keys=[sin_manager])
    phone_numbers = relationship("PhoneNumberHotel", viewonly=True)


class PhoneNumberHotel(Base):
    __tablename__ = "phone_number_hotel"

    phone_number = Column(String, primary_key=True)
    hotel_id = Column(Integer, ForeignKey("hotel.id"), nullable=False)
