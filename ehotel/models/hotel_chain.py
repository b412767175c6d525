from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from ehotel.db import Base


class HotelChain(Base):
    __tablename__ = "hotel_chain"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    hotels_number = Column(Integer, nullable=False, default=0)

    emails = relationship("EmailsHotelChain", viewonly=True)
    phone_numbers = relationship("PhoneNumberHotelChain", viewonly=True)
    office_addresses = relationship("OfficeAddressHotelChain", viewonly=True)


class EmailsHotelChain(Base):
    __tablename__ = "emails_hotel_chain"

    email = Column(String, primary_key=True)
    hotel_chain_id = Column(Integer, ForeignKey("hotel_chain.id"), nullable=False)


class PhoneNumberHotelChain(Base):
    __tablename__ = "phone_number_hotel_chain"

    phone_number = Column(String, primary_key=True)
    hotel_chain_id = Column(Integer, ForeignKey("hotel_chain.id"), nullable=False)


class OfficeAddressHotelChain(Base):
    __tablename__ = "office_address_hotel_chain"

    id = Column(Integer, primary_key=True)
    street_number = Column(Integer, nullable=False)
    street_name = Column(String, nullable=False)
    city = Column(String, nullable=False)
    postal_code = Column(String, unique=True, nullable=False)
    country = Column(String, nullable=False)
    hotel_chain_id = Column(Integer, ForeignKey("hotel_chain.id"), nullable=False)
