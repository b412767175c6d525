from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship
from ehotel.db import Base


class Booking(Base):
    __tablename__ = "booking"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    sin_customer = Column(String(11), ForeignKey("customer.sin_customer"), nullable=False)
    room_id = Column(Integer, ForeignKey("room.id"), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    customer = relationship("Customer")
    room = relationship("Room")


class BookingArchive(Base):
    """Historical copy of a booking; plain values so it outlives the live rows."""

    __tablename__ = "booking_archive"

    id = Column(Integer, primary_key=True)
    sin_customer = Column(String(11), nullable=False)
    room_id = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
