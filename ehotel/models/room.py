from sqlalchemy.orm import relationship
from sqlalchemy import Boolean, Column, ForeignKey, Integer, Numeric, String
from ehotel.db import Base


class Room(Base):
    __tablename__ = "room"

    # Assigned by ehotel.services.identifiers, not by the database.
    id = Column(Integer, primary_key=True, autoincrement=False)
    room_number = Column(Integer, nullable=False)
    availability = Column(Boolean, nullable=False, default=True)
    price = Column(Numeric(10, 2), nullable=False)
    view = Column(String, nullable=False)
    extensible = Column(Boolean, nullable=False, default=False)
    capacity = Column(String, index=True, nullable=False)
    hotel_id = Column(Integer, ForeignKey("hotel.id"), nullable=False)

    hotel = relationship("Hotel")
    commodities = relationship("RoomCommodity", viewonly=True)
    problems = relationship("RoomProblem", viewonly=True)


class Commodity(Base):
    __tablename__ = "commodity"

    name = Column(String, primary_key=True)


class Problem(Base):
    __tablename__ = "problem"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=False)


class RoomCommodity(Base):
    __tablename__ = "room_commodity"

    room_id = Column(Integer, ForeignKey("room.id"), primary_key=True)
    commodity_name = Column(String, ForeignKey("commodity.name"), primary_key=True)

    commodity = relationship("Commodity")


class RoomProblem(Base):
    __tablename__ = "room_problem"

    room_id = Column(Integer, ForeignKey("room.id"), primary_key=True)
    problem_id = Column(Integer, ForeignKey("problem.id"), primary_key=True)

    problem = relationship("Problem")
