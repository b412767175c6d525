from sqlalchemy import Column, Date, Integer, String
from ehotel.db import Base


class Customer(Base):
    __tablename__ = "customer"

    sin_customer = Column(String(11), primary_key=True)
    firstname = Column(String(50), nullable=False)
    lastname = Column(String(50), nullable=False)
    check_in_date = Column(Date, nullable=False)
    street_number = Column(Integer, nullable=False)
    street_name = Column(String(50), nullable=False)
    city = Column(String(50), nullable=False)
    postal_code = Column(String(7), nullable=False)
    country = Column(String, nullable=False)
