from typing import List
from pydantic import BaseModel, ConfigDict


class ChainEmail(BaseModel):
    email: str

    model_config = ConfigDict(from_attributes=True)


class ChainPhoneNumber(BaseModel):
    phone_number: str

    model_config = ConfigDict(from_attributes=True)


class ChainOfficeAddress(BaseModel):
    street_number: int
    street_name: str
    city: str
    postal_code: str
    country: str

    model_config = ConfigDict(from_attributes=True)


class HotelChainResponse(BaseModel):
    id: int
    name: str
    hotels_number: int
    emails: List[ChainEmail] = []
    phone_numbers: List[ChainPhoneNumber] = []
    office_addresses: List[ChainOfficeAddress] = []

    model_config = ConfigDict(from_attributes=True)
