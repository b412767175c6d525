from typing import List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from ehotel.schemas.address import AddressBase, AddressUpdate
from ehotel.utils.validation_helpers import reject_null, validate_sin


class HotelBase(AddressBase):
    name: str = Field(min_length=2, max_length=50)
    rooms_number: int = Field(ge=1)
    star_rating: int = Field(ge=1, le=5)
    email: EmailStr
    hotel_chain_id: int
    sin_manager: str

    @field_validator("sin_manager")
    @classmethod
    def check_sin_manager(cls, value):
        return validate_sin(value)


class HotelCreate(HotelBase):
    pass


class HotelUpdate(AddressUpdate):
    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    rooms_number: Optional[int] = Field(default=None, ge=1)
    star_rating: Optional[int] = Field(default=None, ge=1, le=5)
    email: Optional[EmailStr] = None
    hotel_chain_id: Optional[int] = None
    sin_manager: Optional[str] = None

    @field_validator("sin_manager")
    @classmethod
    def check_sin_manager(cls, value):
        return validate_sin(value)

    @field_validator("name", "rooms_number", "star_rating", "email", "hotel_chain_id", "sin_manager")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class HotelPhoneNumber(BaseModel):
    phone_number: str

    model_config = ConfigDict(from_attributes=True)


class HotelResponse(HotelBase):
    id: int
    sin_manager: Optional[str] = None
    phone_numbers: List[HotelPhoneNumber] = []

    model_config = ConfigDict(from_attributes=True)
