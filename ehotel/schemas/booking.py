from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from ehotel.schemas.address import AddressBase
from ehotel.schemas.rental import RentalResponse
from ehotel.utils.validation_helpers import validate_date_range, validate_sin


class BookingCreate(AddressBase):
    sin_customer: str
    firstname: str = Field(min_length=2, max_length=50)
    lastname: str = Field(min_length=2, max_length=50)
    check_in_date: date = Field(default_factory=date.today)
    room_id: int
    start_date: date
    end_date: date

    @field_validator("sin_customer")
    @classmethod
    def check_sin(cls, value):
        return validate_sin(value)

    @model_validator(mode="after")
    def check_date_range(self):
        validate_date_range(self.start_date, self.end_date)
        return self


class BookingResponse(BaseModel):
    id: int
    sin_customer: str
    room_id: int
    start_date: date
    end_date: date

    model_config = ConfigDict(from_attributes=True)


class CheckInStatus(str, Enum):
    CHECKED_IN = "checked_in"
    NOT_FOUND = "not_found"


class CheckInResponse(BaseModel):
    status: CheckInStatus
    rental: Optional[RentalResponse] = None
