from datetime import date
from typing import Optional
from pydantic import ConfigDict, Field, field_validator
from ehotel.schemas.address import AddressBase, AddressUpdate
from ehotel.utils.validation_helpers import reject_null, validate_sin


class CustomerBase(AddressBase):
    firstname: str = Field(min_length=2, max_length=50)
    lastname: str = Field(min_length=2, max_length=50)
    check_in_date: date = Field(default_factory=date.today)


class CustomerCreate(CustomerBase):
    sin_customer: str

    @field_validator("sin_customer")
    @classmethod
    def check_sin(cls, value):
        return validate_sin(value)


class CustomerUpdate(AddressUpdate):
    firstname: Optional[str] = Field(default=None, min_length=2, max_length=50)
    lastname: Optional[str] = Field(default=None, min_length=2, max_length=50)
    check_in_date: Optional[date] = None

    @field_validator("firstname", "lastname", "check_in_date")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class CustomerResponse(CustomerBase):
    sin_customer: str

    model_config = ConfigDict(from_attributes=True)
