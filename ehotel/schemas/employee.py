from typing import Optional
from pydantic import ConfigDict, Field, field_validator
from ehotel.schemas.address import AddressBase, AddressUpdate
from ehotel.utils.validation_helpers import reject_null, validate_sin


class EmployeeBase(AddressBase):
    firstname: str = Field(min_length=2, max_length=50)
    lastname: str = Field(min_length=2, max_length=50)
    role: str
    hotel_id: Optional[int] = None


class EmployeeCreate(EmployeeBase):
    sin_employee: str

    @field_validator("sin_employee")
    @classmethod
    def check_sin(cls, value):
        return validate_sin(value)


class EmployeeUpdate(AddressUpdate):
    firstname: Optional[str] = Field(default=None, min_length=2, max_length=50)
    lastname: Optional[str] = Field(default=None, min_length=2, max_length=50)
    role: Optional[str] = None
    hotel_id: Optional[int] = None

    # role and hotel_id may be cleared
    @field_validator("firstname", "lastname")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class EmployeeResponse(EmployeeBase):
    sin_employee: str
    role: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
