from typing import Optional
from pydantic import BaseModel, Field, field_validator
from ehotel.utils.validation_helpers import reject_null, validate_postal_code


class AddressBase(BaseModel):
    street_number: int = Field(ge=1)
    street_name: str = Field(min_length=2, max_length=50)
    city: str = Field(min_length=2, max_length=50)
    postal_code: str
    country: str

    @field_validator("postal_code")
    @classmethod
    def check_postal_code(cls, value):
        return validate_postal_code(value)


class AddressUpdate(BaseModel):
    street_number: Optional[int] = Field(default=None, ge=1)
    street_name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    city: Optional[str] = Field(default=None, min_length=2, max_length=50)
    postal_code: Optional[str] = None
    country: Optional[str] = None

    @field_validator("postal_code")
    @classmethod
    def check_postal_code(cls, value):
        return validate_postal_code(value)

    @field_validator("street_number", "street_name", "city", "postal_code", "country")
    @classmethod
    def check_address_not_null(cls, value):
        return reject_null(value)
