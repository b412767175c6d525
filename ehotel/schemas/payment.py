from datetime import date
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, field_validator
from ehotel.utils.validation_helpers import validate_present_or_future


class PaymentBase(BaseModel):
    rental_id: int
    payment_date: date
    amount: Decimal = Field(ge=Decimal("0.01"))
    payment_method: str
    payment_status: str


class PaymentCreate(PaymentBase):
    @field_validator("payment_date")
    @classmethod
    def check_payment_date(cls, value):
        return validate_present_or_future(value)


class PaymentResponse(PaymentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
