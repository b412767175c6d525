from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from ehotel.utils.validation_helpers import reject_null, validate_date_range


class RoomCapacity(str, Enum):
    SIMPLE = "simple"
    DOUBLE = "double"
    TRIPLE = "triple"
    QUADRUPLE = "quadruple"


class RoomBase(BaseModel):
    room_number: int = Field(ge=1)
    availability: bool = True
    price: Decimal = Field(ge=0)
    view: str
    extensible: bool = False
    capacity: RoomCapacity
    hotel_id: int

    model_config = ConfigDict(use_enum_values=True)


class RoomCreate(RoomBase):
    pass


class RoomUpdate(BaseModel):
    room_number: Optional[int] = Field(default=None, ge=1)
    availability: Optional[bool] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    view: Optional[str] = None
    extensible: Optional[bool] = None
    capacity: Optional[RoomCapacity] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("room_number", "availability", "price", "view", "extensible", "capacity")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class RoomResponse(RoomBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class RoomSearchCriteria(BaseModel):
    capacity: RoomCapacity
    max_price: Decimal = Field(ge=0)
    hotel_chain_id: int = Field(ge=1)
    min_stars: int = Field(ge=1, le=5)
    min_rooms_number: int = Field(ge=1)
    start_date: date
    end_date: date

    model_config = ConfigDict(use_enum_values=True)

    @model_validator(mode="after")
    def check_date_range(self):
        validate_date_range(self.start_date, self.end_date)
        return self


class CommodityResponse(BaseModel):
    name: str

    model_config = ConfigDict(from_attributes=True)


class ProblemResponse(BaseModel):
    id: int
    name: str
    description: str

    model_config = ConfigDict(from_attributes=True)
