from datetime import date
from pydantic import BaseModel, ConfigDict


class RentalResponse(BaseModel):
    id: int
    sin_customer: str
    room_id: int
    start_date: date
    end_date: date

    model_config = ConfigDict(from_attributes=True)
