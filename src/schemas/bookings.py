from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, StrictInt

from schemas.base import CamelModel

from .examples.bookings import (
    booking_create_request_schema_example,
    booking_schema_example
)


class BookingCreateRequestSchema(CamelModel):
    movie_id: StrictInt
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    number_of_seats: StrictInt

    model_config = ConfigDict(
        json_schema_extra={
            "example": booking_create_request_schema_example
        }
    )


class BookingSchema(CamelModel):
    id: int
    movie_id: int
    customer_name: str
    customer_email: str
    number_of_seats: int
    booking_time: datetime
    total_price: float

    model_config = ConfigDict(
        json_schema_extra={
            "example": booking_schema_example
        }
    )
