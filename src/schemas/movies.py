from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, StrictInt

from schemas.base import CamelModel

from .examples.movies import (
    movie_request_schema_example,
    movie_schema_example
)


class MovieRequestSchema(CamelModel):
    title: str
    description: Optional[str] = None
    genre: str
    duration_minutes: StrictInt
    price: Decimal

    model_config = ConfigDict(
        json_schema_extra={
            "example": movie_request_schema_example
        }
    )


class MovieSchema(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    genre: str
    duration_minutes: int
    price: float

    model_config = ConfigDict(
        json_schema_extra={
            "example": movie_schema_example
        }
    )
