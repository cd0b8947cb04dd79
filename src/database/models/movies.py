from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    Integer,
    String,
    DECIMAL
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from database.models.base import Base
from database.validators.movies import (
    validate_required_text,
    validate_description,
    validate_duration,
    validate_price
)


class MovieModel(Base):
    """Model representing a movie in the catalog.

    Every validated column is checked on assignment, so the invariants hold
    after construction and after any later update.
    """
    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(
        String(1000), nullable=True
    )
    genre: Mapped[str] = mapped_column(String(100), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)

    bookings: Mapped[List["BookingModel"]] = relationship(
        "BookingModel",
        back_populates="movie",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return (
            f"<MovieModel(id={self.id}, title={self.title}, "
            f"genre={self.genre}, price={self.price})>"
        )

    @classmethod
    def create(
        cls,
        title: str,
        genre: str,
        duration_minutes: int,
        price: Decimal,
        description: Optional[str] = None
    ) -> "MovieModel":
        return cls(
            title=title,
            description=description,
            genre=genre,
            duration_minutes=duration_minutes,
            price=price
        )

    def update(
        self,
        title: str,
        genre: str,
        duration_minutes: int,
        price: Decimal,
        description: Optional[str] = None
    ) -> None:
        """Replace all editable fields.

        The complete new field set is validated before any attribute is
        assigned, so a rejected update leaves the movie untouched.
        """
        values = {
            "title": validate_required_text(title, "Title"),
            "description": validate_description(description),
            "genre": validate_required_text(genre, "Genre"),
            "duration_minutes": validate_duration(duration_minutes),
            "price": validate_price(price),
        }
        for field_name, value in values.items():
            setattr(self, field_name, value)

    @validates("title")
    def validate_title_field(self, field_name: str, title: str) -> str:
        return validate_required_text(title, "Title")

    @validates("genre")
    def validate_genre_field(self, field_name: str, genre: str) -> str:
        return validate_required_text(genre, "Genre")

    @validates("description")
    def validate_description_field(
        self, field_name: str, description: Optional[str]
    ) -> Optional[str]:
        return validate_description(description)

    @validates("duration_minutes")
    def validate_duration_field(self, field_name: str, duration: int) -> int:
        return validate_duration(duration)

    @validates("price")
    def validate_price_field(self, field_name: str, price: Decimal) -> Decimal:
        return validate_price(price)
