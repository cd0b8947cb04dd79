from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    Integer,
    String,
    DECIMAL,
    DateTime,
    ForeignKey,
    CheckConstraint
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from database.models.base import Base
from database.models.movies import MovieModel
from database.validators.bookings import (
    validate_customer_name,
    validate_customer_email,
    validate_number_of_seats
)
from database.validators.movies import validate_price


class BookingModel(Base):
    """Model representing seats booked by a customer for a movie.

    The total price is fixed when the booking is created and is not
    recomputed if the movie price changes afterwards.
    """
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    customer_name: Mapped[str] = mapped_column(String(100), nullable=False)
    customer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    number_of_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    booking_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )
    total_price: Mapped[Decimal] = mapped_column(
        DECIMAL(12, 2), nullable=False
    )

    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    movie: Mapped[MovieModel] = relationship(
        MovieModel,
        back_populates="bookings"
    )

    __table_args__ = (
        CheckConstraint(
            "number_of_seats >= 1 AND number_of_seats <= 100",
            name="check_number_of_seats_range"
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<BookingModel(id={self.id}, movie_id={self.movie_id}, "
            f"seats={self.number_of_seats}, total_price={self.total_price})>"
        )

    @classmethod
    def create(
        cls,
        movie: MovieModel,
        customer_name: str,
        customer_email: str,
        number_of_seats: int
    ) -> "BookingModel":
        """Create a booking priced from the movie's current ticket price.

        Args:
            movie (MovieModel): The booked movie, must be persisted.
            customer_name (str): Name the booking is made for.
            customer_email (str): Contact email, normalized on assignment.
            number_of_seats (int): Seats requested, 1 to 100.

        Returns:
            BookingModel: New, not yet persisted booking.
        """
        seats = validate_number_of_seats(number_of_seats)
        return cls(
            movie_id=movie.id,
            customer_name=customer_name,
            customer_email=customer_email,
            number_of_seats=seats,
            booking_time=datetime.now(timezone.utc),
            total_price=movie.price * seats
        )

    @validates("customer_name")
    def validate_customer_name_field(self, field_name: str, name: str) -> str:
        return validate_customer_name(name)

    @validates("customer_email")
    def validate_customer_email_field(self, field_name: str, email: str) -> str:
        return validate_customer_email(email)

    @validates("number_of_seats")
    def validate_number_of_seats_field(self, field_name: str, seats: int) -> int:
        return validate_number_of_seats(seats)

    @validates("total_price")
    def validate_total_price_field(
        self, field_name: str, total_price: Decimal
    ) -> Decimal:
        return validate_price(total_price)
