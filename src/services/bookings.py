from typing import Optional, Sequence

import structlog

from database.models.bookings import BookingModel
from database.validators.bookings import (
    validate_customer_name,
    validate_customer_email,
    validate_number_of_seats
)
from exceptions.services import DomainValidationError
from repositories.bookings import BookingRepository
from repositories.movies import MovieRepository

logger = structlog.get_logger(__name__)


class BookingService:
    """Service for booking operations.

    Coordinates the booking and movie repositories: a booking can only be
    created for an existing movie, and its total price is derived from the
    movie's ticket price at creation time.
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        movie_repository: MovieRepository
    ) -> None:
        self._bookings = booking_repository
        self._movies = movie_repository

    async def get_all_bookings(self) -> Sequence[BookingModel]:
        return await self._bookings.find_all()

    async def get_booking_by_id(self, booking_id: int) -> Optional[BookingModel]:
        return await self._bookings.find_by_id(booking_id)

    async def get_bookings_by_movie_id(
        self, movie_id: int
    ) -> Sequence[BookingModel]:
        return await self._bookings.find_by_movie_id(movie_id)

    async def create_booking(
        self,
        movie_id: Optional[int],
        customer_name: Optional[str],
        customer_email: Optional[str],
        number_of_seats: Optional[int]
    ) -> BookingModel:
        """Validate a booking request and persist it.

        Every field is checked before the movie lookup, and nothing is
        written unless all checks pass.

        Args:
            movie_id (Optional[int]): ID of the movie to book.
            customer_name (Optional[str]): Name the booking is made for.
            customer_email (Optional[str]): Contact email.
            number_of_seats (Optional[int]): Seats requested, 1 to 100.

        Returns:
            BookingModel: The persisted booking.

        Raises:
            DomainValidationError: If an argument is invalid or the movie
                does not exist.
        """
        if movie_id is None:
            raise DomainValidationError("Movie ID cannot be null")

        name = validate_customer_name(customer_name)
        email = validate_customer_email(customer_email)
        seats = validate_number_of_seats(number_of_seats)

        movie = await self._movies.find_by_id(movie_id)
        if movie is None:
            raise DomainValidationError(f"Movie not found with ID: {movie_id}")

        booking = BookingModel.create(
            movie=movie,
            customer_name=name,
            customer_email=email,
            number_of_seats=seats
        )
        booking = await self._bookings.save(booking)
        logger.info(
            "booking_created",
            booking_id=booking.id,
            movie_id=movie.id,
            seats=seats,
            total_price=str(booking.total_price)
        )
        return booking

    async def delete_booking(self, booking_id: int) -> bool:
        deleted = await self._bookings.delete(booking_id)
        if deleted:
            logger.info("booking_deleted", booking_id=booking_id)
        return deleted
