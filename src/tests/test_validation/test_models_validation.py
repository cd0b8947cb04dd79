from decimal import Decimal

import pytest

from database.models.accounts import RoleEnum, UserModel
from database.models.bookings import BookingModel
from database.models.movies import MovieModel
from exceptions.services import DomainValidationError


def _movie(**overrides) -> MovieModel:
    fields = {
        "title": "Inception",
        "description": "Dream heist",
        "genre": "Sci-Fi",
        "duration_minutes": 148,
        "price": Decimal("12.50"),
    }
    fields.update(overrides)
    return MovieModel.create(**fields)


class TestMovieModelValidation:
    """Field invariants enforced on movie assignment."""

    def test_valid_movie(self):
        movie = _movie()
        assert movie.title == "Inception"
        assert movie.duration_minutes == 148

    def test_description_is_optional(self):
        assert _movie(description=None).description is None

    def test_description_length_limit(self):
        assert len(_movie(description="d" * 1000).description) == 1000
        with pytest.raises(DomainValidationError):
            _movie(description="d" * 1001)

    @pytest.mark.parametrize("duration", [0, -1, None, True, "90"])
    def test_invalid_durations(self, duration):
        with pytest.raises(DomainValidationError):
            _movie(duration_minutes=duration)

    @pytest.mark.parametrize("price", [0, -5, None, "abc", Decimal("NaN")])
    def test_invalid_prices(self, price):
        with pytest.raises(DomainValidationError):
            _movie(price=price)

    def test_price_is_stored_as_decimal(self):
        assert _movie(price=9.99).price == Decimal("9.99")

    def test_assignment_is_validated_after_creation(self):
        movie = _movie()
        with pytest.raises(DomainValidationError):
            movie.title = ""
        assert movie.title == "Inception"

    def test_update_replaces_every_field(self):
        movie = _movie()
        movie.update(
            title="Tenet",
            description=None,
            genre="Action",
            duration_minutes=150,
            price=Decimal("14.00")
        )
        assert movie.title == "Tenet"
        assert movie.description is None
        assert movie.price == Decimal("14.00")


class TestBookingModelValidation:
    """Booking creation derives the total and validates customer data."""

    def test_total_price_uses_movie_price(self):
        movie = _movie(price=Decimal("11.00"))
        movie.id = 3
        booking = BookingModel.create(
            movie=movie,
            customer_name="Jane",
            customer_email="jane@example.com",
            number_of_seats=4
        )
        assert booking.movie_id == 3
        assert booking.total_price == Decimal("44.00")

    @pytest.mark.parametrize("seats", [0, 101, 2.5, "3", False])
    def test_invalid_seat_counts(self, seats):
        movie = _movie()
        movie.id = 1
        with pytest.raises(DomainValidationError):
            BookingModel.create(
                movie=movie,
                customer_name="Jane",
                customer_email="jane@example.com",
                number_of_seats=seats
            )

    def test_total_price_is_not_recomputed(self):
        movie = _movie(price=Decimal("10.00"))
        movie.id = 1
        booking = BookingModel.create(
            movie=movie,
            customer_name="Jane",
            customer_email="jane@example.com",
            number_of_seats=2
        )
        movie.price = Decimal("20.00")
        assert booking.total_price == Decimal("20.00")


class TestUserModelValidation:
    """Account invariants and password handling."""

    def test_password_is_write_only(self):
        user = UserModel.create("user@example.com", "User", "password123")
        with pytest.raises(AttributeError):
            _ = user.password
        assert user.verify_password("password123")
        assert not user.verify_password("password124")

    def test_default_role_is_customer(self):
        user = UserModel.create("user@example.com", "User", "password123")
        assert user.role == RoleEnum.CUSTOMER
        assert not user.is_admin

    def test_email_is_normalized(self):
        user = UserModel.create(" USER@Example.com ", "User", "password123")
        assert user.email == "user@example.com"

    @pytest.mark.parametrize("name", ["", "   ", "n" * 101])
    def test_invalid_names(self, name):
        with pytest.raises(DomainValidationError):
            UserModel.create("user@example.com", name, "password123")

    def test_unknown_role_is_rejected(self):
        user = UserModel.create("user@example.com", "User", "password123")
        with pytest.raises(DomainValidationError):
            user.role = "SUPERUSER"
