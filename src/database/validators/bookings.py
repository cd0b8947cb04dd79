from database.validators.accounts import validate_email, validate_name
from exceptions.services import DomainValidationError

MIN_SEATS_PER_BOOKING = 1
MAX_SEATS_PER_BOOKING = 100


def validate_customer_name(customer_name: str | None) -> str:
    return validate_name(customer_name, label="Customer name")


def validate_customer_email(customer_email: str | None) -> str:
    return validate_email(customer_email, label="Customer email")


def validate_number_of_seats(number_of_seats: int | None) -> int:
    """Validate the seat count of a single booking.

    Args:
        number_of_seats (int | None): Requested number of seats.

    Returns:
        int: The validated seat count.

    Raises:
        DomainValidationError: If the value is missing, not an integer or
            outside the allowed range.
    """
    if number_of_seats is None:
        raise DomainValidationError("Number of seats cannot be null")

    if isinstance(number_of_seats, bool) or not isinstance(number_of_seats, int):
        raise DomainValidationError(
            f"Number of seats must be an integer (got: {number_of_seats!r})"
        )

    if number_of_seats < MIN_SEATS_PER_BOOKING:
        raise DomainValidationError(
            f"Number of seats must be positive (got: {number_of_seats})"
        )

    if number_of_seats > MAX_SEATS_PER_BOOKING:
        raise DomainValidationError(
            f"Number of seats too high (max {MAX_SEATS_PER_BOOKING} seats "
            f"per booking, got: {number_of_seats})"
        )

    return number_of_seats
