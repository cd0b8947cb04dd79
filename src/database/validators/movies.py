from decimal import Decimal, InvalidOperation

from exceptions.services import DomainValidationError

MAX_DESCRIPTION_LENGTH = 1000


def validate_required_text(value: str | None, label: str) -> str:
    """Return the trimmed text, rejecting missing or blank values."""
    if value is None or not value.strip():
        raise DomainValidationError(f"{label} cannot be empty")
    return value.strip()


def validate_description(description: str | None) -> str | None:
    if description is None:
        return None

    trimmed = description.strip()
    if len(trimmed) > MAX_DESCRIPTION_LENGTH:
        raise DomainValidationError(
            f"Description too long (max {MAX_DESCRIPTION_LENGTH} characters, "
            f"got: {len(trimmed)})"
        )
    return trimmed


def validate_duration(duration_minutes: int | None) -> int:
    if (
        duration_minutes is None
        or isinstance(duration_minutes, bool)
        or not isinstance(duration_minutes, int)
        or duration_minutes <= 0
    ):
        raise DomainValidationError(
            f"Duration must be positive (got: {duration_minutes})"
        )
    return duration_minutes


def validate_price(price: Decimal | float | int | None) -> Decimal:
    """Validate a ticket price and return it as a Decimal.

    Raises:
        DomainValidationError: If the price is missing, not numeric or not positive.
    """
    if price is None or isinstance(price, bool):
        raise DomainValidationError(f"Price must be positive (got: {price})")

    try:
        amount = Decimal(str(price))
    except (InvalidOperation, ValueError):
        raise DomainValidationError(f"Price must be positive (got: {price})")

    if not amount.is_finite() or amount <= 0:
        raise DomainValidationError(f"Price must be positive (got: {price})")
    return amount
