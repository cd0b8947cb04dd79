import re

from exceptions.services import DomainValidationError

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9_+&*-]+(?:\.[a-zA-Z0-9_+&*-]+)*"
    r"@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,7}$"
)

MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 100
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 100


def validate_email(email: str | None, label: str = "Email") -> str:
    """Validate and normalize an email address.

    The address is trimmed and lower-cased before the length and format
    checks are applied.

    Args:
        email (str | None): The email address to validate.
        label (str): Field name used in error messages.

    Returns:
        str: The normalized email address.

    Raises:
        DomainValidationError: If the email is missing, too long or malformed.
    """
    if email is None:
        raise DomainValidationError(f"{label} cannot be null")

    normalized = email.strip().lower()
    if not normalized:
        raise DomainValidationError(f"{label} cannot be empty")

    if len(normalized) > MAX_EMAIL_LENGTH:
        raise DomainValidationError(
            f"{label} too long (max {MAX_EMAIL_LENGTH} characters, "
            f"got: {len(normalized)})"
        )

    if not EMAIL_PATTERN.match(normalized):
        raise DomainValidationError(f"Invalid email format: {normalized}")

    return normalized


def validate_name(name: str | None, label: str = "Name") -> str:
    """Validate a display name and return it trimmed.

    Raises:
        DomainValidationError: If the name is missing, blank or too long.
    """
    if name is None:
        raise DomainValidationError(f"{label} cannot be null")

    trimmed = name.strip()
    if not trimmed:
        raise DomainValidationError(f"{label} cannot be empty")

    if len(trimmed) > MAX_NAME_LENGTH:
        raise DomainValidationError(
            f"{label} too long (max {MAX_NAME_LENGTH} characters, "
            f"got: {len(trimmed)})"
        )

    return trimmed


def validate_password_strength(password: str | None) -> str:
    """Validate password strength requirements.

    Checks that the password meets minimum security requirements:
    - Between 8 and 100 characters long
    - Contains at least one letter
    - Contains at least one digit

    Args:
        password (str | None): The password to validate.

    Returns:
        str: The validated password.

    Raises:
        DomainValidationError: If the password doesn't meet strength requirements.
    """
    if password is None:
        raise DomainValidationError("Password cannot be null")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise DomainValidationError(
            f"Password too short (min {MIN_PASSWORD_LENGTH} characters)"
        )

    if len(password) > MAX_PASSWORD_LENGTH:
        raise DomainValidationError(
            f"Password too long (max {MAX_PASSWORD_LENGTH} characters)"
        )

    if not re.search(r"[a-zA-Z]", password) or not re.search(r"\d", password):
        raise DomainValidationError(
            "Password must contain at least one letter and one number"
        )

    return password
