class BaseServiceError(Exception):
    """Base exception class for business rule violations.

    Every service-layer error carries a human-readable message that is safe
    to return to the client.
    """

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "The request could not be processed."
        self.message = message
        super().__init__(message)


class DomainValidationError(BaseServiceError, ValueError):
    """Exception raised when input breaks a field or business invariant.

    It subclasses ValueError so that SQLAlchemy attribute validators and
    plain callers can treat it like any other bad value.
    """


class EmailAlreadyRegisteredError(DomainValidationError):
    """Exception raised when registering an email that already has an account."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already registered: {email}")
        self.email = email


class InvalidCredentialsError(BaseServiceError):
    """Exception raised when login fails.

    The message is identical for an unknown email and a wrong password.
    """

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)
