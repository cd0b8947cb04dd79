import os
import secrets
from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings

MIN_SECRET_KEY_LENGTH = 48


class BaseAppSettings(BaseSettings):
    """Base application settings configuration.

    This class contains the core configuration settings for the Movie Booking
    API: JWT signing, CORS allow-list, sample data seeding and logging. It
    inherits from Pydantic's BaseSettings for automatic environment variable
    loading and validation.
    """
    BASE_DIR: Path = Path(__file__).parent.parent
    PATH_TO_DB: str = str(BASE_DIR / "database" / "source" / "movie_booking.db")

    SECRET_KEY_ACCESS: str = os.getenv(
        "SECRET_KEY_ACCESS",
        secrets.token_urlsafe(MIN_SECRET_KEY_LENGTH)
    )
    JWT_SIGNING_ALGORITHM: str = os.getenv("JWT_SIGNING_ALGORITHM", "HS384")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
        os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 24 * 60)
    )

    CORS_ALLOWED_ORIGINS: str = os.getenv(
        "CORS_ALLOWED_ORIGINS",
        "https://movie-booking-cyan-five.vercel.app,"
        "http://localhost:5173,"
        "http://localhost:3000"
    )

    SEED_SAMPLE_DATA: bool = (
        os.getenv("SEED_SAMPLE_DATA", "True").lower() == "true"
    )
    DEFAULT_ADMIN_EMAIL: str = os.getenv(
        "DEFAULT_ADMIN_EMAIL", "admin@example.com"
    )
    DEFAULT_ADMIN_NAME: str = os.getenv("DEFAULT_ADMIN_NAME", "Admin User")
    DEFAULT_ADMIN_PASSWORD: str = os.getenv(
        "DEFAULT_ADMIN_PASSWORD", "admin123"
    )

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON: bool = os.getenv("LOG_JSON", "False").lower() == "true"

    @field_validator("SECRET_KEY_ACCESS")
    @classmethod
    def validate_secret_key_length(cls, value: str) -> str:
        if len(value) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(
                f"SECRET_KEY_ACCESS must be at least {MIN_SECRET_KEY_LENGTH} "
                f"characters long (got {len(value)})."
            )
        return value

    @property
    def cors_origins(self) -> List[str]:
        """Get the CORS allow-list as a list of origins.

        Returns:
            List[str]: Origins allowed to make credentialed requests.
        """
        return [
            origin.strip()
            for origin in self.CORS_ALLOWED_ORIGINS.split(",")
            if origin.strip()
        ]


class Settings(BaseAppSettings):
    """Production settings configuration.

    Adds the PostgreSQL connection parameters used outside of tests.
    """
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "test_user")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "test_password")
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "test_host")
    POSTGRES_DB_PORT: int = int(os.getenv("POSTGRES_DB_PORT", 5432))
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "movie_booking")


class TestingSettings(BaseAppSettings):
    """Testing settings configuration.

    Uses the SQLite database file and never seeds sample data so every test
    starts from an empty schema.
    """
    SEED_SAMPLE_DATA: bool = False


def get_settings() -> BaseAppSettings:
    """Return the settings instance based on the ENVIRONMENT variable.

    If the ENVIRONMENT environment variable is set to 'testing', this function returns
    an instance of TestingSettings. For any other value (including when unset), it returns
    an instance of Settings.

    Returns:
        BaseAppSettings: The settings instance appropriate for the current environment.
    """
    environment = os.getenv("ENVIRONMENT", "developing")
    if environment == "testing":
        return TestingSettings()
    return Settings()
