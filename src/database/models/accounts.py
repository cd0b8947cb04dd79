from enum import Enum
from typing import Optional
from datetime import datetime, timezone

from sqlalchemy import (
    Integer,
    Enum as SqlEnum,
    String,
    DateTime
)
from sqlalchemy.orm import Mapped, mapped_column, validates

from database.models.base import Base
from database.validators.accounts import (
    validate_email,
    validate_name,
    validate_password_strength
)
from exceptions.services import DomainValidationError
from security.utils import verify_password, hash_password


class RoleEnum(Enum):
    """Enumeration for user roles.

    Defines the roles known to the system:
    - CUSTOMER: Regular user who can browse movies and book seats
    - ADMIN: Administrator who can also manage the movie catalog
    """
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


class UserModel(Base):
    """User model representing registered accounts.

    This model handles authentication data. The password hash is stored in a
    private column and is never exposed through a readable attribute.
    """
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    _hashed_password: Mapped[str] = mapped_column(
        "password_hash", String(60), nullable=False
    )
    role: Mapped[RoleEnum] = mapped_column(
        SqlEnum(RoleEnum), nullable=False, default=RoleEnum.CUSTOMER
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"

    @property
    def is_admin(self) -> bool:
        return self.role == RoleEnum.ADMIN

    @classmethod
    def create(
        cls,
        email: str,
        name: str,
        raw_password: str,
        role: Optional[RoleEnum] = None
    ) -> "UserModel":
        """Create a new user instance with hashed password.

        Args:
            email (str): User's email address, normalized on assignment.
            name (str): Display name.
            raw_password (str): Plain text password to be hashed.
            role (Optional[RoleEnum]): User role, CUSTOMER when omitted.

        Returns:
            UserModel: New user instance with hashed password.
        """
        user = cls(
            email=email,
            name=name,
            role=role or RoleEnum.CUSTOMER,
            created_at=datetime.now(timezone.utc)
        )
        user.password = raw_password
        return user

    @property
    def password(self) -> None:
        """Password property getter - raises error as password is write-only.

        Raises:
            AttributeError: Always raised as password is write-only for security.
        """
        raise AttributeError(
            "Password is write-only. Use the setter to set the password."
        )

    @password.setter
    def password(self, raw_password: str) -> None:
        """Set the user's password with validation and hashing.

        Args:
            raw_password (str): Plain text password to be validated and hashed.
        """
        validate_password_strength(raw_password)
        self._hashed_password = hash_password(raw_password)

    def verify_password(self, raw_password: str) -> bool:
        """Verify a plain text password against the stored hash.

        Args:
            raw_password (str): Plain text password to verify.

        Returns:
            bool: True if password matches, False otherwise.
        """
        return verify_password(raw_password, self._hashed_password)

    @validates("email")
    def validate_email_field(self, field_name: str, email: str) -> str:
        return validate_email(email)

    @validates("name")
    def validate_name_field(self, field_name: str, name: str) -> str:
        return validate_name(name)

    @validates("role")
    def validate_role_field(self, field_name: str, role: RoleEnum) -> RoleEnum:
        if not isinstance(role, RoleEnum):
            raise DomainValidationError(f"Unknown role: {role}")
        return role
