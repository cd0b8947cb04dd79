from dataclasses import dataclass
from typing import Optional

import structlog
from sqlalchemy.exc import IntegrityError

from database.models.accounts import RoleEnum, UserModel
from database.validators.accounts import (
    validate_email,
    validate_name,
    validate_password_strength
)
from exceptions.services import (
    DomainValidationError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError
)
from repositories.accounts import UserRepository
from security.interfaces import JWTManagerInterface
from security.policy import Identity

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Bearer token issued at login together with the account it belongs to."""

    token: str
    user: UserModel


class AuthService:
    """Service for registration, login and account lookup."""

    def __init__(
        self,
        user_repository: UserRepository,
        jwt_manager: JWTManagerInterface
    ) -> None:
        self._users = user_repository
        self._jwt_manager = jwt_manager

    async def register(
        self,
        email: Optional[str],
        name: Optional[str],
        password: Optional[str],
        role: RoleEnum = RoleEnum.CUSTOMER
    ) -> UserModel:
        """Register a new user.

        Process:
        1. Validate email, name and password strength
        2. Reject an email that is already registered
        3. Hash the password and persist the user

        Args:
            email (Optional[str]): User's email, trimmed and lower-cased.
            name (Optional[str]): Display name.
            password (Optional[str]): Plain text password.
            role (RoleEnum): Role of the new account.

        Returns:
            UserModel: The persisted user.

        Raises:
            DomainValidationError: If any input is invalid.
            EmailAlreadyRegisteredError: If the email already has an account.
        """
        normalized_email = validate_email(email)
        trimmed_name = validate_name(name)
        validate_password_strength(password)
        if not isinstance(role, RoleEnum):
            raise DomainValidationError(f"Unknown role: {role}")

        if await self._users.exists_by_email(normalized_email):
            raise EmailAlreadyRegisteredError(normalized_email)

        user = UserModel.create(
            email=normalized_email,
            name=trimmed_name,
            raw_password=password,
            role=role
        )
        try:
            user = await self._users.save(user)
        except IntegrityError:
            raise EmailAlreadyRegisteredError(normalized_email)

        logger.info("user_registered", user_id=user.id, role=user.role.value)
        return user

    async def login(
        self, email: Optional[str], password: Optional[str]
    ) -> LoginResult:
        """Authenticate a user and issue a bearer token.

        Unknown emails and wrong passwords raise the same error so the
        response does not reveal whether an account exists.

        Raises:
            DomainValidationError: If email or password is missing.
            InvalidCredentialsError: If the credentials do not match.
        """
        if email is None or not email.strip():
            raise DomainValidationError("Email cannot be empty")
        if not password:
            raise DomainValidationError("Password cannot be empty")

        normalized_email = email.strip().lower()
        user = await self._users.find_by_email(normalized_email)

        if user is None or not user.verify_password(password):
            logger.warning("login_failed")
            raise InvalidCredentialsError()

        identity = Identity(
            user_id=user.id,
            email=user.email,
            name=user.name,
            role=user.role
        )
        token = self._jwt_manager.create_access_token(identity.to_claims())
        logger.info("login_succeeded", user_id=user.id)
        return LoginResult(token=token, user=user)

    async def get_user_by_id(self, user_id: int) -> Optional[UserModel]:
        return await self._users.find_by_id(user_id)

    async def ensure_default_admin(
        self, email: str, name: str, password: str
    ) -> Optional[UserModel]:
        """Create the bootstrap ADMIN account unless the email is taken.

        Returns:
            Optional[UserModel]: The new admin, or None if it already existed.
        """
        try:
            return await self.register(email, name, password, RoleEnum.ADMIN)
        except EmailAlreadyRegisteredError:
            logger.info("default_admin_exists")
            return None
