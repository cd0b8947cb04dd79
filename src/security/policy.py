from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from database.models.accounts import RoleEnum
from exceptions.security import InvalidTokenError


class Capability(Enum):
    """Access level a route requires.

    - PUBLIC: no credentials needed
    - AUTHENTICATED: any valid bearer token
    - ADMIN: a valid bearer token carrying the ADMIN role
    """
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


ROUTE_POLICIES: Dict[str, Capability] = {
    "health_check": Capability.PUBLIC,
    "register_user": Capability.PUBLIC,
    "login_user": Capability.PUBLIC,
    "get_me": Capability.AUTHENTICATED,
    "get_movies": Capability.PUBLIC,
    "get_movie_by_id": Capability.PUBLIC,
    "create_movie": Capability.ADMIN,
    "update_movie": Capability.ADMIN,
    "delete_movie": Capability.ADMIN,
    "get_bookings": Capability.AUTHENTICATED,
    "get_booking_by_id": Capability.AUTHENTICATED,
    "get_bookings_by_movie": Capability.AUTHENTICATED,
    "create_booking": Capability.AUTHENTICATED,
    "delete_booking": Capability.AUTHENTICATED,
}


def required_capability(
    endpoint_name: str,
    policies: Mapping[str, Capability] = ROUTE_POLICIES
) -> Capability:
    """Look up the capability a route requires.

    Routes are keyed by the name of their endpoint function, which is unique
    across the application. Endpoints missing from the table require
    authentication.

    Args:
        endpoint_name (str): Name of the route's endpoint function,
            e.g. 'create_movie'.
        policies (Mapping): Policy table to consult.

    Returns:
        Capability: The capability the caller must hold.
    """
    return policies.get(endpoint_name, Capability.AUTHENTICATED)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller decoded from a validated bearer token."""

    user_id: int
    email: str
    name: str
    role: RoleEnum

    @property
    def is_admin(self) -> bool:
        return self.role == RoleEnum.ADMIN

    def grants(self, capability: Capability) -> bool:
        if capability == Capability.ADMIN:
            return self.is_admin
        return True

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "Identity":
        """Build an identity from the claims of a validated token.

        Raises:
            InvalidTokenError: If a required claim is missing or malformed.
        """
        try:
            return cls(
                user_id=int(claims["user_id"]),
                email=str(claims["email"]),
                name=str(claims.get("name", "")),
                role=RoleEnum(claims["role"])
            )
        except (KeyError, TypeError, ValueError):
            raise InvalidTokenError("Invalid token claims.")

    def to_claims(self) -> Dict[str, Any]:
        return {
            "sub": str(self.user_id),
            "user_id": self.user_id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
        }
