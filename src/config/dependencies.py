from typing import Any, Awaitable, Callable, Dict, Optional, Sequence

import structlog
from fastapi import Depends, HTTPException, Request, params, status
from fastapi.routing import APIRoute
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import BaseAppSettings, get_settings
from database import get_db
from exceptions.security import BaseSecurityError, TokenExpiredError
from repositories.accounts import UserRepository
from repositories.bookings import BookingRepository
from repositories.movies import MovieRepository
from security.interfaces import JWTManagerInterface
from security.manager import JWTManager
from security.policy import Capability, Identity, required_capability
from services.accounts import AuthService
from services.bookings import BookingService
from services.movies import MovieService

logger = structlog.get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_jwt_manager(
    settings: BaseAppSettings = Depends(get_settings)
) -> JWTManagerInterface:
    """Get JWT manager instance with application settings.

    Creates and returns a JWT manager configured with the application's
    secret key, token lifetime, and signing algorithm.

    Args:
        settings (BaseAppSettings): Application settings containing JWT configuration.

    Returns:
        JWTManagerInterface: Configured JWT manager instance.
    """
    return JWTManager(
        access_secret_key=settings.SECRET_KEY_ACCESS,
        access_expires_delta=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        algorithm=settings.JWT_SIGNING_ALGORITHM
    )


def get_movie_repository(
    db: AsyncSession = Depends(get_db)
) -> MovieRepository:
    return MovieRepository(db)


def get_booking_repository(
    db: AsyncSession = Depends(get_db)
) -> BookingRepository:
    return BookingRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_movie_service(
    movie_repository: MovieRepository = Depends(get_movie_repository)
) -> MovieService:
    return MovieService(movie_repository)


def get_booking_service(
    booking_repository: BookingRepository = Depends(get_booking_repository),
    movie_repository: MovieRepository = Depends(get_movie_repository)
) -> BookingService:
    """Get a booking service bound to the request's database session.

    Both repositories share the same session, since FastAPI caches
    ``get_db`` per request.
    """
    return BookingService(booking_repository, movie_repository)


def get_auth_service(
    user_repository: UserRepository = Depends(get_user_repository),
    jwt_manager: JWTManagerInterface = Depends(get_jwt_manager)
) -> AuthService:
    return AuthService(user_repository, jwt_manager)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require(capability: Capability) -> Callable[..., Awaitable[Identity]]:
    """Build the dependency that enforces a non-public capability.

    The returned dependency decodes the bearer token, stores the caller's
    identity on ``request.state`` and, if the capability demands it,
    checks the ADMIN role.

    Args:
        capability (Capability): AUTHENTICATED or ADMIN.

    Returns:
        Callable: A FastAPI dependency resolving to the caller's Identity.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired;
            403 if the caller lacks the required role.
    """

    async def guard(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(
            bearer_scheme
        ),
        jwt_manager: JWTManagerInterface = Depends(get_jwt_manager)
    ) -> Identity:
        if credentials is None or credentials.scheme.lower() != "bearer":
            logger.warning(
                "request_unauthenticated",
                method=request.method,
                path=request.url.path,
                reason="missing_token"
            )
            raise _unauthorized("Missing or invalid Authorization header")

        try:
            claims = jwt_manager.decode_access_token(credentials.credentials)
            identity = Identity.from_claims(claims)
        except TokenExpiredError:
            logger.warning(
                "request_unauthenticated",
                method=request.method,
                path=request.url.path,
                reason="token_expired"
            )
            raise _unauthorized("Token has expired")
        except BaseSecurityError:
            logger.warning(
                "request_unauthenticated",
                method=request.method,
                path=request.url.path,
                reason="invalid_token"
            )
            raise _unauthorized("Invalid or expired token")

        request.state.identity = identity

        if not identity.grants(capability):
            logger.warning(
                "request_forbidden",
                method=request.method,
                path=request.url.path,
                user_id=identity.user_id
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin role required for this operation"
            )
        return identity

    guard.__name__ = f"require_{capability.value}"
    return guard


CAPABILITY_GUARDS: Dict[Capability, Callable[..., Awaitable[Identity]]] = {
    Capability.AUTHENTICATED: require(Capability.AUTHENTICATED),
    Capability.ADMIN: require(Capability.ADMIN),
}


class PolicyRoute(APIRoute):
    """API route that enforces the route policy table.

    The capability is resolved from the endpoint name when the route is
    built. Protected routes get the matching guard as their first
    dependency; public routes get none.
    """

    def __init__(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        dependencies: Optional[Sequence[params.Depends]] = None,
        **kwargs: Any
    ) -> None:
        self.capability = required_capability(endpoint.__name__)
        dependencies = list(dependencies or [])
        guard = CAPABILITY_GUARDS.get(self.capability)
        # routers re-create their routes on include; add the guard once
        if guard is not None and not any(
            depends.dependency is guard for depends in dependencies
        ):
            dependencies.insert(0, Depends(guard))
        super().__init__(path, endpoint, dependencies=dependencies, **kwargs)


def get_current_identity(request: Request) -> Identity:
    """Return the identity attached by the route's capability guard.

    Raises:
        HTTPException: 401 if the request was not authenticated.
    """
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise _unauthorized("Not authenticated")
    return identity
