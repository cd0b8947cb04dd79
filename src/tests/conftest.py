import os

os.environ["ENVIRONMENT"] = "testing"

from decimal import Decimal  # noqa: E402
from typing import AsyncGenerator, Any  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from config.settings import get_settings, BaseAppSettings  # noqa: E402
from database import get_db_contextmanager, reset_database  # noqa: E402
from database.models.accounts import UserModel, RoleEnum  # noqa: E402
from database.models.movies import MovieModel  # noqa: E402
from main import create_app  # noqa: E402
from security.interfaces import JWTManagerInterface  # noqa: E402
from security.manager import JWTManager  # noqa: E402
from security.policy import Identity  # noqa: E402

CUSTOMER_PASSWORD = "password123"
ADMIN_PASSWORD = "admin12345"


@pytest.fixture(scope="session")
def app() -> FastAPI:
    """
    Session-scoped fixture to create and return a FastAPI app instance for testing.
    """
    return create_app()


@pytest.fixture(scope="session")
def settings() -> BaseAppSettings:
    """
    Session-scoped fixture to provide application settings.
    Returns an instance of BaseAppSettings.
    """
    return get_settings()


@pytest.fixture(scope="function")
def jwt_manager(settings: BaseAppSettings) -> JWTManagerInterface:
    """
    Function-scoped fixture to provide a JWT manager for creating and verifying tokens.
    Uses the same settings as the application.
    """
    return JWTManager(
        access_secret_key=settings.SECRET_KEY_ACCESS,
        access_expires_delta=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        algorithm=settings.JWT_SIGNING_ALGORITHM
    )


@pytest_asyncio.fixture(scope="function", autouse=True)
async def reset_db(request):
    """
    Fixture to reset the database to a clean state before each test function.
    Skips the reset for unit tests, which never touch the database.
    """
    if "unit" not in request.keywords:
        await reset_database()
    yield


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, Any]:
    """
    Function-scoped fixture to provide a database session for each test function.
    Yields an asynchronous SQLAlchemy session.
    """
    async with get_db_contextmanager() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, Any]:
    """
    Provide an asynchronous HTTP client for testing.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as async_client:
        yield async_client


async def _create_user(
    db_session: AsyncSession,
    email: str,
    name: str,
    password: str,
    role: RoleEnum
) -> UserModel:
    user = UserModel.create(
        email=email,
        name=name,
        raw_password=password,
        role=role
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


def _headers_for(user: UserModel, jwt_manager: JWTManagerInterface) -> dict:
    identity = Identity(
        user_id=user.id,
        email=user.email,
        name=user.name,
        role=user.role
    )
    token = jwt_manager.create_access_token(identity.to_claims())
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture(scope="function")
async def customer_user(db_session: AsyncSession) -> UserModel:
    """Create a CUSTOMER account directly in the database."""
    return await _create_user(
        db_session,
        email="customer@example.com",
        name="Customer User",
        password=CUSTOMER_PASSWORD,
        role=RoleEnum.CUSTOMER
    )


@pytest_asyncio.fixture(scope="function")
async def admin_user(db_session: AsyncSession) -> UserModel:
    """Create an ADMIN account directly in the database."""
    return await _create_user(
        db_session,
        email="admin@example.com",
        name="Admin User",
        password=ADMIN_PASSWORD,
        role=RoleEnum.ADMIN
    )


@pytest.fixture(scope="function")
def customer_headers(customer_user, jwt_manager) -> dict[str, str]:
    """Bearer header for the CUSTOMER account."""
    return _headers_for(customer_user, jwt_manager)


@pytest.fixture(scope="function")
def admin_headers(admin_user, jwt_manager) -> dict[str, str]:
    """Bearer header for the ADMIN account."""
    return _headers_for(admin_user, jwt_manager)


@pytest_asyncio.fixture(scope="function")
async def seed_movies(db_session: AsyncSession) -> list[MovieModel]:
    """Insert two movies and return them."""
    movies = [
        MovieModel.create(
            title="Inception",
            description="Dream heist",
            genre="Sci-Fi",
            duration_minutes=148,
            price=Decimal("12.50")
        ),
        MovieModel.create(
            title="The Dark Knight",
            description="Batman fights the Joker in Gotham City",
            genre="Action",
            duration_minutes=152,
            price=Decimal("11.00")
        ),
    ]
    db_session.add_all(movies)
    await db_session.commit()
    for movie in movies:
        await db_session.refresh(movie)
    return movies
