from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.dependencies import PolicyRoute
from config.logging import configure_logging
from config.settings import get_settings
from database import get_db_contextmanager, init_database
from repositories.accounts import UserRepository
from repositories.movies import MovieRepository
from routers import accounts, bookings, movies
from security.manager import JWTManager
from services.accounts import AuthService
from services.movies import MovieService

logger = structlog.get_logger(__name__)

API_VERSION = "1.0.0"


async def seed_database() -> None:
    """Insert the sample catalog and the bootstrap ADMIN account if missing."""
    settings = get_settings()
    async with get_db_contextmanager() as session:
        movie_service = MovieService(MovieRepository(session))
        await movie_service.seed_sample_movies()

        auth_service = AuthService(
            UserRepository(session),
            JWTManager(
                access_secret_key=settings.SECRET_KEY_ACCESS,
                access_expires_delta=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
                algorithm=settings.JWT_SIGNING_ALGORITHM
            )
        )
        admin = await auth_service.ensure_default_admin(
            email=settings.DEFAULT_ADMIN_EMAIL,
            name=settings.DEFAULT_ADMIN_NAME,
            password=settings.DEFAULT_ADMIN_PASSWORD
        )
        if admin is not None:
            logger.info("default_admin_created", email=admin.email)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("application_starting", version=API_VERSION)
    await init_database()
    if settings.SEED_SAMPLE_DATA:
        await seed_database()
    yield
    logger.info("application_stopping")


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with a readable message."""
    messages = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        messages.append(
            f"{location}: {error.get('msg')}" if location else error.get("msg")
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "; ".join(messages) or "Invalid request"}
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    app = FastAPI(
        title="Movie Booking API",
        description="""
        # Movie Booking API Documentation

        ## Overview
        Browse the movie catalog, book seats and manage user accounts.

        ## Authentication
        Log in at `/api/auth/login` and send the returned token as
        `Authorization: Bearer <token>`. Browsing movies is public; managing
        movies requires the ADMIN role; bookings require any account.
        """,
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.router.route_class = PolicyRoute

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"],
        allow_headers=["origin", "content-type", "accept", "authorization"],
    )

    app.add_exception_handler(
        RequestValidationError,
        request_validation_exception_handler
    )

    app.include_router(
        accounts.router,
        prefix="/api/auth",
        tags=["auth"]
    )
    app.include_router(
        movies.router,
        prefix="/api/movies",
        tags=["movies"]
    )
    app.include_router(
        bookings.router,
        prefix="/api/bookings",
        tags=["bookings"]
    )

    @app.get(
        "/health",
        tags=["system"],
        summary="Health Check",
        description="Check if the API is running and healthy",
    )
    async def health_check():
        return {"status": "healthy", "version": API_VERSION}

    return app


app = create_app()
