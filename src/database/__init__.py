"""Database module for the Movie Booking API.

This module provides database configuration and session management for the
application. It supports different database backends based on the environment:

- Testing: SQLite with async support (aiosqlite)
- Any other environment: PostgreSQL with async support (asyncpg)

The module exports:
- get_db: Dependency injection function for database sessions
- AsyncSessionLocal: Session factory for async database operations
- init_database / reset_database: schema management helpers
- All database models
"""
import os

from database.models.base import Base
from database.models.accounts import RoleEnum, UserModel
from database.models.movies import MovieModel
from database.models.bookings import BookingModel

environment = os.getenv("ENVIRONMENT", "developing")

if environment == "testing":
    from database.session_sqlite import (
        get_sqlite_db as get_db,
        AsyncSQLiteSessionLocal as AsyncSessionLocal,
        get_sqlite_db_contextmanager as get_db_contextmanager,
        init_sqlite_database as init_database,
        reset_sqlite_database as reset_database
    )
else:
    from database.session_postgresql import (
        get_postgresql_db as get_db,
        AsyncPostgresqlSessionLocal as AsyncSessionLocal,
        get_postgresql_db_contextmanager as get_db_contextmanager,
        init_postgresql_database as init_database,
        reset_postgresql_database as reset_database
    )
