"""
Food Circle Backend — MongoDB Client Management
================================================

What:  Motor (async MongoDB) client construction and FastAPI dependencies
       that hand the database and collections to route handlers.
How:   The lifespan handler in main.py creates one client per process and
       stores the database handle on `app.state.database`. Route handlers
       never import a global handle; they receive collections through
       `Depends(get_foods_collection)` / `Depends(get_requests_collection)`.
Who:   main.py (lifecycle), dependencies.py (service wiring).

Client configuration:
    Stable API v1 in strict mode with deprecation errors, as configured for
    the Atlas cluster. Connection pooling, timeouts and retryable writes are
    the driver defaults (plus `retryWrites=true&w=majority` in the URL).

    The client connects lazily: creating it does not touch the network, the
    first command does. `ping_database()` is used by the health route.
"""

import logging
from typing import Any

from fastapi import Request
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.server_api import ServerApi

from foodcircle.config import settings
from foodcircle.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def create_client(url: str | None = None) -> AsyncIOMotorClient:
    """
    Build the process-wide Motor client.

    Args:
        url: Connection string; defaults to `settings.mongodb_url`.
    """
    return AsyncIOMotorClient(
        url or settings.mongodb_url,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """
    FastAPI dependency returning the database bound to this application.

    Raises:
        DatabaseError: The application started without a database handle
            (startup failed, or the app was built without one).
    """
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise DatabaseError(
            message="Database is not available. Please try again later.",
            context={"reason": "database handle missing on app.state"},
        )
    return database


def get_foods_collection(request: Request) -> AsyncIOMotorCollection:
    """The `foods` collection of the bound database."""
    return get_database(request)[settings.foods_collection]


def get_requests_collection(request: Request) -> AsyncIOMotorCollection:
    """The `foodRequest` collection of the bound database."""
    return get_database(request)[settings.requests_collection]


async def ping_database(database: Any) -> bool:
    """
    Lightweight connectivity probe (`{"ping": 1}` on the database).

    Returns True on success, False on any driver failure. Never raises.
    """
    try:
        await database.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB ping failed: %s", str(e))
        return False


def close_client(client: AsyncIOMotorClient | None) -> None:
    """Close every pooled connection of `client` (no-op for None)."""
    if client is not None:
        client.close()
