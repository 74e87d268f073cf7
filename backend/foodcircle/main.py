"""
Food Circle Backend — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers and
       returns the app; the lifespan handler opens and closes the MongoDB
       client.
Who:   uvicorn (`uvicorn foodcircle.main:app`), the `foodcircle` console
       script, and the test suite (`create_app(database=...)`).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌────────────┐ ┌──────┐ ┌──────────┐  │
    │  │  Req ID  │→│ Access Log │→│ GZip │→│   CORS   │  │
    │  └──────────┘ └────────────┘ └──────┘ └──────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  session · foods · requests · health                │
    │                                                     │
    │  Exception Handlers:                                │
    │  Unauthorized→401 │ Forbidden→403 │ Database→500    │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config check → Motor client → database handle
    Shutdown: close the Motor client (only if this app created it)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from foodcircle import __version__
from foodcircle.config import settings
from foodcircle.database import close_client, create_client
from foodcircle.exceptions import (
    DatabaseError,
    FoodCircleError,
    ForbiddenError,
    UnauthorizedError,
)
from foodcircle.middleware.logging import RequestLoggingMiddleware
from foodcircle.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from foodcircle.routes import foods, health, requests, session

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure root logging once for the process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s to stdout.
    The MongoDB driver and uvicorn access logger are raised to WARNING; the
    access log middleware already records every request.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("motor").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the MongoDB client on startup and close it on shutdown.

    When the app was built with an explicit database (tests, scripts) no
    client is created and nothing is closed.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Food Circle Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: the liveness route and /health report the problem.
        logger.error("Configuration error: %s", str(e))

    client = None
    if getattr(app.state, "database", None) is None:
        client = create_client()
        app.state.mongo_client = client
        app.state.database = client[settings.db_name]
        logger.info("MongoDB client ready (database=%s)", settings.db_name)

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.port)
    logger.info("=" * 60)

    yield

    logger.info("Food Circle Backend shutting down...")
    if client is not None:
        close_client(client)
        app.state.database = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, rid: str) -> dict:
    return {"error": error, "message": message, "request_id": rid}


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to JSON error responses.

    Handler hierarchy:
        UnauthorizedError  → 401
        ForbiddenError     → 403
        DatabaseError      → 500 (generic message, details logged)
        FoodCircleError    → 500
        Exception          → 500 (traceback logged, process keeps serving)
    """

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        rid = request_id_var.get("")
        logger.info("[%s] Unauthorized %s %s: %s", rid, request.method, request.url.path, exc.context)
        return JSONResponse(status_code=401, content=_error_body("unauthorized", exc.message, rid))

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        rid = request_id_var.get("")
        return JSONResponse(status_code=403, content=_error_body("forbidden", exc.message, rid))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "server_error", "An internal error occurred. Please try again later.", rid
            ),
        )

    @app.exception_handler(FoodCircleError)
    async def handle_app_error(request: Request, exc: FoodCircleError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content=_error_body("server_error", exc.message, rid))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error", "An unexpected error occurred. Please try again.", rid
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(database: Optional[Any] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Database handle to serve from. When None, the lifespan
            handler connects to MongoDB using settings.

    Returns: Fully configured FastAPI instance.
    """
    app = FastAPI(
        title="Food Circle API",
        description=(
            "Food-donation marketplace backend: browse available food, manage "
            "your donations and request food from other donators."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.database = database

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,  # session cookie
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(session.router)
    app.include_router(foods.router)
    app.include_router(requests.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn on settings.port."""
    import uvicorn

    uvicorn.run(
        "foodcircle.main:app",
        host=settings.backend_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
