"""
Food Circle Backend — Liveness & Health Routes
===============================================

What:  GET / (plain-text liveness, what uptime monitors already poll) and
       GET /health (JSON status including a MongoDB ping).
How:   /health runs `{"ping": 1}` against the bound database. A failed ping
       reports "unhealthy" with HTTP 503 so a load balancer stops routing
       traffic here.
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from foodcircle import __version__
from foodcircle.database import ping_database
from foodcircle.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()

LIVENESS_TEXT = "Food circle server is running.."


@router.get("/", response_class=PlainTextResponse, summary="Liveness text")
async def root() -> str:
    return LIVENESS_TEXT


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request):
    database = getattr(request.app.state, "database", None)
    connected = database is not None and await ping_database(database)
    if not connected:
        logger.warning("Health check: database unreachable")

    health = HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if not connected:
        return JSONResponse(status_code=503, content=health.model_dump())
    return health
