"""
Food Places API: Root and Health Routes
=======================================

What:  `GET /` greeting and `GET /health` liveness probe.
How:   Neither touches the store; /health answers 200 whenever the process
       can serve HTTP.
Who:   Load balancers, container health checks, humans with curl.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from foodplaces import __version__
from foodplaces.schemas.food_place import HealthResponse

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def root() -> str:
    return "Hello, World!"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns status OK with the server time, version and uptime.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
