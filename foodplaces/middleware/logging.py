"""
Food Places API: Request Logging Middleware
===========================================

What:  One access log line per HTTP request on the `foodplaces.access` logger.
How:   Times the downstream handler and logs method, path, status, duration,
       request ID and client address. A handler that raises is logged as a
       500 before the exception continues to the error middleware.
When:  Runs inside RequestIDMiddleware so the request ID is already set.

Log line:
    POST /api/food-places 201 3.4ms [1a2b3c4d] from 127.0.0.1
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from foodplaces.middleware.request_id import request_id_var

logger = logging.getLogger("foodplaces.access")

# Probes hit these every few seconds
QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def log_access(request: Request, status: int, started: float) -> None:
    elapsed_ms = (time.perf_counter() - started) * 1000
    fields = {
        "request_id": request_id_var.get(""),
        "method": request.method,
        "path": request.url.path,
        "status": status,
        "duration_ms": round(elapsed_ms, 2),
        "client_ip": request.client.host if request.client else "unknown",
    }
    logger.log(
        level_for_status(status),
        "%(method)s %(path)s %(status)d %(duration_ms).1fms [%(request_id)s] from %(client_ip)s",
        fields,
        extra=fields,
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        status: Optional[int] = None
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            log_access(request, status if status is not None else 500, started)
