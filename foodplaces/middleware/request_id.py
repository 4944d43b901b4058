"""
Food Places API: Request ID Middleware
======================================

What:  Assigns a short ID to each request and returns it in `X-Request-ID`.
How:   A client-supplied X-Request-ID is reused when it is a sane token;
       anything else gets a fresh 8-char UUID prefix. The ID lives in a
       ContextVar (read by loggers and the exception handlers) for the
       duration of the request only.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Echoed into headers and log lines: printable, no whitespace, bounded
_CLIENT_ID_PATTERN = re.compile(r"[A-Za-z0-9._:-]{1,64}")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(supplied: str) -> str:
    """The client's ID if it is usable, a new one otherwise."""
    supplied = (supplied or "").strip()
    if _CLIENT_ID_PATTERN.fullmatch(supplied):
        return supplied
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER, ""))
        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
