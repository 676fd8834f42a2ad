"""
Case API: Request ID Middleware
=================================

What:  Assigns a correlation ID to each incoming request and echoes it back.
How:   Reuses the client's X-Request-ID header when it is a plain token of at
       most 64 characters, otherwise generates a short UUID. The ID goes into
       a ContextVar for loggers and error handlers and into the response.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Client IDs end up verbatim in log lines and error bodies
_CLIENT_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


def new_request_id() -> str:
    """8 hex characters, enough to correlate log lines."""
    return uuid.uuid4().hex[:8]


def resolve_request_id(header_value: Optional[str]) -> str:
    if header_value and _CLIENT_ID_PATTERN.fullmatch(header_value):
        return header_value
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags each request with a correlation ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
