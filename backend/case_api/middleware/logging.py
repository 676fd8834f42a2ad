"""
Case API: Request Logging Middleware
======================================

What:  One access-log line per /case request.
How:   Times the downstream handler and logs method, path, query, status,
       duration, request ID and client IP.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Request bodies are never logged. GET /health is not logged at all.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from case_api.middleware.request_id import request_id_var

logger = logging.getLogger("case_api.access")


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access log."""

    # Probed every few seconds by load balancers
    SKIPPED_PATHS = frozenset({"/health"})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        # searchCases filters travel in the query string
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            target,
            response.status_code,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
