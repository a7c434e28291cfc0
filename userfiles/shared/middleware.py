"""
HTTP middleware applied to every response.

- SecurityHeadersMiddleware: restrictive default headers.
- RequestLoggingMiddleware: one log line per request with status and
  duration. Never logs bodies.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("userfiles.access")

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds secure HTTP headers to every response, errors included."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers.setdefault(header_name, header_value)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status code and latency for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        logger.info(
            "%s %s %s -> %d (%.1f ms)",
            client,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
