"""
Request logging middleware.

Each request gets a UUID held in a context variable so downstream loggers can
correlate entries belonging to the same request.  The ID is returned to the
client via the ``X-Request-ID`` response header, and one access line is logged
per request.
"""
from __future__ import annotations

import contextvars
import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ..schemas import iso_timestamp

logger = logging.getLogger("api.access")

# Context variable to hold the current request ID
request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs each request and tags it with a request ID."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:  # type: ignore[override]
        rid = str(uuid.uuid4())
        token = request_id_ctx.set(rid)
        try:
            client = request.client.host if request.client else "unknown"
            logger.info("%s - %s %s - %s", iso_timestamp(), request.method, request.url.path, client)
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)
        response.headers.setdefault("X-Request-ID", rid)
        return response
