"""
Middleware to record simple per-path request metrics.

Every incoming HTTP request increments a counter keyed by the request path
before it reaches the route table, so unmatched paths are counted too.  The
counters live in the :class:`~api.counters.RequestCounterStore` handed to the
middleware and are exposed via the ``/metrics`` endpoint.
"""
from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from ..counters import RequestCounterStore


class MetricsMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, counters: RequestCounterStore) -> None:
        super().__init__(app)
        self.counters = counters

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:  # type: ignore[override]
        self.counters.increment(request.url.path)
        return await call_next(request)
