"""
Middleware to attach permissive CORS headers to all responses.

Starlette's ``CORSMiddleware`` only answers requests that carry an ``Origin``
header.  The demo frontend and uptime checkers expect the headers on every
reply, including 404 and 500 responses, so they are set unconditionally here.
"""
from __future__ import annotations

from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

ALLOW_ORIGIN = "*"


def cors_headers(allowed_headers: Iterable[str]) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": ALLOW_ORIGIN,
        "Access-Control-Allow-Headers": ", ".join(allowed_headers),
    }


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds CORS headers to each response."""

    def __init__(self, app: ASGIApp, allowed_headers: Iterable[str]) -> None:
        super().__init__(app)
        self.headers = cors_headers(allowed_headers)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:  # type: ignore[override]
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers[name] = value
        return response
