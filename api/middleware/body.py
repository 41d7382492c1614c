"""
JSON body parsing middleware.

Parses a JSON request body when one is present and stores the result on
``request.state.json_body``.  Absent, empty or malformed bodies leave ``None``
there; they are never rejected since no endpoint consumes a body.
"""
from __future__ import annotations

import json
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class JsonBodyMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:  # type: ignore[override]
        request.state.json_body = None
        if _is_json(request.headers.get("content-type", "")):
            raw = await request.body()
            if raw.strip():
                try:
                    request.state.json_body = json.loads(raw)
                except ValueError as exc:
                    logger.debug("Ignoring malformed JSON body on %s: %s", request.url.path, exc)
        return await call_next(request)
