"""
Route table and request dispatch.

The service exposes a fixed set of exact ``(method, path)`` endpoints.  Handlers
are registered once at startup on a :class:`RouteTable`; the FastAPI app hands
every request to :meth:`RouteTable.dispatch`, which picks the handler, wraps
its invocation in the single error boundary and falls back to the 404 payload
when nothing matches.  There are no path parameters and no method fallback.
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel

from .config import Settings
from .counters import RequestCounters
from .runtime import RuntimeStats
from .schemas import ErrorResponse, NotFoundResponse, iso_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Everything a handler may read while building its response."""

    method: str
    path: str
    client_host: Optional[str]
    timestamp: str
    counters: RequestCounters
    runtime: RuntimeStats
    settings: Settings


@dataclass
class HandlerResult:
    status_code: int = 200
    body: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)


HandlerReturn = Union[HandlerResult, BaseModel, Dict[str, Any]]
Handler = Callable[[RequestContext], Union[HandlerReturn, Awaitable[HandlerReturn]]]


class DuplicateRouteError(ValueError):
    """Raised when the same (method, path) pair is registered twice."""


def server_error(node_env: Optional[str]) -> HandlerResult:
    """Generic 500 payload; the underlying exception is never exposed."""
    body = ErrorResponse(environment=node_env, timestamp=iso_timestamp())
    return HandlerResult(status_code=500, body=body.model_dump())


def _to_result(value: HandlerReturn) -> HandlerResult:
    if isinstance(value, HandlerResult):
        return value
    if isinstance(value, BaseModel):
        return HandlerResult(body=value.model_dump())
    if isinstance(value, dict):
        return HandlerResult(body=value)
    raise TypeError(f"Unsupported handler return type: {type(value).__name__}")


class RouteTable:
    """Exact-match mapping of ``(METHOD, path)`` to handler."""

    def __init__(self) -> None:
        self._routes: Dict[Tuple[str, str], Handler] = {}

    def register(self, method: str, path: str, handler: Handler) -> None:
        key = (method.upper(), path)
        if key in self._routes:
            raise DuplicateRouteError(f"Route already registered: {key[0]} {path}")
        self._routes[key] = handler

    def route(self, method: str, path: str) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`register`."""

        def decorator(handler: Handler) -> Handler:
            self.register(method, path, handler)
            return handler

        return decorator

    def lookup(self, method: str, path: str) -> Optional[Handler]:
        return self._routes.get((method.upper(), path))

    def endpoints(self) -> List[str]:
        return [f"{method} {path}" for method, path in sorted(self._routes, key=lambda k: (k[1], k[0]))]

    def __contains__(self, key: Tuple[str, str]) -> bool:
        method, path = key
        return (method.upper(), path) in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._routes))

    def not_found(self, method: str, path: str) -> HandlerResult:
        body = NotFoundResponse(path=path, method=method.upper(), available_endpoints=self.endpoints())
        return HandlerResult(status_code=404, body=body.model_dump())

    async def dispatch(self, method: str, path: str, context: RequestContext) -> HandlerResult:
        handler = self.lookup(method, path)
        if handler is None:
            return self.not_found(method, path)
        try:
            value = handler(context)
            if inspect.isawaitable(value):
                value = await value
            return _to_result(value)
        except Exception:
            logger.exception("Error: handler for %s %s failed", method.upper(), path)
            return server_error(context.settings.node_env)
