"""
Entrypoint for the FastAPI application.

Creates the app, wires the middleware chain, registers the endpoints on the
route table and hosts the single catch-all endpoint that hands requests to it.
This module is intended to be invoked by an ASGI server (e.g. uvicorn).
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .counters import RequestCounterStore
from .dispatch import RequestContext, RouteTable, server_error
from .middleware.access_log import RequestLoggingMiddleware
from .middleware.body import JsonBodyMiddleware
from .middleware.cors import CorsHeadersMiddleware, cors_headers
from .middleware.metrics import MetricsMiddleware
from .routers import general, health, metrics, performance, security
from .runtime import collect_runtime_stats
from .schemas import iso_timestamp

logger = logging.getLogger(__name__)

HTTP_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def build_route_table() -> RouteTable:
    table = RouteTable()
    for module in (general, health, metrics, security, performance):
        module.register(table)
    return table


def configure_logging(level: str) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def create_app(
    settings: Optional[Settings] = None,
    counters: Optional[RequestCounterStore] = None,
) -> FastAPI:
    settings = settings or default_settings
    counters = counters if counters is not None else RequestCounterStore()
    table = build_route_table()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Server running on port %s", settings.port)
        logger.info("📦 Environment: %s", settings.environment)
        logger.info("🌐 Access URL: http://%s:%s", settings.host, settings.port)
        yield
        logger.info("Shutdown signal received, shutting down gracefully")

    # The route table is the only routing authority, so FastAPI's own
    # documentation routes stay disabled.
    app = FastAPI(
        title=settings.api_name,
        version=settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.counters = counters
    app.state.routes = table

    # Middleware stages in request order.  Starlette runs the most recently
    # added middleware first, hence the reversed registration.
    chain = [
        (MetricsMiddleware, {"counters": counters}),
        (CorsHeadersMiddleware, {"allowed_headers": settings.allowed_header_list}),
        (RequestLoggingMiddleware, {}),
        (JsonBodyMiddleware, {}),
    ]
    for middleware_cls, options in reversed(chain):
        app.add_middleware(middleware_cls, **options)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Error: unhandled failure on %s %s", request.method, request.url.path, exc_info=exc)
        result = server_error(settings.node_env)
        return JSONResponse(
            result.body,
            status_code=result.status_code,
            headers=cors_headers(settings.allowed_header_list),
        )

    @app.api_route("/{path:path}", methods=HTTP_METHODS, include_in_schema=False)
    async def dispatch(request: Request) -> JSONResponse:
        ctx = RequestContext(
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
            timestamp=iso_timestamp(),
            counters=counters.snapshot(),
            runtime=collect_runtime_stats(),
            settings=settings,
        )
        result = await table.dispatch(ctx.method, ctx.path, ctx)
        return JSONResponse(result.body, status_code=result.status_code, headers=result.headers)

    return app


app = create_app()
