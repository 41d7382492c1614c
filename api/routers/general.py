"""
Informational endpoints.

``/`` greets the caller with deployment details and ``/api/info`` describes
the API itself.  Both payloads are static apart from the timestamp and the
configured labels.
"""
from __future__ import annotations

from ..dispatch import RequestContext, RouteTable
from ..schemas import ApiInfoResponse, WelcomeResponse

MONITORING_ENDPOINTS = {
    "health": "/health",
    "metrics": "/metrics",
    "security": "/security",
    "performance": "/performance",
}

API_FEATURES = [
    "Automated testing",
    "Continuous deployment",
    "Health monitoring",
    "Request metrics",
    "Security headers",
    "Performance checks",
]


def welcome(ctx: RequestContext) -> WelcomeResponse:
    settings = ctx.settings
    return WelcomeResponse(
        message=f"🚀 Hello from CI/CD Pipeline deployed on {settings.deployment}!",
        timestamp=ctx.timestamp,
        environment=settings.environment,
        version=settings.version,
        deployed=True,
        monitoring=dict(MONITORING_ENDPOINTS),
    )


def api_info(ctx: RequestContext) -> ApiInfoResponse:
    settings = ctx.settings
    return ApiInfoResponse(
        name=settings.api_name,
        version=settings.version,
        description="A simple API to demonstrate CI/CD pipeline",
        deployment=settings.deployment,
        status="operational",
        features=list(API_FEATURES),
    )


def register(table: RouteTable) -> None:
    table.register("GET", "/", welcome)
    table.register("GET", "/api/info", api_info)
