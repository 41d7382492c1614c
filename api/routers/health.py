"""Liveness endpoint used by the deployment platform's health checks."""
from __future__ import annotations

from ..dispatch import RequestContext, RouteTable
from ..schemas import HealthResponse, MemoryReport


def health(ctx: RequestContext) -> HealthResponse:
    """Liveness probe."""
    runtime = ctx.runtime
    return HealthResponse(
        status="OK",
        service=ctx.settings.service_name,
        timestamp=ctx.timestamp,
        uptime=runtime.uptime,
        memory=MemoryReport.from_usage(runtime.memory),
        node_version=runtime.runtime_version,
    )


def register(table: RouteTable) -> None:
    table.register("GET", "/health", health)
