"""
Metrics endpoint.

``/metrics`` reports process figures alongside the cumulative request counts
collected by :class:`api.middleware.metrics.MetricsMiddleware` since the
application started.  The counts come from the snapshot taken for this
request, so the current request is already included.
"""
from __future__ import annotations

from ..dispatch import RequestContext, RouteTable
from ..schemas import (
    CpuReport,
    EnvironmentReport,
    MemoryReport,
    MetricsResponse,
    RequestMetrics,
    SystemMetrics,
)


def metrics(ctx: RequestContext) -> MetricsResponse:
    runtime = ctx.runtime
    system = SystemMetrics(
        uptime=runtime.uptime,
        memory=MemoryReport.from_usage(runtime.memory),
        cpu=CpuReport(user=runtime.cpu.user, system=runtime.cpu.system),
        pid=runtime.pid,
        platform=runtime.platform,
        node_version=runtime.runtime_version,
    )
    return MetricsResponse(
        timestamp=ctx.timestamp,
        system=system,
        requests=RequestMetrics(
            total=ctx.counters.total,
            by_endpoint=dict(ctx.counters.by_endpoint),
        ),
        environment=EnvironmentReport(
            NODE_ENV=ctx.settings.environment,
            PORT=ctx.settings.port,
        ),
    )


def register(table: RouteTable) -> None:
    table.register("GET", "/metrics", metrics)
