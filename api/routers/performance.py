"""
Synthetic performance check.

The handler awaits a fixed delay to simulate work and reports the measured
wall-clock time.  The delay is an ``asyncio.sleep`` so other requests keep
being served while it is pending.
"""
from __future__ import annotations

import asyncio
import time

from ..dispatch import RequestContext, RouteTable
from ..schemas import PerformanceResponse, iso_timestamp

# Responses slower than this many milliseconds are reported as degraded.
DEGRADED_THRESHOLD_MS = 500.0


async def performance(ctx: RequestContext) -> PerformanceResponse:
    start = time.perf_counter()
    await asyncio.sleep(ctx.settings.performance_delay_ms / 1000)
    elapsed_ms = (time.perf_counter() - start) * 1000
    return PerformanceResponse(
        response_time=f"{elapsed_ms:.2f} ms",
        timestamp=iso_timestamp(),
        performance="optimal" if elapsed_ms < DEGRADED_THRESHOLD_MS else "degraded",
    )


def register(table: RouteTable) -> None:
    table.register("GET", "/performance", performance)
