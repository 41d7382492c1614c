"""
Pydantic schemas for response bodies.

These classes define the shapes of JSON data returned from the API endpoints.
Field names are the exact keys clients see on the wire, which is why a few of
them (``heapTotal``, ``NODE_ENV``) do not follow snake_case.
"""
from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel

from .runtime import MemoryUsage, format_megabytes


def iso_timestamp(now: Optional[dt.datetime] = None) -> str:
    """UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MemoryReport(BaseModel):
    rss: str
    heapTotal: str
    heapUsed: str
    external: str

    @classmethod
    def from_usage(cls, usage: MemoryUsage) -> "MemoryReport":
        return cls(
            rss=format_megabytes(usage.rss),
            heapTotal=format_megabytes(usage.heap_total),
            heapUsed=format_megabytes(usage.heap_used),
            external=format_megabytes(usage.external),
        )


class WelcomeResponse(BaseModel):
    message: str
    timestamp: str
    environment: str
    version: str
    deployed: bool = True
    monitoring: Dict[str, str]


class HealthResponse(BaseModel):
    status: str = "OK"
    service: str
    timestamp: str
    uptime: float
    memory: MemoryReport
    node_version: str


class CpuReport(BaseModel):
    user: int
    system: int


class SystemMetrics(BaseModel):
    uptime: float
    memory: MemoryReport
    cpu: CpuReport
    pid: int
    platform: str
    node_version: str


class RequestMetrics(BaseModel):
    total: int
    by_endpoint: Dict[str, int]


class EnvironmentReport(BaseModel):
    NODE_ENV: str
    PORT: int


class MetricsResponse(BaseModel):
    timestamp: str
    system: SystemMetrics
    requests: RequestMetrics
    environment: EnvironmentReport


class SecurityResponse(BaseModel):
    message: str
    headers: Dict[str, str]
    timestamp: str


class ApiInfoResponse(BaseModel):
    name: str
    version: str
    description: str
    deployment: str
    status: str = "operational"
    features: List[str]


class PerformanceResponse(BaseModel):
    response_time: str
    timestamp: str
    performance: str


class NotFoundResponse(BaseModel):
    error: str = "Route not found"
    path: str
    method: str
    available_endpoints: List[str]


class ErrorResponse(BaseModel):
    error: str = "Something went wrong!"
    environment: Optional[str] = None
    timestamp: str
