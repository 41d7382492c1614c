"""Process runtime statistics reported by the health and metrics endpoints."""
from __future__ import annotations

import os
import platform
import sys
import time
from dataclasses import dataclass

import psutil

# Module import time approximates process start for uptime reporting.
PROCESS_STARTED_AT = time.monotonic()

_BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class MemoryUsage:
    rss: int
    heap_total: int
    heap_used: int
    external: int


@dataclass(frozen=True)
class CpuUsage:
    # Microseconds, mirroring the resolution most process monitors expect.
    user: int
    system: int


@dataclass(frozen=True)
class RuntimeStats:
    uptime: float
    memory: MemoryUsage
    cpu: CpuUsage
    pid: int
    platform: str
    runtime_version: str


def runtime_version() -> str:
    return f"v{platform.python_version()}"


def format_megabytes(num_bytes: int) -> str:
    """Render a byte count as whole megabytes, e.g. ``"42 MB"``."""
    return f"{round(num_bytes / _BYTES_PER_MB)} MB"


def collect_runtime_stats(started_at: float = PROCESS_STARTED_AT) -> RuntimeStats:
    """Sample uptime, memory and CPU figures for the current process.

    ``heap_used`` falls back to rss and ``external`` to zero on platforms where
    psutil does not report a data segment or shared memory.
    """
    proc = psutil.Process(os.getpid())
    with proc.oneshot():
        mem = proc.memory_info()
        cpu = proc.cpu_times()
    memory = MemoryUsage(
        rss=mem.rss,
        heap_total=mem.vms,
        heap_used=getattr(mem, "data", mem.rss),
        external=getattr(mem, "shared", 0),
    )
    return RuntimeStats(
        uptime=max(0.0, time.monotonic() - started_at),
        memory=memory,
        cpu=CpuUsage(user=int(cpu.user * 1_000_000), system=int(cpu.system * 1_000_000)),
        pid=proc.pid,
        platform=sys.platform,
        runtime_version=runtime_version(),
    )
