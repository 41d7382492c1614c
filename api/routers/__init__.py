"""Expose endpoint modules to be registered in api.main."""
from . import (
    general,
    health,
    metrics,
    security,
    performance,
)  # noqa: F401
