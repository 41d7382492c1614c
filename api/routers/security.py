"""Security header check endpoint."""
from __future__ import annotations

from ..dispatch import HandlerResult, RequestContext, RouteTable
from ..schemas import SecurityResponse

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


def security(ctx: RequestContext) -> HandlerResult:
    """Set the fixed security headers and echo them back in the body."""
    body = SecurityResponse(
        message="Security headers applied",
        headers=dict(SECURITY_HEADERS),
        timestamp=ctx.timestamp,
    )
    return HandlerResult(status_code=200, body=body.model_dump(), headers=dict(SECURITY_HEADERS))


def register(table: RouteTable) -> None:
    table.register("GET", "/security", security)
