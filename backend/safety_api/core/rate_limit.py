"""
Rate limiting configuration using slowapi.

Keys on the caller-supplied X-User-ID header when present, client IP otherwise.
Backed by Redis in production for multi-process deployments.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from safety_api.core.config import get_settings


def _get_rate_limit_key(request: Request) -> str:
    """
    Extract rate limit key from request.

    Priority:
    1. Identified caller -> "user:{X-User-ID}"
    2. Anonymous -> "ip:{client_ip}"
    """
    user_id = request.headers.get("X-User-ID")
    if user_id:
        return f"user:{user_id}"

    client_ip = request.client.host if request.client else "unknown"
    return f"ip:{client_ip}"


limiter = Limiter(
    key_func=_get_rate_limit_key,
    default_limits=["60/minute"],
    enabled=get_settings().rate_limit_enabled,
    storage_uri=get_settings().redis_url,
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors with a standardized response."""
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Rate limit exceeded. Please try again later.",
            "code": "RATE_LIMIT_EXCEEDED",
        },
    )
