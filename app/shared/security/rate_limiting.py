"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit.
Protects against denial-of-service and resource abuse.
Each application instance gets its own Limiter so that
counters are never shared between apps.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import Settings
from app.shared.errors.handlers import error_response

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter applying the configured default limit to every route.

    Args:
        settings: Application settings providing the limit string.

    Returns:
        A Limiter keyed on the client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error envelope.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return error_response(HTTP_429, "RATE_LIMITED", f"Rate limit exceeded: {exc.detail}")
