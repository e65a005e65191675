"""
Rate limiting configuration for the demo app.

Uses slowapi to enforce per-endpoint rate limits. Exceeded limits are
rendered like any other HTTP exception: 429 with an ``error`` body.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from fastapi_http_exceptions.core.config import settings
from fastapi_http_exceptions.core.exceptions import TooManyRequestsException
from fastapi_http_exceptions.interfaces.recovery import render_http_exception

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])


async def rate_limit_exceeded_handler(_request: Request, exc: RateLimitExceeded) -> Response:
    """Handle rate limit exceeded errors with the canonical error body.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response naming the exceeded limit.
    """
    return render_http_exception(
        TooManyRequestsException(f"Rate limit exceeded: {exc.detail}")
    )
