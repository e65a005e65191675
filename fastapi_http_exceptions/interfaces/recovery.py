"""
Recovery middleware for raised HTTP exceptions.

Catches every exception escaping a route. Recognized HTTP exceptions are
translated and rendered; anything else goes to the fallback handler that
was registered before installation, or is re-raised untouched.
No stack traces or internal details are exposed to clients.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from fastapi_http_exceptions.core.exceptions import is_http_exception
from fastapi_http_exceptions.core.status_codes import HTTPStatusCode
from fastapi_http_exceptions.core.translation import http_exception_to_response
from fastapi_http_exceptions.interfaces.responder import send_http_response

logger = logging.getLogger(__name__)

FallbackHandler = Callable[[Request, Exception], Response | Awaitable[Response]]


def render_http_exception(exception: Any) -> Response:
    """Translate and render a recognized HTTP exception.

    Internal server errors are logged with their traceback first, since
    the client only sees the message.

    Args:
        exception: A value accepted by :func:`is_http_exception`.

    Returns:
        The rendered response.
    """
    if getattr(exception, "status_code", None) == HTTPStatusCode.INTERNAL_SERVER_ERROR:
        logger.error(
            "Internal server error: %s",
            getattr(exception, "message", exception),
            exc_info=exception if isinstance(exception, BaseException) else None,
        )
    return send_http_response(http_exception_to_response(exception))


class HTTPExceptionMiddleware(BaseHTTPMiddleware):
    """Middleware that renders raised HTTP exceptions.

    Args:
        app: The wrapped ASGI application.
        log_unhandled: Log unrecognized exceptions before deferring them.
        fallback_handler: Handler that was registered for ``Exception``
            before this middleware was installed, sync or async.
    """

    def __init__(
        self,
        app: ASGIApp,
        log_unhandled: bool = False,
        fallback_handler: FallbackHandler | None = None,
    ) -> None:
        super().__init__(app)
        self.log_unhandled = log_unhandled
        self.fallback_handler = fallback_handler

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the route and recover from any HTTP exception it raises."""
        try:
            return await call_next(request)
        except Exception as exc:
            if is_http_exception(exc):
                return render_http_exception(exc)

            if self.log_unhandled:
                logger.error(
                    "Unhandled error in HTTP exception middleware: %s",
                    type(exc).__name__,
                    exc_info=exc,
                )

            if self.fallback_handler is None:
                raise
            return await self._call_fallback(request, exc)

    async def _call_fallback(self, request: Request, exc: Exception) -> Response:
        handler = self.fallback_handler
        if asyncio.iscoroutinefunction(handler):
            return await handler(request, exc)
        return await run_in_threadpool(handler, request, exc)
