"""
Installation of HTTP exception handling on a FastAPI application.

Call install_http_exceptions once while building the app, before
declaring routes. It wires:
- the recovery middleware (raised HTTP exceptions)
- the response-shaping route class (returned response outcomes)
"""

import logging

from fastapi import FastAPI
from fastapi.routing import APIRoute

from fastapi_http_exceptions.core.config import settings
from fastapi_http_exceptions.interfaces.recovery import HTTPExceptionMiddleware
from fastapi_http_exceptions.interfaces.routing import SHAPED_MARKER, HTTPResponseRoute

logger = logging.getLogger(__name__)

INSTALLED_STATE_KEY = "http_exceptions_installed"


def install_http_exceptions(app: FastAPI, *, log_unhandled: bool | None = None) -> FastAPI:
    """Install HTTP exception handling on ``app``.

    The handler already registered for ``Exception`` (or 500), if any,
    becomes the fallback for exceptions that are not HTTP exceptions.

    Args:
        app: The FastAPI application to configure.
        log_unhandled: Log unrecognized exceptions. Defaults to
            ``settings.log_unhandled``.

    Returns:
        The same application, for chaining.

    Raises:
        RuntimeError: If the application was already configured.
    """
    if getattr(app.state, INSTALLED_STATE_KEY, False):
        raise RuntimeError("HTTP exception handling is already installed on this app")

    if log_unhandled is None:
        log_unhandled = settings.log_unhandled

    fallback_handler = app.exception_handlers.get(Exception) or app.exception_handlers.get(
        500
    )
    app.add_middleware(
        HTTPExceptionMiddleware,
        log_unhandled=log_unhandled,
        fallback_handler=fallback_handler,
    )
    app.router.route_class = HTTPResponseRoute

    unshaped = [
        route.path
        for route in app.router.routes
        if isinstance(route, APIRoute)
        and not getattr(route.endpoint, SHAPED_MARKER, False)
    ]
    if unshaped:
        logger.warning(
            "Routes declared before install_http_exceptions do not render "
            "returned HTTP responses: %s",
            ", ".join(unshaped),
        )

    setattr(app.state, INSTALLED_STATE_KEY, True)
    return app
