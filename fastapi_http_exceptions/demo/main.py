"""
Demo application entry point.

Creates the FastAPI application and wires together:
- Routers (health, users, auth, misc, legacy)
- A catch-all handler for unexpected errors
- HTTP exception handling (install_http_exceptions)
- Rate limiting
- Logging configuration

Run with ``python -m fastapi_http_exceptions.demo.main``.
No business logic belongs here.
"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from fastapi_http_exceptions.core.config import settings
from fastapi_http_exceptions.core.helpers import create_error_body
from fastapi_http_exceptions.demo.health import router as health_router
from fastapi_http_exceptions.demo.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)
from fastapi_http_exceptions.demo.users import (
    auth_router,
    legacy_router,
    misc_router,
    users_router,
)
from fastapi_http_exceptions.interfaces.plugin import install_http_exceptions
from fastapi_http_exceptions.shared.logging import configure_logging

logger = logging.getLogger(__name__)


async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected errors. Never exposes internals."""
    logger.exception("Unexpected error: %s", type(exc).__name__)
    return JSONResponse(status_code=500, content=create_error_body("Internal server error"))


def create_app() -> FastAPI:
    """Create and configure the demo application.

    The catch-all handler is registered before install_http_exceptions,
    so it becomes the fallback for exceptions that are not HTTP exceptions.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, package_level=settings.package_log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Error Handling ---
    app.add_exception_handler(Exception, handle_unexpected)
    install_http_exceptions(app, log_unhandled=settings.log_unhandled)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(auth_router)
    app.include_router(misc_router)
    app.include_router(legacy_router)

    return app


app = create_app()


def main() -> None:
    """Serve the demo app on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
