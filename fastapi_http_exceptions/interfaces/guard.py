"""
Per-endpoint guard for apps without the middleware and route class.

Gives a single endpoint the combined effect of the recovery middleware
and the response-shaping route: raised HTTP exceptions and returned
response outcomes are both rendered, everything else is left alone.
"""

import functools
from collections.abc import Callable
from typing import Any

from fastapi_http_exceptions.core.exceptions import is_http_exception
from fastapi_http_exceptions.interfaces.recovery import render_http_exception
from fastapi_http_exceptions.interfaces.routing import (
    SHAPED_MARKER,
    is_coroutine_callable,
    shape_return_value,
)


def with_http_exceptions(handler: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate an endpoint so its HTTP exceptions and outcomes are rendered.

    Usage::

        @router.get("/users/{user_id}")
        @with_http_exceptions
        async def get_user(user_id: str):
            raise NotFoundException("user")

    Args:
        handler: A sync or async endpoint.

    Returns:
        A wrapper of the same kind with the same signature.
    """
    if is_coroutine_callable(handler):

        @functools.wraps(handler)
        async def guarded(*args: Any, **kwargs: Any) -> Any:
            try:
                result = await handler(*args, **kwargs)
            except Exception as exc:
                if is_http_exception(exc):
                    return render_http_exception(exc)
                raise
            return shape_return_value(result)

    else:

        @functools.wraps(handler)
        def guarded(*args: Any, **kwargs: Any) -> Any:
            try:
                result = handler(*args, **kwargs)
            except Exception as exc:
                if is_http_exception(exc):
                    return render_http_exception(exc)
                raise
            return shape_return_value(result)

    # Returned outcomes are already rendered; a shaping route has nothing left to do.
    setattr(guarded, SHAPED_MARKER, True)
    return guarded
