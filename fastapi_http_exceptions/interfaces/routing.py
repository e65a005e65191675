"""
Response-shaping route class.

Wraps each endpoint call so that a returned response outcome is rendered
before FastAPI's default response-model serialization. FastAPI passes
Starlette responses through untouched, so the rendered outcome is sent
as-is; every other return value goes through the normal path.
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, get_origin, get_type_hints

from fastapi.datastructures import Default, DefaultPlaceholder
from fastapi.routing import APIRoute

from fastapi_http_exceptions.core.responses import HTTPResponse, is_http_response
from fastapi_http_exceptions.interfaces.responder import send_http_response

SHAPED_MARKER = "__http_response_shaped__"


def is_coroutine_callable(call: Callable[..., Any]) -> bool:
    """Return True if calling ``call`` produces an awaitable."""
    if inspect.isroutine(call):
        return inspect.iscoroutinefunction(call)
    if inspect.isclass(call):
        return False
    return inspect.iscoroutinefunction(getattr(call, "__call__", None))


def shape_return_value(value: Any) -> Any:
    """Render ``value`` if it is a response outcome, else return it unchanged.

    Every :class:`HTTPResponse` is rendered, so one with an unsupported
    status becomes a 500 rather than being serialized as data. Plain
    mappings are rendered only when their keys match their status.
    """
    if isinstance(value, HTTPResponse) or is_http_response(value):
        return send_http_response(value)
    return value


def shape_endpoint(call: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap an endpoint so its return value is shaped.

    Sync endpoints stay sync (FastAPI keeps running them in the threadpool)
    and async endpoints stay async. Wrapping twice is a no-op.
    """
    if getattr(call, SHAPED_MARKER, False):
        return call

    if is_coroutine_callable(call):

        @functools.wraps(call)
        async def shaped(*args: Any, **kwargs: Any) -> Any:
            return shape_return_value(await call(*args, **kwargs))

    else:

        @functools.wraps(call)
        def shaped(*args: Any, **kwargs: Any) -> Any:
            return shape_return_value(call(*args, **kwargs))

    setattr(shaped, SHAPED_MARKER, True)
    return shaped


def returns_http_response(endpoint: Callable[..., Any]) -> bool:
    """Return True if ``endpoint`` is annotated to return ``HTTPResponse[...]``."""
    try:
        annotation = get_type_hints(endpoint).get("return")
    except (NameError, TypeError):
        return False
    return annotation is HTTPResponse or get_origin(annotation) is HTTPResponse


class HTTPResponseRoute(APIRoute):
    """API route that renders returned :class:`HTTPResponse` outcomes.

    Use as ``route_class`` on an ``APIRouter``, or let
    :func:`install_http_exceptions` set it on the application router.
    An endpoint annotated ``-> HTTPResponse[...]`` gets no inferred
    response model; pass ``response_model`` explicitly to document one.
    """

    def __init__(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        response_model: Any = Default(None),
        **kwargs: Any,
    ) -> None:
        if isinstance(response_model, DefaultPlaceholder) and returns_http_response(
            endpoint
        ):
            response_model = None
        super().__init__(
            path, shape_endpoint(endpoint), response_model=response_model, **kwargs
        )
