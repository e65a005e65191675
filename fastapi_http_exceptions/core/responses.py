"""
Returnable HTTP response values.

A handler returns one of these instead of building a framework
response by hand. The shape is decided by the status code:

- 200/201 carry ``body``
- 204/304 carry nothing
- 301/302 carry ``redirect_url``
- 4xx/5xx carry ``body = {"error": message}``

No framework imports allowed.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fastapi_http_exceptions.core.helpers import create_error_body
from fastapi_http_exceptions.core.status_codes import (
    EMPTY_BODY_STATUS_CODES,
    REDIRECT_STATUS_CODES,
    HTTPStatusCode,
    is_error_status_code,
    is_known_status_code,
)

T = TypeVar("T")

_BODY_KEYS = frozenset({"status_code", "body"})
_EMPTY_KEYS = frozenset({"status_code"})
_REDIRECT_KEYS = frozenset({"status_code", "redirect_url"})


@dataclass(frozen=True)
class HTTPResponse(Generic[T]):
    """A response outcome returned from a handler.

    Attributes:
        status_code: The HTTP status to send.
        body: JSON payload for 2xx bodies, or ``{"error": ...}`` for errors.
        redirect_url: Target of a 301/302 redirect.
    """

    status_code: int
    body: T | None = None
    redirect_url: str | None = None


def ok(body: T) -> HTTPResponse[T]:
    return HTTPResponse(status_code=HTTPStatusCode.OK, body=body)


def created(body: T) -> HTTPResponse[T]:
    return HTTPResponse(status_code=HTTPStatusCode.CREATED, body=body)


def no_content() -> HTTPResponse[Any]:
    return HTTPResponse(status_code=HTTPStatusCode.NO_CONTENT)


def redirect(
    redirect_url: str, status_code: int = HTTPStatusCode.REDIRECT
) -> HTTPResponse[Any]:
    """Build a 302 (or 301) redirect outcome.

    Raises:
        ValueError: If ``status_code`` is not a redirect status.
    """
    if status_code not in REDIRECT_STATUS_CODES:
        raise ValueError(f"{status_code!r} is not a redirect status code")
    return HTTPResponse(status_code=status_code, redirect_url=redirect_url)


def permanent_redirect(redirect_url: str) -> HTTPResponse[Any]:
    return redirect(redirect_url, HTTPStatusCode.MOVED_PERMANENTLY)


def not_modified() -> HTTPResponse[Any]:
    return HTTPResponse(status_code=HTTPStatusCode.NOT_MODIFIED)


def error_response(status_code: int, message: str) -> HTTPResponse[dict[str, str]]:
    """Build an error outcome for any error-bearing status.

    Raises:
        ValueError: If ``status_code`` is not a 4xx/5xx registry status.
    """
    if not is_error_status_code(status_code):
        raise ValueError(f"{status_code!r} is not an error status code")
    return HTTPResponse(status_code=status_code, body=create_error_body(message))


def bad_request(message: str) -> HTTPResponse[dict[str, str]]:
    return error_response(HTTPStatusCode.BAD_REQUEST, message)


def unauthorized(message: str) -> HTTPResponse[dict[str, str]]:
    return error_response(HTTPStatusCode.UNAUTHORIZED, message)


def forbidden(message: str) -> HTTPResponse[dict[str, str]]:
    return error_response(HTTPStatusCode.FORBIDDEN, message)


def not_found(message: str) -> HTTPResponse[dict[str, str]]:
    return error_response(HTTPStatusCode.NOT_FOUND, message)


def internal_server_error(message: str) -> HTTPResponse[dict[str, str]]:
    return error_response(HTTPStatusCode.INTERNAL_SERVER_ERROR, message)


def _expected_keys(status_code: int) -> frozenset[str]:
    if status_code in EMPTY_BODY_STATUS_CODES:
        return _EMPTY_KEYS
    if status_code in REDIRECT_STATUS_CODES:
        return _REDIRECT_KEYS
    return _BODY_KEYS


def is_http_response(value: object) -> bool:
    """Return True if ``value`` is a response outcome.

    Accepts :class:`HTTPResponse` instances with a registry status, and
    plain mappings whose keys match the shape of their status exactly,
    e.g. ``{"status_code": 200, "body": {...}}``.
    """
    if isinstance(value, HTTPResponse):
        return is_known_status_code(value.status_code)
    if not isinstance(value, Mapping):
        return False
    status_code = value.get("status_code")
    if not is_known_status_code(status_code):
        return False
    return frozenset(value.keys()) == _expected_keys(status_code)


def as_http_response(value: object) -> HTTPResponse[Any]:
    """Normalize a recognized outcome into an :class:`HTTPResponse`.

    Raises:
        TypeError: If ``value`` is not recognized by :func:`is_http_response`.
    """
    if not is_http_response(value):
        raise TypeError(f"Not an HTTP response outcome: {type(value).__name__}")
    if isinstance(value, HTTPResponse):
        return value
    return HTTPResponse(**value)
