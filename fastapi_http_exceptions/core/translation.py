"""
Exception to response translation.

The single source of truth for how a raised HTTP exception maps to a
response outcome. Both the recovery middleware and the guard decorator
go through :func:`http_exception_to_response`.
"""

from typing import Any

from fastapi_http_exceptions.core.exceptions import HTTPException, RedirectException
from fastapi_http_exceptions.core.responses import (
    HTTPResponse,
    bad_request,
    error_response,
    forbidden,
    internal_server_error,
    not_found,
    redirect,
    unauthorized,
)
from fastapi_http_exceptions.core.status_codes import (
    HTTPStatusCode,
    is_error_status_code,
    is_redirect_status_code,
)


def _message_of(exception: object) -> str:
    message = getattr(exception, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exception) or HTTPStatusCode.INTERNAL_SERVER_ERROR.phrase


def _redirect_url_of(exception: object) -> str | None:
    redirect_url = getattr(exception, "redirect_url", None)
    if isinstance(redirect_url, str) and redirect_url:
        return redirect_url
    return None


def http_exception_to_response(exception: HTTPException | Any) -> HTTPResponse[Any]:
    """Translate an HTTP exception into a response outcome.

    Never raises. Redirects keep their own status so 301 and 302 survive
    end to end. Error-bearing statuses become ``{"error": message}`` with
    the same status; anything else degrades to a 500.

    Args:
        exception: An :class:`HTTPException` or an object recognized by
            :func:`is_http_exception`.

    Returns:
        The response outcome to render.
    """
    status_code = getattr(exception, "status_code", None)
    message = _message_of(exception)

    if isinstance(exception, RedirectException) or is_redirect_status_code(status_code):
        redirect_url = _redirect_url_of(exception)
        if redirect_url is not None and is_redirect_status_code(status_code):
            return redirect(redirect_url, status_code)
        return internal_server_error(message)

    if status_code == HTTPStatusCode.BAD_REQUEST:
        return bad_request(message)
    if status_code == HTTPStatusCode.UNAUTHORIZED:
        return unauthorized(message)
    if status_code == HTTPStatusCode.FORBIDDEN:
        return forbidden(message)
    if status_code == HTTPStatusCode.NOT_FOUND:
        return not_found(message)
    if status_code == HTTPStatusCode.INTERNAL_SERVER_ERROR:
        return internal_server_error(message)
    # Every other 4xx/5xx in the registry passes through unchanged.
    if is_error_status_code(status_code):
        return error_response(status_code, message)
    return internal_server_error(message)
