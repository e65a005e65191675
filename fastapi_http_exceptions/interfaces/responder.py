"""
Response rendering.

The only place that turns a response outcome into status, headers and
bytes. Malformed outcomes are never sent as-is: they become a 500 whose
error names the violation, so the client always gets a well-formed reply.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import is_dataclass
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import BaseModel

from fastapi_http_exceptions.core.helpers import create_error_body
from fastapi_http_exceptions.core.responses import HTTPResponse, as_http_response
from fastapi_http_exceptions.core.status_codes import (
    EMPTY_BODY_STATUS_CODES,
    REDIRECT_STATUS_CODES,
    SUCCESS_STATUS_CODES,
    HTTPStatusCode,
    is_known_status_code,
)

logger = logging.getLogger(__name__)

HTTP_500 = HTTPStatusCode.INTERNAL_SERVER_ERROR


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a canonical JSON error response."""
    return JSONResponse(status_code=status_code, content=create_error_body(error))


def _shape_violation(error: str) -> JSONResponse:
    logger.error("Malformed HTTP response outcome: %s", error)
    return _error_response(HTTP_500, error)


def _is_json_container(body: object) -> bool:
    if isinstance(body, (Mapping, list, tuple, BaseModel)):
        return True
    return is_dataclass(body) and not isinstance(body, type)


def _send_body(status_code: int, body: Any) -> Response:
    if body is None:
        return Response(status_code=status_code)
    if not _is_json_container(body):
        return _shape_violation(
            f"Response body is set but not an object: {type(body).__name__}"
        )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def _send_empty(status_code: int, body: Any) -> Response:
    if body is not None:
        return _shape_violation(f"Response body is not allowed for status {status_code}")
    return Response(status_code=status_code)


def _send_redirect(status_code: int, redirect_url: Any, body: Any) -> Response:
    if body is not None:
        return _shape_violation(f"Response body is not allowed for status {status_code}")
    if not isinstance(redirect_url, str) or not redirect_url:
        return _shape_violation("Redirect response is missing redirect_url")
    return RedirectResponse(url=redirect_url, status_code=status_code)


def _send_error(status_code: int, body: Any) -> Response:
    if body is None:
        return _shape_violation(f"Response body is missing for status {status_code}")
    if not isinstance(body, Mapping):
        return _shape_violation(f"Response body is not an object: {type(body).__name__}")
    if "error" not in body:
        serialized = json.dumps(jsonable_encoder(body), separators=(",", ":"))
        return _shape_violation(f"Response body is missing error field: {serialized}")
    if not isinstance(body["error"], str):
        return _shape_violation("Response body error field is not a string")
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def send_http_response(response: HTTPResponse[Any] | Mapping[str, Any]) -> Response:
    """Render a response outcome as a Starlette response.

    Args:
        response: An :class:`HTTPResponse` or a mapping recognized by
            :func:`is_http_response`.

    Returns:
        A response ready to hand back to the pipeline. 2xx bodies and
        error bodies are JSON; 204/304 are empty; 301/302 carry only
        a ``Location`` header.
    """
    outcome = response if isinstance(response, HTTPResponse) else as_http_response(response)
    if not is_known_status_code(outcome.status_code):
        logger.error(
            "Unsupported status code in HTTP response outcome: %r", outcome.status_code
        )
        return _error_response(HTTP_500, "Internal server error")

    status_code = int(outcome.status_code)

    if status_code not in REDIRECT_STATUS_CODES and outcome.redirect_url is not None:
        return _shape_violation(f"redirect_url is not allowed for status {status_code}")

    if status_code in SUCCESS_STATUS_CODES:
        return _send_body(status_code, outcome.body)
    if status_code in EMPTY_BODY_STATUS_CODES:
        return _send_empty(status_code, outcome.body)
    if status_code in REDIRECT_STATUS_CODES:
        return _send_redirect(status_code, outcome.redirect_url, outcome.body)
    return _send_error(status_code, outcome.body)
