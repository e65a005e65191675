"""
Tests for exception to response translation.

The translator must be total: every exception maps to exactly one
response outcome and it never raises.
"""

from types import SimpleNamespace

import pytest

from fastapi_http_exceptions.core.exceptions import (
    BadRequestException,
    ForbiddenException,
    InternalServerErrorException,
    NotFoundException,
    PermanentRedirectException,
    RedirectException,
    TemporaryRedirectException,
    UnauthorizedException,
    http_exception_for_status,
)
from fastapi_http_exceptions.core.responses import HTTPResponse
from fastapi_http_exceptions.core.status_codes import error_status_codes
from fastapi_http_exceptions.core.translation import http_exception_to_response


class ForeignFailure(Exception):
    """Marked as an HTTP exception but carrying no status."""

    is_http_exception = True


class TestCoreExceptions:
    """Tests for the explicitly supported core statuses."""

    def test_bad_request(self) -> None:
        response = http_exception_to_response(BadRequestException("Invalid input"))
        assert response == HTTPResponse(status_code=400, body={"error": "Invalid input"})

    def test_unauthorized(self) -> None:
        response = http_exception_to_response(UnauthorizedException("Not authenticated"))
        assert response == HTTPResponse(status_code=401, body={"error": "Not authenticated"})

    def test_forbidden(self) -> None:
        response = http_exception_to_response(ForbiddenException("user", "not in org"))
        assert response.status_code == 403
        assert response.body == {"error": "Access denied to user: not in org"}

    def test_not_found(self) -> None:
        response = http_exception_to_response(NotFoundException("user"))
        assert response.status_code == 404
        assert response.body == {"error": "user not found"}

    def test_internal_server_error(self) -> None:
        response = http_exception_to_response(InternalServerErrorException("Server error"))
        assert response.status_code == 500
        assert response.body == {"error": "Server error"}


class TestEveryErrorStatus:
    """Every error-bearing variant keeps its status and message."""

    @pytest.mark.parametrize("status_code", error_status_codes)
    def test_status_and_message_preserved(self, status_code: int) -> None:
        exception = http_exception_for_status(status_code, "boom")
        response = http_exception_to_response(exception)
        assert response.status_code == exception.status_code
        assert response.body == {"error": exception.message}
        assert response.redirect_url is None


class TestRedirects:
    """Redirects keep their own status."""

    def test_redirect(self) -> None:
        response = http_exception_to_response(RedirectException("https://example.com"))
        assert response == HTTPResponse(status_code=302, redirect_url="https://example.com")

    def test_temporary_redirect(self) -> None:
        response = http_exception_to_response(
            TemporaryRedirectException("https://example.com/x")
        )
        assert response.status_code == 302
        assert response.redirect_url == "https://example.com/x"
        assert response.body is None

    def test_permanent_redirect(self) -> None:
        response = http_exception_to_response(
            PermanentRedirectException("https://example.com/y")
        )
        assert response.status_code == 301
        assert response.redirect_url == "https://example.com/y"


class TestForeignExceptions:
    """Objects recognized by shape or marker translate without raising."""

    def test_other_error_status_passes_through(self) -> None:
        response = http_exception_to_response(SimpleNamespace(status_code=409, message="dup"))
        assert response == HTTPResponse(status_code=409, body={"error": "dup"})

    def test_unknown_status_degrades_to_500(self) -> None:
        failure = SimpleNamespace(is_http_exception=True, status_code=999, message="odd")
        response = http_exception_to_response(failure)
        assert response == HTTPResponse(status_code=500, body={"error": "odd"})

    def test_marker_without_status_or_message(self) -> None:
        response = http_exception_to_response(ForeignFailure("remote failure"))
        assert response == HTTPResponse(status_code=500, body={"error": "remote failure"})

    def test_redirect_status_without_url_degrades_to_500(self) -> None:
        response = http_exception_to_response(SimpleNamespace(status_code=302, message="go"))
        assert response == HTTPResponse(status_code=500, body={"error": "go"})

    def test_redirect_by_shape(self) -> None:
        failure = SimpleNamespace(
            status_code=301, message="moved", redirect_url="https://example.com/new"
        )
        response = http_exception_to_response(failure)
        assert response == HTTPResponse(status_code=301, redirect_url="https://example.com/new")
