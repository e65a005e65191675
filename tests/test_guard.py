"""
Tests for the per-endpoint guard.

A guarded endpoint on a plain app must answer exactly like the same
endpoint on an app with install_http_exceptions.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fastapi_http_exceptions.core.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
    TemporaryRedirectException,
)
from fastapi_http_exceptions.core.responses import HTTPResponse, created, not_found, ok
from fastapi_http_exceptions.interfaces.guard import with_http_exceptions
from fastapi_http_exceptions.interfaces.plugin import install_http_exceptions
from fastapi_http_exceptions.interfaces.routing import SHAPED_MARKER


async def raise_not_found():
    raise NotFoundException("user")


async def raise_forbidden():
    raise ForbiddenException("user", "not in org")


def raise_conflict():
    raise ConflictException("duplicate")


async def raise_redirect():
    raise TemporaryRedirectException("https://example.com/x")


async def return_not_found():
    return not_found("user not found")


def return_created():
    return created({"id": "1"})


async def return_plain():
    return {"id": "1"}


async def crash():
    raise RuntimeError("boom")


ENDPOINTS = {
    "/raise-not-found": raise_not_found,
    "/raise-forbidden": raise_forbidden,
    "/raise-conflict": raise_conflict,
    "/raise-redirect": raise_redirect,
    "/return-not-found": return_not_found,
    "/return-created": return_created,
    "/return-plain": return_plain,
}


def guarded_app() -> FastAPI:
    app = FastAPI()
    for path, endpoint in ENDPOINTS.items():
        app.add_api_route(path, with_http_exceptions(endpoint), response_model=None)
    app.add_api_route("/crash", with_http_exceptions(crash), response_model=None)
    return app


def installed_app() -> FastAPI:
    app = FastAPI()
    install_http_exceptions(app)
    for path, endpoint in ENDPOINTS.items():
        app.add_api_route(path, endpoint, response_model=None)
    return app


class TestGuardMatchesInstall:
    """The guard and the installed hooks produce identical responses."""

    guarded = TestClient(guarded_app())
    installed = TestClient(installed_app())

    @pytest.mark.parametrize("path", list(ENDPOINTS))
    def test_identical_responses(self, path: str) -> None:
        expected = self.installed.get(path, follow_redirects=False)
        actual = self.guarded.get(path, follow_redirects=False)
        assert actual.status_code == expected.status_code
        assert actual.content == expected.content
        assert actual.headers.get("location") == expected.headers.get("location")
        assert actual.headers.get("content-type") == expected.headers.get("content-type")


class TestGuardedEndpoints:
    """Tests for guarded endpoints on an app without the hooks."""

    client = TestClient(guarded_app())

    def test_raised_exception_rendered(self) -> None:
        response = self.client.get("/raise-not-found")
        assert response.status_code == 404
        assert response.json() == {"error": "user not found"}

    def test_sync_endpoint(self) -> None:
        response = self.client.get("/raise-conflict")
        assert response.status_code == 409
        assert response.json() == {"error": "duplicate"}

    def test_returned_outcome_rendered(self) -> None:
        response = self.client.get("/return-created")
        assert response.status_code == 201
        assert response.json() == {"id": "1"}

    def test_plain_value_untouched(self) -> None:
        response = self.client.get("/return-plain")
        assert response.status_code == 200
        assert response.json() == {"id": "1"}

    def test_other_exceptions_propagate(self) -> None:
        with pytest.raises(RuntimeError):
            self.client.get("/crash")


class TestGuardWrapper:
    """Tests for the wrapper itself."""

    def test_keeps_name_and_kind(self) -> None:
        guarded = with_http_exceptions(raise_not_found)
        assert guarded.__name__ == "raise_not_found"
        assert guarded.__wrapped__ is raise_not_found
        assert getattr(guarded, SHAPED_MARKER) is True

    def test_not_shaped_twice_under_install(self) -> None:
        """A guarded endpoint on an installed app still answers once."""
        app = FastAPI()
        install_http_exceptions(app)

        @app.get("/users/{user_id}", response_model=None)
        @with_http_exceptions
        async def get_user(user_id: str) -> HTTPResponse[dict]:
            if user_id == "404":
                raise NotFoundException("user")
            return ok({"id": user_id})

        client = TestClient(app)
        assert client.get("/users/404").json() == {"error": "user not found"}
        assert client.get("/users/7").json() == {"id": "7"}
