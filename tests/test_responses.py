"""
Tests for returnable HTTP response outcomes.

Covers the constructors and recognition of outcomes returned by handlers.
"""

import pytest
from pydantic import BaseModel

from fastapi_http_exceptions.core.responses import (
    HTTPResponse,
    as_http_response,
    bad_request,
    created,
    error_response,
    forbidden,
    internal_server_error,
    is_http_response,
    no_content,
    not_found,
    not_modified,
    ok,
    permanent_redirect,
    redirect,
    unauthorized,
)


class User(BaseModel):
    id: str
    name: str


class TestConstructors:
    """Tests for outcome constructors."""

    def test_ok(self) -> None:
        response = ok({"id": "1"})
        assert response.status_code == 200
        assert response.body == {"id": "1"}
        assert response.redirect_url is None

    def test_created_with_model(self) -> None:
        user = User(id="1", name="Alice")
        response = created(user)
        assert response.status_code == 201
        assert response.body is user

    def test_no_content(self) -> None:
        assert no_content() == HTTPResponse(status_code=204)

    def test_not_modified(self) -> None:
        assert not_modified() == HTTPResponse(status_code=304)

    def test_redirect_defaults_to_302(self) -> None:
        response = redirect("https://example.com")
        assert response.status_code == 302
        assert response.redirect_url == "https://example.com"
        assert response.body is None

    def test_permanent_redirect(self) -> None:
        assert permanent_redirect("https://example.com").status_code == 301

    def test_redirect_rejects_other_status(self) -> None:
        with pytest.raises(ValueError):
            redirect("https://example.com", 200)

    def test_error_constructors(self) -> None:
        assert bad_request("a") == HTTPResponse(status_code=400, body={"error": "a"})
        assert unauthorized("b") == HTTPResponse(status_code=401, body={"error": "b"})
        assert forbidden("c") == HTTPResponse(status_code=403, body={"error": "c"})
        assert not_found("d") == HTTPResponse(status_code=404, body={"error": "d"})
        assert internal_server_error("e") == HTTPResponse(status_code=500, body={"error": "e"})

    def test_error_response_for_other_codes(self) -> None:
        assert error_response(429, "slow down") == HTTPResponse(
            status_code=429, body={"error": "slow down"}
        )

    def test_error_response_rejects_non_error_status(self) -> None:
        with pytest.raises(ValueError):
            error_response(200, "fine")

    def test_outcomes_are_immutable(self) -> None:
        response = ok({"id": "1"})
        with pytest.raises(AttributeError):
            response.status_code = 500  # type: ignore[misc]


class TestIsHTTPResponse:
    """Tests for outcome recognition."""

    def test_accepts_instances(self) -> None:
        assert is_http_response(ok({"id": "1"}))
        assert is_http_response(no_content())
        assert is_http_response(redirect("https://example.com"))
        assert is_http_response(error_response(409, "dup"))

    def test_rejects_instance_with_unknown_status(self) -> None:
        assert not is_http_response(HTTPResponse(status_code=999))
        assert not is_http_response(HTTPResponse(status_code=202, body={}))

    @pytest.mark.parametrize(
        "value",
        [
            {"status_code": 200, "body": {"id": "1"}},
            {"status_code": 201, "body": [1, 2]},
            {"status_code": 204},
            {"status_code": 304},
            {"status_code": 302, "redirect_url": "https://example.com"},
            {"status_code": 404, "body": {"error": "user not found"}},
        ],
    )
    def test_accepts_matching_mappings(self, value: dict) -> None:
        assert is_http_response(value)

    @pytest.mark.parametrize(
        "value",
        [
            {"status_code": 200},
            {"status_code": 204, "body": None},
            {"status_code": 302, "body": {}},
            {"status_code": 200, "body": {}, "extra": True},
            {"status_code": "200", "body": {}},
            {"status_code": 999, "body": {}},
            {"id": "1"},
            {},
        ],
    )
    def test_rejects_mismatched_mappings(self, value: dict) -> None:
        assert not is_http_response(value)

    @pytest.mark.parametrize("value", [None, "ok", 200, [200], User(id="1", name="A")])
    def test_rejects_other_values(self, value: object) -> None:
        assert not is_http_response(value)


class TestAsHTTPResponse:
    """Tests for outcome normalization."""

    def test_mapping_is_normalized(self) -> None:
        response = as_http_response({"status_code": 201, "body": {"id": "1"}})
        assert response == HTTPResponse(status_code=201, body={"id": "1"})

    def test_instance_is_returned_as_is(self) -> None:
        response = ok({"id": "1"})
        assert as_http_response(response) is response

    def test_unrecognized_value_rejected(self) -> None:
        with pytest.raises(TypeError):
            as_http_response({"id": "1"})
