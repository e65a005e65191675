"""
Tests for the HTTP status registry.

Covers the code classifications and membership predicates.
No external dependencies or IO required.
"""

from fastapi_http_exceptions.core.status_codes import (
    CORE_ERROR_STATUS_CODES,
    ERROR_STATUS_CODES,
    KNOWN_STATUS_CODES,
    SPECIAL_STATUS_CODES,
    HTTPStatusCode,
    error_status_codes,
    is_error_status_code,
    is_failure_status_code,
    is_known_status_code,
    is_redirect_status_code,
)


class TestErrorStatusCodes:
    """Tests for the ordered error-bearing code list."""

    def test_includes_representative_codes(self) -> None:
        """Common 4xx and 5xx codes are error-bearing."""
        for code in (400, 401, 404, 429, 500, 503):
            assert code in error_status_codes

    def test_only_4xx_and_5xx(self) -> None:
        """Every error-bearing code is between 400 and 599."""
        assert all(400 <= code < 600 for code in error_status_codes)
        assert len(error_status_codes) == 40

    def test_ordered_ascending(self) -> None:
        """Client errors come before server errors."""
        assert list(error_status_codes) == sorted(error_status_codes)

    def test_core_codes_are_error_codes(self) -> None:
        """The core set is a subset of all error codes."""
        assert CORE_ERROR_STATUS_CODES <= ERROR_STATUS_CODES
        assert {int(code) for code in CORE_ERROR_STATUS_CODES} == {400, 401, 403, 404, 500}


class TestSpecialStatusCodes:
    """Tests for the no-body and redirect classifications."""

    def test_special_codes(self) -> None:
        """204, 301, 302 and 304 are special."""
        assert {int(code) for code in SPECIAL_STATUS_CODES} == {204, 301, 302, 304}

    def test_known_is_union(self) -> None:
        """Known codes cover success, special and error codes."""
        assert 200 in KNOWN_STATUS_CODES
        assert 201 in KNOWN_STATUS_CODES
        assert SPECIAL_STATUS_CODES <= KNOWN_STATUS_CODES
        assert ERROR_STATUS_CODES <= KNOWN_STATUS_CODES


class TestPredicates:
    """Tests for the registry membership predicates."""

    def test_known_status_code(self) -> None:
        assert is_known_status_code(200)
        assert is_known_status_code(HTTPStatusCode.NOT_MODIFIED)
        assert not is_known_status_code(999)
        assert not is_known_status_code(299)

    def test_rejects_non_integers(self) -> None:
        """Booleans, strings and None are never status codes."""
        for value in (True, "404", None, 404.0, [404]):
            assert not is_known_status_code(value)
            assert not is_error_status_code(value)

    def test_error_status_code(self) -> None:
        assert is_error_status_code(409)
        assert not is_error_status_code(302)
        assert not is_error_status_code(200)

    def test_failure_status_code(self) -> None:
        """Exceptions may carry error and redirect codes, not success codes."""
        assert is_failure_status_code(404)
        assert is_failure_status_code(301)
        assert not is_failure_status_code(204)
        assert not is_failure_status_code(200)

    def test_redirect_status_code(self) -> None:
        assert is_redirect_status_code(302)
        assert is_redirect_status_code(301)
        assert not is_redirect_status_code(304)


class TestPhrase:
    """Tests for reason phrases."""

    def test_phrases(self) -> None:
        assert HTTPStatusCode.NOT_FOUND.phrase == "Not Found"
        assert HTTPStatusCode.OK.phrase == "OK"
        assert HTTPStatusCode.REDIRECT.phrase == "Found"
        assert HTTPStatusCode.URI_TOO_LONG.phrase == "URI Too Long"
        assert HTTPStatusCode.HTTP_VERSION_NOT_SUPPORTED.phrase == "HTTP Version Not Supported"
        assert HTTPStatusCode.IM_A_TEAPOT.phrase == "I'm a Teapot"
