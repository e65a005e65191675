"""
HTTP status registry.

Defines every status code this package can put on the wire,
and the fixed classifications used by the translator and responder.
Defined once, never mutated at runtime.
"""

from enum import IntEnum


class HTTPStatusCode(IntEnum):
    """Status codes known to the package."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    MOVED_PERMANENTLY = 301
    REDIRECT = 302
    NOT_MODIFIED = 304

    # 4xx - Client error
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    IM_A_TEAPOT = 418
    MISDIRECTED_REQUEST = 421
    UNPROCESSABLE_ENTITY = 422
    LOCKED = 423
    FAILED_DEPENDENCY = 424
    TOO_EARLY = 425
    UPGRADE_REQUIRED = 426
    PRECONDITION_REQUIRED = 428
    TOO_MANY_REQUESTS = 429
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431
    UNAVAILABLE_FOR_LEGAL_REASONS = 451

    # 5xx - Server error
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505
    VARIANT_ALSO_NEGOTIATES = 506
    INSUFFICIENT_STORAGE = 507
    LOOP_DETECTED = 508
    NOT_EXTENDED = 510
    NETWORK_AUTHENTICATION_REQUIRED = 511

    @property
    def phrase(self) -> str:
        """Human-readable reason phrase, e.g. ``Not Found``."""
        if self is HTTPStatusCode.REDIRECT:
            return "Found"
        if self is HTTPStatusCode.IM_A_TEAPOT:
            return "I'm a Teapot"
        words = self.name.split("_")
        return " ".join(
            word if word in ("OK", "HTTP", "URI") else word.capitalize()
            for word in words
        )


# Ordered: every 4xx first, then every 5xx.
error_status_codes: tuple[HTTPStatusCode, ...] = tuple(
    code for code in HTTPStatusCode if code >= 400
)

SUCCESS_STATUS_CODES = frozenset({HTTPStatusCode.OK, HTTPStatusCode.CREATED})
REDIRECT_STATUS_CODES = frozenset(
    {HTTPStatusCode.MOVED_PERMANENTLY, HTTPStatusCode.REDIRECT}
)
EMPTY_BODY_STATUS_CODES = frozenset(
    {HTTPStatusCode.NO_CONTENT, HTTPStatusCode.NOT_MODIFIED}
)
SPECIAL_STATUS_CODES = REDIRECT_STATUS_CODES | EMPTY_BODY_STATUS_CODES
ERROR_STATUS_CODES = frozenset(error_status_codes)
CORE_ERROR_STATUS_CODES = frozenset(
    {
        HTTPStatusCode.BAD_REQUEST,
        HTTPStatusCode.UNAUTHORIZED,
        HTTPStatusCode.FORBIDDEN,
        HTTPStatusCode.NOT_FOUND,
        HTTPStatusCode.INTERNAL_SERVER_ERROR,
    }
)
KNOWN_STATUS_CODES = SUCCESS_STATUS_CODES | SPECIAL_STATUS_CODES | ERROR_STATUS_CODES
FAILURE_STATUS_CODES = ERROR_STATUS_CODES | REDIRECT_STATUS_CODES


def _is_status_in(value: object, codes: frozenset[HTTPStatusCode]) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value in codes


def is_known_status_code(value: object) -> bool:
    """Return True if ``value`` is an integer status in the registry."""
    return _is_status_in(value, KNOWN_STATUS_CODES)


def is_error_status_code(value: object) -> bool:
    """Return True if ``value`` is an error-bearing (4xx/5xx) registry status."""
    return _is_status_in(value, ERROR_STATUS_CODES)


def is_failure_status_code(value: object) -> bool:
    """Return True if an exception may carry ``value`` (error or redirect)."""
    return _is_status_in(value, FAILURE_STATUS_CODES)


def is_redirect_status_code(value: object) -> bool:
    """Return True if ``value`` is 301 or 302."""
    return _is_status_in(value, REDIRECT_STATUS_CODES)
