"""
HTTP exception taxonomy.

Every failure a handler can raise is defined here, one class per
error-bearing status code plus the redirect family.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import ClassVar

from fastapi_http_exceptions.core.helpers import (
    format_forbidden_message,
    format_not_found_message,
)
from fastapi_http_exceptions.core.status_codes import (
    HTTPStatusCode,
    is_failure_status_code,
)

MARKER_ATTRIBUTE = "is_http_exception"


class HTTPException(Exception):
    """Base class for all HTTP exceptions.

    Subclasses bind ``code``; the status is read through ``status_code``
    and cannot be reassigned on an instance. The message is never empty:
    when omitted, the status reason phrase is used.
    """

    code: ClassVar[HTTPStatusCode]
    is_http_exception: ClassVar[bool] = True

    def __init__(self, message: str | None = None) -> None:
        if type(self) is HTTPException:
            raise TypeError("HTTPException is abstract; raise one of its subclasses")
        self.message = message or self.code.phrase
        super().__init__(self.message)

    @property
    def status_code(self) -> HTTPStatusCode:
        return self.code

    @classmethod
    def from_message(cls, message: str | None = None) -> "HTTPException":
        """Build an instance from a plain message, skipping variant formatting."""
        exception = cls.__new__(cls)
        HTTPException.__init__(exception, message)
        return exception

    def __reduce__(self):
        # Variant constructors take different arguments than ``args`` holds.
        return _restore_exception, (type(self), dict(self.__dict__))

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


def _restore_exception(cls: type[HTTPException], state: dict) -> HTTPException:
    exception = cls.from_message(state.get("message"))
    exception.__dict__.update(state)
    return exception


# --- 4xx ---------------------------------------------------------------


class BadRequestException(HTTPException):
    code = HTTPStatusCode.BAD_REQUEST


class UnauthorizedException(HTTPException):
    code = HTTPStatusCode.UNAUTHORIZED


class PaymentRequiredException(HTTPException):
    code = HTTPStatusCode.PAYMENT_REQUIRED


class ForbiddenException(HTTPException):
    """Raised when the caller may not access a resource."""

    code = HTTPStatusCode.FORBIDDEN
    resource: str | None = None
    reason: str | None = None

    def __init__(self, resource: str, reason: str | None = None) -> None:
        super().__init__(format_forbidden_message(resource, reason))
        self.resource = resource
        self.reason = reason


class NotFoundException(HTTPException):
    """Raised when a resource does not exist."""

    code = HTTPStatusCode.NOT_FOUND
    resource: str | None = None
    reason: str | None = None

    def __init__(self, resource: str, reason: str | None = None) -> None:
        super().__init__(format_not_found_message(resource, reason))
        self.resource = resource
        self.reason = reason


class MethodNotAllowedException(HTTPException):
    code = HTTPStatusCode.METHOD_NOT_ALLOWED


class NotAcceptableException(HTTPException):
    code = HTTPStatusCode.NOT_ACCEPTABLE


class ProxyAuthenticationRequiredException(HTTPException):
    code = HTTPStatusCode.PROXY_AUTHENTICATION_REQUIRED


class RequestTimeoutException(HTTPException):
    code = HTTPStatusCode.REQUEST_TIMEOUT


class ConflictException(HTTPException):
    code = HTTPStatusCode.CONFLICT


class GoneException(HTTPException):
    code = HTTPStatusCode.GONE


class LengthRequiredException(HTTPException):
    code = HTTPStatusCode.LENGTH_REQUIRED


class PreconditionFailedException(HTTPException):
    code = HTTPStatusCode.PRECONDITION_FAILED


class PayloadTooLargeException(HTTPException):
    code = HTTPStatusCode.PAYLOAD_TOO_LARGE


class URITooLongException(HTTPException):
    code = HTTPStatusCode.URI_TOO_LONG


class UnsupportedMediaTypeException(HTTPException):
    code = HTTPStatusCode.UNSUPPORTED_MEDIA_TYPE


class RangeNotSatisfiableException(HTTPException):
    code = HTTPStatusCode.RANGE_NOT_SATISFIABLE


class ExpectationFailedException(HTTPException):
    code = HTTPStatusCode.EXPECTATION_FAILED


class ImATeapotException(HTTPException):
    code = HTTPStatusCode.IM_A_TEAPOT


class MisdirectedRequestException(HTTPException):
    code = HTTPStatusCode.MISDIRECTED_REQUEST


class UnprocessableEntityException(HTTPException):
    code = HTTPStatusCode.UNPROCESSABLE_ENTITY


class LockedException(HTTPException):
    code = HTTPStatusCode.LOCKED


class FailedDependencyException(HTTPException):
    code = HTTPStatusCode.FAILED_DEPENDENCY


class TooEarlyException(HTTPException):
    code = HTTPStatusCode.TOO_EARLY


class UpgradeRequiredException(HTTPException):
    code = HTTPStatusCode.UPGRADE_REQUIRED


class PreconditionRequiredException(HTTPException):
    code = HTTPStatusCode.PRECONDITION_REQUIRED


class TooManyRequestsException(HTTPException):
    code = HTTPStatusCode.TOO_MANY_REQUESTS


class RequestHeaderFieldsTooLargeException(HTTPException):
    code = HTTPStatusCode.REQUEST_HEADER_FIELDS_TOO_LARGE


class UnavailableForLegalReasonsException(HTTPException):
    code = HTTPStatusCode.UNAVAILABLE_FOR_LEGAL_REASONS


# --- 5xx ---------------------------------------------------------------


class InternalServerErrorException(HTTPException):
    """Raised for producer-side failures.

    The client only sees the message; the recovery middleware also
    logs the traceback so operators can see where it came from.
    """

    code = HTTPStatusCode.INTERNAL_SERVER_ERROR


class NotImplementedException(HTTPException):
    code = HTTPStatusCode.NOT_IMPLEMENTED


class BadGatewayException(HTTPException):
    code = HTTPStatusCode.BAD_GATEWAY


class ServiceUnavailableException(HTTPException):
    code = HTTPStatusCode.SERVICE_UNAVAILABLE


class GatewayTimeoutException(HTTPException):
    code = HTTPStatusCode.GATEWAY_TIMEOUT


class HTTPVersionNotSupportedException(HTTPException):
    code = HTTPStatusCode.HTTP_VERSION_NOT_SUPPORTED


class VariantAlsoNegotiatesException(HTTPException):
    code = HTTPStatusCode.VARIANT_ALSO_NEGOTIATES


class InsufficientStorageException(HTTPException):
    code = HTTPStatusCode.INSUFFICIENT_STORAGE


class LoopDetectedException(HTTPException):
    code = HTTPStatusCode.LOOP_DETECTED


class NotExtendedException(HTTPException):
    code = HTTPStatusCode.NOT_EXTENDED


class NetworkAuthenticationRequiredException(HTTPException):
    code = HTTPStatusCode.NETWORK_AUTHENTICATION_REQUIRED


# --- Redirects ---------------------------------------------------------


class RedirectException(HTTPException):
    """Raised to send the client elsewhere (302 by default)."""

    code = HTTPStatusCode.REDIRECT

    def __init__(self, redirect_url: str, message: str | None = None) -> None:
        if not redirect_url:
            raise ValueError("redirect_url must be a non-empty string")
        super().__init__(message or f"Redirect to {redirect_url}")
        self.redirect_url = redirect_url


class TemporaryRedirectException(RedirectException):
    code = HTTPStatusCode.REDIRECT


class PermanentRedirectException(RedirectException):
    code = HTTPStatusCode.MOVED_PERMANENTLY


_EXCEPTIONS_BY_STATUS: dict[int, type[HTTPException]] = {
    cls.code: cls
    for cls in (
        BadRequestException,
        UnauthorizedException,
        PaymentRequiredException,
        ForbiddenException,
        NotFoundException,
        MethodNotAllowedException,
        NotAcceptableException,
        ProxyAuthenticationRequiredException,
        RequestTimeoutException,
        ConflictException,
        GoneException,
        LengthRequiredException,
        PreconditionFailedException,
        PayloadTooLargeException,
        URITooLongException,
        UnsupportedMediaTypeException,
        RangeNotSatisfiableException,
        ExpectationFailedException,
        ImATeapotException,
        MisdirectedRequestException,
        UnprocessableEntityException,
        LockedException,
        FailedDependencyException,
        TooEarlyException,
        UpgradeRequiredException,
        PreconditionRequiredException,
        TooManyRequestsException,
        RequestHeaderFieldsTooLargeException,
        UnavailableForLegalReasonsException,
        InternalServerErrorException,
        NotImplementedException,
        BadGatewayException,
        ServiceUnavailableException,
        GatewayTimeoutException,
        HTTPVersionNotSupportedException,
        VariantAlsoNegotiatesException,
        InsufficientStorageException,
        LoopDetectedException,
        NotExtendedException,
        NetworkAuthenticationRequiredException,
    )
}


def exception_class_for_status(status_code: int) -> type[HTTPException]:
    """Return the exception class bound to an error-bearing status code.

    Raises:
        ValueError: If the status is not an error-bearing registry code.
    """
    try:
        return _EXCEPTIONS_BY_STATUS[status_code]
    except KeyError:
        raise ValueError(
            f"No HTTP exception is bound to status {status_code!r}"
        ) from None


def http_exception_for_status(
    status_code: int, message: str | None = None
) -> HTTPException:
    """Build the exception bound to ``status_code`` carrying ``message`` verbatim."""
    return exception_class_for_status(status_code).from_message(message)


def is_http_exception(value: object) -> bool:
    """Return True if ``value`` should be handled as an HTTP exception.

    Recognition order:

    1. Instances of :class:`HTTPException`.
    2. Objects with an ``is_http_exception`` marker set to anything but None;
       its truthiness decides, so ``False`` opts out even when the shape matches.
    3. Objects exposing an integer ``status_code`` that is an error-bearing
       or redirect registry status, and a string ``message``. This covers
       exceptions that lost their concrete type, e.g. after crossing a
       pickling boundary.
    """
    if isinstance(value, HTTPException):
        return True

    marker = getattr(value, MARKER_ATTRIBUTE, None)
    if marker is not None:
        return bool(marker)

    return is_failure_status_code(getattr(value, "status_code", None)) and isinstance(
        getattr(value, "message", None), str
    )
