"""
fastapi-http-exceptions: typed HTTP outcomes for FastAPI.

Handlers raise an HTTP exception or return an HTTP response outcome;
the package turns either into one canonical wire shape.

Layers:
    - core: Status registry, exceptions, response outcomes, translation,
      validation. No framework imports except pydantic.
    - interfaces: Responder, recovery middleware, shaping route class,
      per-endpoint guard, install_http_exceptions.
    - shared: Cross-cutting concerns (logging).
    - demo: A small application built on the package.
"""

from fastapi_http_exceptions.core.exceptions import (
    BadGatewayException,
    BadRequestException,
    ConflictException,
    ExpectationFailedException,
    FailedDependencyException,
    ForbiddenException,
    GatewayTimeoutException,
    GoneException,
    HTTPException,
    HTTPVersionNotSupportedException,
    ImATeapotException,
    InsufficientStorageException,
    InternalServerErrorException,
    LengthRequiredException,
    LockedException,
    LoopDetectedException,
    MethodNotAllowedException,
    MisdirectedRequestException,
    NetworkAuthenticationRequiredException,
    NotAcceptableException,
    NotExtendedException,
    NotFoundException,
    NotImplementedException,
    PayloadTooLargeException,
    PaymentRequiredException,
    PermanentRedirectException,
    PreconditionFailedException,
    PreconditionRequiredException,
    ProxyAuthenticationRequiredException,
    RangeNotSatisfiableException,
    RedirectException,
    RequestHeaderFieldsTooLargeException,
    RequestTimeoutException,
    ServiceUnavailableException,
    TemporaryRedirectException,
    TooEarlyException,
    TooManyRequestsException,
    UnauthorizedException,
    UnavailableForLegalReasonsException,
    UnprocessableEntityException,
    UnsupportedMediaTypeException,
    UpgradeRequiredException,
    URITooLongException,
    VariantAlsoNegotiatesException,
    exception_class_for_status,
    http_exception_for_status,
    is_http_exception,
)
from fastapi_http_exceptions.core.helpers import (
    create_error_body,
    format_forbidden_message,
    format_not_found_message,
)
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
from fastapi_http_exceptions.core.status_codes import (
    HTTPStatusCode,
    error_status_codes,
    is_error_status_code,
    is_known_status_code,
)
from fastapi_http_exceptions.core.translation import http_exception_to_response
from fastapi_http_exceptions.core.validation import validate_input, validate_output
from fastapi_http_exceptions.interfaces.guard import with_http_exceptions
from fastapi_http_exceptions.interfaces.plugin import install_http_exceptions
from fastapi_http_exceptions.interfaces.recovery import (
    HTTPExceptionMiddleware,
    render_http_exception,
)
from fastapi_http_exceptions.interfaces.responder import send_http_response
from fastapi_http_exceptions.interfaces.routing import HTTPResponseRoute

__version__ = "0.1.0"

__all__ = [
    "BadGatewayException",
    "BadRequestException",
    "ConflictException",
    "ExpectationFailedException",
    "FailedDependencyException",
    "ForbiddenException",
    "GatewayTimeoutException",
    "GoneException",
    "HTTPException",
    "HTTPExceptionMiddleware",
    "HTTPResponse",
    "HTTPResponseRoute",
    "HTTPStatusCode",
    "HTTPVersionNotSupportedException",
    "ImATeapotException",
    "InsufficientStorageException",
    "InternalServerErrorException",
    "LengthRequiredException",
    "LockedException",
    "LoopDetectedException",
    "MethodNotAllowedException",
    "MisdirectedRequestException",
    "NetworkAuthenticationRequiredException",
    "NotAcceptableException",
    "NotExtendedException",
    "NotFoundException",
    "NotImplementedException",
    "PayloadTooLargeException",
    "PaymentRequiredException",
    "PermanentRedirectException",
    "PreconditionFailedException",
    "PreconditionRequiredException",
    "ProxyAuthenticationRequiredException",
    "RangeNotSatisfiableException",
    "RedirectException",
    "RequestHeaderFieldsTooLargeException",
    "RequestTimeoutException",
    "ServiceUnavailableException",
    "TemporaryRedirectException",
    "TooEarlyException",
    "TooManyRequestsException",
    "URITooLongException",
    "UnauthorizedException",
    "UnavailableForLegalReasonsException",
    "UnprocessableEntityException",
    "UnsupportedMediaTypeException",
    "UpgradeRequiredException",
    "VariantAlsoNegotiatesException",
    "as_http_response",
    "bad_request",
    "create_error_body",
    "created",
    "error_response",
    "error_status_codes",
    "exception_class_for_status",
    "forbidden",
    "format_forbidden_message",
    "format_not_found_message",
    "http_exception_for_status",
    "http_exception_to_response",
    "install_http_exceptions",
    "internal_server_error",
    "is_error_status_code",
    "is_http_exception",
    "is_http_response",
    "is_known_status_code",
    "no_content",
    "not_found",
    "not_modified",
    "ok",
    "permanent_redirect",
    "redirect",
    "render_http_exception",
    "send_http_response",
    "unauthorized",
    "validate_input",
    "validate_output",
    "with_http_exceptions",
]
