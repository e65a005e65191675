"""
Demo routes.

Each route shows one way of producing an outcome: raising an HTTP
exception, returning an HTTP response, or validating input/output.
Error mapping is handled by install_http_exceptions in main.py.
"""

from typing import Any

from fastapi import APIRouter, Body, Request

from fastapi_http_exceptions.core.config import settings
from fastapi_http_exceptions.core.exceptions import (
    BadRequestException,
    ConflictException,
    ForbiddenException,
    InternalServerErrorException,
    NotFoundException,
    PermanentRedirectException,
    TemporaryRedirectException,
    UnauthorizedException,
)
from fastapi_http_exceptions.core.responses import (
    HTTPResponse,
    created,
    no_content,
    not_found,
    ok,
    redirect,
)
from fastapi_http_exceptions.core.validation import validate_input, validate_output
from fastapi_http_exceptions.demo.rate_limiting import limiter
from fastapi_http_exceptions.demo.schemas import (
    CreateUserRequest,
    ErrorResponse,
    ReportSchema,
    UserSchema,
)
from fastapi_http_exceptions.interfaces.guard import with_http_exceptions
from fastapi_http_exceptions.interfaces.routing import HTTPResponseRoute

DEMO_USER_NAME = "Demo User"
TAKEN_USER_NAMES = frozenset({"admin", "root"})
AVATAR_BASE_URL = "https://avatars.example.com"

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}

users_router = APIRouter(prefix="/users", tags=["users"], route_class=HTTPResponseRoute)
auth_router = APIRouter(prefix="/auth", tags=["auth"], route_class=HTTPResponseRoute)
misc_router = APIRouter(tags=["misc"], route_class=HTTPResponseRoute)
# Plain APIRoute: these endpoints rely on with_http_exceptions instead.
legacy_router = APIRouter(prefix="/legacy", tags=["legacy"])


@users_router.get("/{user_id}", response_model=UserSchema, responses=ERROR_RESPONSES)
def get_user(user_id: str) -> HTTPResponse[UserSchema]:
    """Return a user, 400 for id ``0`` and 404 for id ``404``."""
    if user_id == "0":
        raise BadRequestException("Invalid user id")
    if user_id == "404":
        raise NotFoundException("user")

    user = validate_output(UserSchema, {"id": user_id, "name": DEMO_USER_NAME})
    return ok(user)


@users_router.delete("/{user_id}", status_code=204)
def delete_user(user_id: str) -> HTTPResponse[None]:
    """Delete a user."""
    return no_content()


@users_router.post("", response_model=UserSchema, status_code=201, responses=ERROR_RESPONSES)
def create_user(payload: dict[str, Any] = Body(...)) -> HTTPResponse[UserSchema]:
    """Create a user; invalid payloads become 400 with every violation listed."""
    command = validate_input(CreateUserRequest, payload)
    if command.name.lower() in TAKEN_USER_NAMES:
        raise ConflictException(f"User name already taken: {command.name}")
    return created(UserSchema(id="1", name=command.name))


@users_router.get("/{user_id}/avatar")
def get_avatar(user_id: str) -> HTTPResponse[None]:
    """Redirect to the user's avatar image."""
    if user_id == "404":
        return not_found("avatar not found")
    return redirect(f"{AVATAR_BASE_URL}/{user_id}.png")


@users_router.get("/{user_id}/report", response_model=ReportSchema)
def get_report(user_id: str) -> HTTPResponse[ReportSchema]:
    """Return a usage report; the ``broken`` user produces invalid output."""
    count = -1 if user_id == "broken" else 42
    report = validate_output(ReportSchema, {"id": user_id, "count": count})
    return ok(report)


@auth_router.get("/unauthorized")
async def unauthorized_route() -> None:
    raise UnauthorizedException("Not authenticated")


@auth_router.get("/forbidden")
async def forbidden_route() -> None:
    raise ForbiddenException("user", "not in org")


@misc_router.get("/server-error")
async def server_error() -> None:
    raise InternalServerErrorException("Something went wrong")


@misc_router.get("/crash")
async def crash() -> None:
    """Raise a non-HTTP exception, handled by the app's fallback handler."""
    raise RuntimeError("unexpected failure")


@misc_router.get("/redirect/temporary")
async def temporary_redirect() -> None:
    raise TemporaryRedirectException("https://example.com/temporary")


@misc_router.get("/redirect/permanent")
async def permanent_redirect() -> None:
    raise PermanentRedirectException("https://example.com/permanent")


@misc_router.get("/search")
@limiter.limit(settings.rate_limit_heavy)
async def search(request: Request, q: str = "") -> HTTPResponse[dict[str, Any]]:
    """Rate-limited search; exceeding the limit returns 429."""
    if not q:
        raise BadRequestException("Query parameter q is required")
    return ok({"query": q, "results": []})


@legacy_router.get("/users/{user_id}", response_model=None)
@with_http_exceptions
async def legacy_get_user(user_id: str):
    """Same contract as ``GET /users/{user_id}``, guarded per endpoint."""
    if user_id == "404":
        raise NotFoundException("user")
    return ok(UserSchema(id=user_id, name=DEMO_USER_NAME))
