"""
Schema validation adapter.

Turns a pydantic validation failure into an HTTP exception:
bad input is the client's fault (400), bad output is ours (500).
All violations are reported in one message.
"""

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from fastapi_http_exceptions.core.exceptions import (
    BadRequestException,
    InternalServerErrorException,
)

T = TypeVar("T")

OUTPUT_ERROR_PREFIX = "Failed to validate output"
VIOLATION_SEPARATOR = "; "


@lru_cache(maxsize=256)
def _adapter_for(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def _parse(schema: type[T] | Any, value: Any) -> T:
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return schema.model_validate(value)
    try:
        adapter = _adapter_for(schema)
    except TypeError:
        # Unhashable schema objects (e.g. some Annotated forms) skip the cache.
        adapter = TypeAdapter(schema)
    return adapter.validate_python(value)


def format_validation_errors(error: ValidationError) -> str:
    """Render every violation as ``path: message``, joined by ``; ``.

    Args:
        error: The pydantic validation error.

    Returns:
        One line listing each field path and its violation. Root-level
        violations have no path prefix.
    """
    parts = []
    for item in error.errors(include_url=False):
        path = ".".join(str(part) for part in item.get("loc", ()))
        message = item.get("msg", "Invalid value")
        parts.append(f"{path}: {message}" if path else message)
    return VIOLATION_SEPARATOR.join(parts)


def validate_input(schema: type[T] | Any, value: Any) -> T:
    """Validate client-supplied data.

    Args:
        schema: A pydantic model class or any type ``TypeAdapter`` accepts.
        value: The raw input.

    Returns:
        The validated value.

    Raises:
        BadRequestException: Listing every field violation.
    """
    try:
        return _parse(schema, value)
    except ValidationError as exc:
        raise BadRequestException(format_validation_errors(exc)) from exc


def validate_output(schema: type[T] | Any, value: Any) -> T:
    """Validate data this service is about to send.

    Args:
        schema: A pydantic model class or any type ``TypeAdapter`` accepts.
        value: The produced output.

    Returns:
        The validated value.

    Raises:
        InternalServerErrorException: Prefixed with ``Failed to validate output``.
    """
    try:
        return _parse(schema, value)
    except ValidationError as exc:
        raise InternalServerErrorException(
            f"{OUTPUT_ERROR_PREFIX}: {format_validation_errors(exc)}"
        ) from exc
