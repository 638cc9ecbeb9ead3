"""
Result types returned by CrudController operations.

A result is one of:
- Success: HTTP 200 with a payload, or an empty body when ``value`` is None
- NotFound: HTTP 404, the addressed record does not exist
- ValidationFailed: HTTP 400, input rejected by entity or service rules
- PreconditionFailed: HTTP 400, a structural precondition failed (id mismatch)

Error bodies are always an ordered list of ``{"property", "message"}`` pairs.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from shared.domain import Notification

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T | None = None
    status_code: int = status.HTTP_200_OK


@dataclass(frozen=True)
class NotFound:
    notifications: tuple[Notification, ...]
    status_code: int = status.HTTP_404_NOT_FOUND


@dataclass(frozen=True)
class ValidationFailed:
    notifications: tuple[Notification, ...]
    status_code: int = status.HTTP_400_BAD_REQUEST


@dataclass(frozen=True)
class PreconditionFailed(ValidationFailed):
    pass


ActionResult = Union[Success[Any], NotFound, ValidationFailed]


def not_found(property: str, message: str) -> NotFound:
    """Not found result with a single notification."""
    return NotFound((Notification(property, message),))


def bad_request(property: str, message: str) -> ValidationFailed:
    """Bad request result with a single notification."""
    return ValidationFailed((Notification(property, message),))


def notifications_body(notifications: tuple[Notification, ...]) -> list[dict[str, str]]:
    return [notification.to_dict() for notification in notifications]


def to_response(result: ActionResult) -> Response:
    """Translate a controller result into an HTTP response."""
    if isinstance(result, Success):
        if result.value is None:
            return Response(status_code=result.status_code)
        return JSONResponse(
            status_code=result.status_code,
            content=jsonable_encoder(result.value),
        )

    return JSONResponse(
        status_code=result.status_code,
        content=notifications_body(result.notifications),
    )
