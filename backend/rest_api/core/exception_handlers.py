"""
Exception handlers.

Request validation failures are reported with the same error contract as
domain rejections: HTTP 400 with a list of ``{"property", "message"}``.
Unhandled exceptions are logged and answered with a generic 500.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.config.logging import rest_api_logger as logger

# Location prefixes FastAPI adds in front of the field path
_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}


def _property_name(location: tuple) -> str:
    parts = [str(part) for part in location]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    notifications = [
        {"property": _property_name(tuple(error.get("loc", ()))), "message": error.get("msg", "")}
        for error in exc.errors()
    ]
    logger.warning(
        "Request validation failed",
        path=request.url.path,
        properties=[n["property"] for n in notifications],
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=notifications)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
