"""
Request ids for log correlation.

Every request carries an ``X-Request-ID``: the client's value when sent,
a fresh UUID otherwise. The id is echoed on the response and attached to
each log record emitted while the request is served.
"""

import logging
import uuid
from contextvars import ContextVar

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    """Id of the request being served, or an empty string outside requests."""
    return request_id_var.get()


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    HEADER_NAME = REQUEST_ID_HEADER

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())
        request.state.request_id = request_id

        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[self.HEADER_NAME] = request_id
        return response


class CorrelationIdFilter(logging.Filter):
    """Sets ``record.request_id``; ``-`` outside of a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True
