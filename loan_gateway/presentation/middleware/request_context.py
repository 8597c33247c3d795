"""Request context middleware for tracing."""

import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from loan_gateway.presentation.schemas import ErrorResponseSchema

logger = structlog.get_logger(__name__)

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the current request ID from context."""
    return request_id_var.get()


def internal_error_response(request_id: Optional[str]) -> JSONResponse:
    error = ErrorResponseSchema(
        error="INTERNAL_ERROR",
        message="An unexpected error occurred.",
        request_id=request_id,
    )
    return JSONResponse(status_code=500, content=error.model_dump())


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that sets up request context.

    Generates or extracts a request ID, binds it to every structlog event
    emitted while handling the request, and echoes it in the response
    headers. Unhandled exceptions are logged and turned into a 500 here,
    while the request ID is still bound.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())

        token = request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "unhandled_exception",
                error=str(e),
                error_type=type(e).__name__,
            )
            response = internal_error_response(request_id)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_var.reset(token)

        response.headers[self.HEADER_NAME] = request_id
        return response
