"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from loan_gateway.domain.exceptions import (
    DomainException,
    NoValidLoanException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions that escape a route to HTTP responses. The
    decision route itself returns rejections as values; these handlers
    cover other domain exceptions. Unexpected errors are turned into
    500 responses by RequestContextMiddleware.
    """

    @app.exception_handler(NoValidLoanException)
    async def no_valid_loan_handler(
        request: Request,
        exc: NoValidLoanException,
    ) -> JSONResponse:
        """Handle business-rule rejections."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle invalid input and other domain exceptions."""
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

