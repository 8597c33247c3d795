"""Middleware for request context, access logging and error handling."""

from .error_handler import error_handler_middleware
from .request_context import RequestContextMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "error_handler_middleware",
    "RequestContextMiddleware",
    "LoggingMiddleware",
]
