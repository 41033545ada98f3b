"""Middleware for request processing."""

from .error_handler import error_handler_middleware
from .request_context import RequestContextMiddleware, get_request_id
from .logging import LoggingMiddleware
from .security_headers import SecurityHeadersMiddleware
from .validation import collect_validation_messages

__all__ = [
    "error_handler_middleware",
    "RequestContextMiddleware",
    "get_request_id",
    "LoggingMiddleware",
    "SecurityHeadersMiddleware",
    "collect_validation_messages",
]
