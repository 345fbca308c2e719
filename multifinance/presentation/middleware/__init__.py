"""HTTP middleware: request ids, access logging and error mapping."""

from .request_context import RequestContextMiddleware, get_request_id
from .logging import LoggingMiddleware
from .error_handler import error_handler_middleware

__all__ = [
    "RequestContextMiddleware",
    "get_request_id",
    "LoggingMiddleware",
    "error_handler_middleware",
]
