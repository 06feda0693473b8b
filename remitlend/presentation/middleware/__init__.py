"""Middleware and request-pipeline dependencies."""

from .error_handler import (
    ClassifiedError,
    build_error_response,
    classify_exception,
    error_handler_middleware,
)
from .request_context import RequestContextMiddleware, get_request_id
from .logging import LoggingMiddleware
from .auth import require_api_key
from .validation import (
    validate_body,
    validate_data,
    validate_params,
    validate_request,
)

__all__ = [
    "ClassifiedError",
    "build_error_response",
    "classify_exception",
    "error_handler_middleware",
    "RequestContextMiddleware",
    "get_request_id",
    "LoggingMiddleware",
    "require_api_key",
    "validate_body",
    "validate_data",
    "validate_params",
    "validate_request",
]
