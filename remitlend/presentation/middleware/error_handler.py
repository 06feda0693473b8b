"""
Error classification and response formatting.

This is the only place that decides the shape of an error response. Every
failure raised anywhere in the app is classified into an ``ErrorKind`` and
rendered as ``{"success": false, "message": ..., "errors"?, "stack"?}``.
"""

import traceback
from dataclasses import dataclass
from typing import Callable, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from remitlend.core.metrics import record_error
from remitlend.domain.exceptions import KIND_POLICIES, AppError, ErrorKind, FieldError
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

GENERIC_SERVER_MESSAGE = "Internal server error"

_HTTP_STATUS_KINDS = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    405: ErrorKind.NOT_FOUND,
    409: ErrorKind.CONFLICT,
    429: ErrorKind.TOO_MANY_REQUESTS,
}


@dataclass(frozen=True)
class ClassifiedError:
    """
    A failure reduced to what the response formatter needs.

    Attributes:
        kind: Error category
        http_status: Status code to send
        message: The declared message (may be internal, see user_message)
        is_operational: False for defects and server faults
        errors: Field errors, only for VALIDATION
    """
    kind: ErrorKind
    http_status: int
    message: str
    is_operational: bool
    errors: tuple[FieldError, ...] = ()

    def user_message(self, expose_internals: bool) -> str:
        if self.is_operational:
            return self.message
        if self.kind == ErrorKind.INTERNAL and expose_internals:
            return self.message
        return GENERIC_SERVER_MESSAGE


def _validation_errors(exc: RequestValidationError) -> tuple[FieldError, ...]:
    field_errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "path":
            loc[0] = "params"
        field_errors.append(FieldError(path=".".join(loc), message=error.get("msg", "")))
    return tuple(field_errors)


def classify_exception(
    exc: BaseException,
    method: str = "GET",
    path: str = "/",
) -> ClassifiedError:
    """
    Map any exception to a ClassifiedError.

    Args:
        exc: The failure that reached the boundary
        method: HTTP method of the request, used for not-found messages
        path: URL path of the request, used for not-found messages
    """
    if isinstance(exc, AppError):
        return ClassifiedError(
            kind=exc.kind,
            http_status=exc.status_code,
            message=exc.message,
            is_operational=exc.is_operational,
            errors=exc.errors,
        )

    if isinstance(exc, RequestValidationError):
        policy = KIND_POLICIES[ErrorKind.VALIDATION]
        return ClassifiedError(
            kind=ErrorKind.VALIDATION,
            http_status=policy.status_code,
            message=policy.default_message,
            is_operational=True,
            errors=_validation_errors(exc),
        )

    if isinstance(exc, StarletteHTTPException):
        status = exc.status_code
        kind = _HTTP_STATUS_KINDS.get(status)

        if kind == ErrorKind.NOT_FOUND:
            return ClassifiedError(
                kind=kind,
                http_status=404,
                message=f"Cannot {method} {path}",
                is_operational=True,
            )
        if kind == ErrorKind.TOO_MANY_REQUESTS:
            return ClassifiedError(
                kind=kind,
                http_status=status,
                message=KIND_POLICIES[kind].default_message,
                is_operational=True,
            )
        if status >= 500:
            return ClassifiedError(
                kind=ErrorKind.INTERNAL,
                http_status=status,
                message=str(exc.detail),
                is_operational=False,
            )
        return ClassifiedError(
            kind=kind or ErrorKind.BAD_REQUEST,
            http_status=status,
            message=str(exc.detail),
            is_operational=True,
        )

    return ClassifiedError(
        kind=ErrorKind.UNEXPECTED,
        http_status=KIND_POLICIES[ErrorKind.UNEXPECTED].status_code,
        message=str(exc) or type(exc).__name__,
        is_operational=False,
    )


def format_stack(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def build_error_response(
    exc: BaseException,
    *,
    expose_internals: bool,
    method: str = "GET",
    path: str = "/",
) -> tuple[int, dict]:
    """
    Turn a failure into (status code, JSON body).

    Args:
        exc: The failure to format
        expose_internals: True only in explicitly non-production environments;
            enables stack traces and declared internal messages
        method: HTTP method of the request
        path: URL path of the request

    Returns:
        Tuple of HTTP status and response body
    """
    classified = classify_exception(exc, method, path)

    body: dict = {
        "success": False,
        "message": classified.user_message(expose_internals),
    }
    if classified.kind == ErrorKind.VALIDATION:
        body["errors"] = [error.to_dict() for error in classified.errors]
    if not classified.is_operational and expose_internals:
        body["stack"] = format_stack(exc)

    return classified.http_status, body


def _log_failure(request: Request, exc: BaseException, classified: ClassifiedError) -> None:
    log = logger.bind(
        request_id=get_request_id(),
        method=request.method,
        path=request.url.path,
        kind=classified.kind.value,
        status_code=classified.http_status,
    )

    if classified.kind == ErrorKind.UNEXPECTED:
        log.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            exc_info=exc,
        )
    elif not classified.is_operational:
        log.error("internal_error", message=classified.message, exc_info=exc)
    else:
        log.info("operational_error", message=classified.message)


def _error_response(request: Request, exc: Exception, expose_internals: bool) -> JSONResponse:
    classified = classify_exception(exc, request.method, request.url.path)
    _log_failure(request, exc, classified)
    record_error(classified.kind.value)

    status_code, body = build_error_response(
        exc,
        expose_internals=expose_internals,
        method=request.method,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Turns exceptions no handler claimed into the canonical 500 response.

    Installed innermost so the response still passes through the other
    middleware on the way out.
    """

    def __init__(self, app: ASGIApp, expose_internals: bool = False):
        super().__init__(app)
        self.expose_internals = expose_internals

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return _error_response(request, exc, self.expose_internals)


def error_handler_middleware(app: FastAPI, expose_internals: bool) -> None:
    """
    Register exception handlers and the catch-all middleware with the app.

    Call before adding any other middleware. Every path delegates to
    ``build_error_response`` so all error responses share one shape.
    """

    async def handle(request: Request, exc: Exception) -> JSONResponse:
        return _error_response(request, exc, expose_internals)

    # slowapi's middleware can only call a synchronous handler.
    def handle_rate_limit(request: Request, exc: Exception) -> JSONResponse:
        return _error_response(request, exc, expose_internals)

    app.add_exception_handler(AppError, handle)
    app.add_exception_handler(RequestValidationError, handle)
    app.add_exception_handler(RateLimitExceeded, handle_rate_limit)
    app.add_exception_handler(StarletteHTTPException, handle)
    app.add_middleware(UnhandledErrorMiddleware, expose_internals=expose_internals)
