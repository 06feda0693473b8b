"""Request/response logging middleware with timing and HTTP metrics."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match

from remitlend.core.metrics import record_http_request

logger = structlog.get_logger(__name__)

UNMATCHED_ENDPOINT = "unmatched"


def _endpoint_label(request: Request) -> str:
    """Route template matched by the request, e.g. ``/api/score/{userId}``."""
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", UNMATCHED_ENDPOINT)
    return UNMATCHED_ENDPOINT


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs request completion and duration.

    Server errors log at error level, client errors at warning, everything
    else at info.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        log = logger.bind(method=method, path=path)

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            record_http_request(method, _endpoint_label(request), 500, duration)
            raise

        duration = time.perf_counter() - start_time
        status_code = response.status_code

        if status_code >= 500:
            log_method = log.error
        elif status_code >= 400:
            log_method = log.warning
        else:
            log_method = log.info

        log_method(
            "request_completed",
            status_code=status_code,
            duration_ms=round(duration * 1000, 2),
        )
        record_http_request(method, _endpoint_label(request), status_code, duration)

        return response
