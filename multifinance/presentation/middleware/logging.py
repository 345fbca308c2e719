"""Access logging and HTTP metrics per request."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from multifinance.core.metrics import record_http_request

logger = structlog.get_logger(__name__)

# Probe and scrape endpoints, counted in metrics but not access-logged.
QUIET_PATHS = frozenset({"/metrics", "/v1/health"})


def _endpoint_label(request: Request) -> str:
    """Route template of the request, so ids do not explode label cardinality."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with its outcome and duration, and records HTTP metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        quiet = request.url.path in QUIET_PATHS

        # request_id is merged in from structlog's contextvars
        log = logger.bind(method=request.method, path=request.url.path)
        if not quiet:
            log.info("request_started", query=str(request.query_params) or None)

        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed = time.perf_counter() - started
            log.error(
                "request_failed",
                error=str(exc),
                error_type=type(exc).__name__,
                duration_ms=round(elapsed * 1000, 2),
            )
            record_http_request(request.method, _endpoint_label(request), 500, elapsed)
            raise

        elapsed = time.perf_counter() - started
        if not quiet:
            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round(elapsed * 1000, 2),
            )
        record_http_request(request.method, _endpoint_label(request), response.status_code, elapsed)
        return response
