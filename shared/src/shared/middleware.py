"""FastAPI middleware for request_id and trace_id."""
import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from shared.logging import clear_request_context, set_request_context

REQUEST_ID_HEADER = "X-Request-ID"
TRACE_ID_HEADER = "X-Trace-ID"

logger = structlog.get_logger()


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind request/trace ids to the log context and echo them in response headers."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # starlette headers are case-insensitive
        request_id, trace_id = set_request_context(
            request_id=request.headers.get(REQUEST_ID_HEADER),
            trace_id=request.headers.get(TRACE_ID_HEADER),
        )
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers[TRACE_ID_HEADER] = trace_id
            logger.debug(
                "request_finished",
                path=request.url.path,
                status=response.status_code,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_request_context()
