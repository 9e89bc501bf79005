import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = structlog.get_logger("shortlink.web")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with status and duration."""

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        # Unhandled exceptions surface here and become a 500 further out
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "request",
                method=request.method,
                path=request.url.path,
                status=status,
                duration_ms=round(duration_ms, 2),
            )
