"""API middleware for request logging and error handling."""
from __future__ import annotations
import time
import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request, tagged with the queried locale if any."""

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()
        structlog.contextvars.bind_contextvars(
            method=request.method,
            path=request.url.path,
            locale=request.query_params.get("locale"),
        )
        try:
            response = await call_next(request)
            logger.info("request", status=response.status_code,
                        duration_ms=int((time.monotonic() - start) * 1000))
            return response
        except Exception as e:
            logger.error("request_error", error=str(e),
                         duration_ms=int((time.monotonic() - start) * 1000))
            return JSONResponse(status_code=500, content={"detail": "Internal server error"})
        finally:
            structlog.contextvars.clear_contextvars()
