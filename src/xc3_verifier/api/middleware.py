"""Request correlation for verification calls.

Every request gets an ``X-Request-ID`` (the caller's, when supplied) that is
bound into the structlog context, so analyzer, verifier and fraud events
logged during a verification share it with the access log line.
"""

from __future__ import annotations

import time
from uuid import uuid4

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from xc3_verifier.observability.logger import get_logger

logger = get_logger("middleware")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        start = time.monotonic()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id, route=f"{request.method} {request.url.path}"
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                error_type=type(e).__name__,
                error=str(e),
                duration_ms=round((time.monotonic() - start) * 1000, 2),
            )
            raise

        duration_ms = round((time.monotonic() - start) * 1000, 2)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Duration-MS"] = str(duration_ms)
        # Rejected verifications (4xx) are expected traffic; only log them at info
        log = logger.error if response.status_code >= 500 else logger.info
        log("request_completed", status=response.status_code, duration_ms=duration_ms)
        return response
