"""
Correlation ID Middleware
Adds unique request ID for distributed tracing
"""
from __future__ import annotations

import time
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from src.shared.infrastructure.observability.logger import bind_context, clear_context, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add correlation/trace ID to all requests.

    Generates or extracts X-Request-ID header, binds it to the logging context
    and stores it on ``request.state.request_id`` so error bodies can echo it.

    Also measures request duration and adds it to response headers.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        correlation_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = correlation_id

        bind_context(
            trace_id=correlation_id,
            method=request.method,
            path=request.url.path,
        )

        start_time = time.perf_counter()

        logger.info(
            "Request started",
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)

            duration_ms = int((time.perf_counter() - start_time) * 1000)

            response.headers[REQUEST_ID_HEADER] = correlation_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"

            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )

            return response
        except Exception as e:
            duration_ms = int((time.perf_counter() - start_time) * 1000)
            logger.error(
                "Request failed",
                error=str(e),
                duration_ms=duration_ms,
                exc_info=True,
            )
            raise
        finally:
            clear_context()
