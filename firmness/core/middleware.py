# firmness/core/middleware.py
"""
Core middleware registration for the FastAPI application.

Provides request tracking and timing; the request id is bound into the
structlog context so every log line of a request carries it.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from firmness.config.logging import get_logger
from firmness.core.constants import HEADER_PROCESS_TIME, HEADER_REQUEST_ID

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Adds a unique request ID to each incoming request.

    The request ID is:
    - Stored in request.state.request_id
    - Bound into the structlog context for the duration of the request
    - Added to response headers as X-Request-ID
    """

    def __init__(self, app: ASGIApp, header_name: str = HEADER_REQUEST_ID):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Reuse an upstream id when a proxy already assigned one
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Measures and logs request processing time.

    Adds X-Process-Time header to responses with the processing duration in seconds.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        response.headers[HEADER_PROCESS_TIME] = f"{process_time:.4f}"

        principal = getattr(request.state, "principal", None)
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time=round(process_time, 4),
            user_id=principal.subject_id if principal else None,
        )
        return response


def register_middlewares(app: FastAPI) -> None:
    """Register middleware; the last one added runs first."""
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
