"""
Structured request logging middleware.

Every request/response cycle is logged as a single ``http_request`` event
containing method, path, status code, duration, the caller id and a unique
request id.  The request id is also bound to the structlog context so that
service log lines emitted while handling the request carry it.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from infrastructure.observability.logging_config import (
    bind_request_context,
    clear_request_context,
    get_logger,
)

logger = get_logger("todo_platform.request")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every HTTP request/response with structured fields."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        bind_request_context(request_id)

        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            self._log_request(
                request=request,
                request_id=request_id,
                status_code=500,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                level="error",
            )
            clear_request_context()
            raise

        response.headers[REQUEST_ID_HEADER] = request_id

        level = "info"
        if response.status_code >= 500:
            level = "error"
        elif response.status_code >= 400:
            level = "warning"

        self._log_request(
            request=request,
            request_id=request_id,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            level=level,
        )
        clear_request_context()
        return response

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _user_id(request: Request) -> str | None:
        jwt_claims: dict[str, Any] | None = getattr(request.state, "jwt_claims", None)
        if jwt_claims:
            return jwt_claims.get("sub")
        return None

    @classmethod
    def _log_request(
        cls,
        *,
        request: Request,
        request_id: str,
        status_code: int,
        duration_ms: float,
        level: str = "info",
    ) -> None:
        event_data: dict[str, Any] = {
            "request_id": request_id,
            "method": request.method,
            "path": str(request.url.path),
            "query": str(request.url.query) if request.url.query else None,
            "status_code": status_code,
            "duration_ms": duration_ms,
            "user_id": cls._user_id(request),
            "client_ip": request.client.host if request.client else None,
        }

        log_method = getattr(logger, level, logger.info)
        log_method("http_request", **event_data)
