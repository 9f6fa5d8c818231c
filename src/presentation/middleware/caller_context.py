"""
Caller context middleware for the Todo Platform.

Verifies the bearer token of incoming requests and exposes its claims on
``request.state.jwt_claims``.  Turning claims into an
:class:`AuthenticatedCaller` is left to the :func:`get_current_caller`
dependency so that routes which need an identity fail closed, while public
routes simply see no claims.
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Request, status
from jose import JWTError
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

from application.services.auth_service import AuthService
from domain.models import AuthenticatedCaller
from infrastructure.container import get_auth_service, get_container
from infrastructure.observability.logging_config import bind_caller_context

BEARER_PREFIX = "Bearer "


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


class CallerContextMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that decodes the ``Authorization: Bearer`` token.

    * No header (or a non-bearer scheme): ``jwt_claims`` is ``None``.
    * A token that fails verification: ``401`` Problem Details, immediately.
    * A valid token: its claims are attached to ``request.state.jwt_claims``.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.jwt_claims = None

        token = self._extract_bearer_token(request)
        if token is None:
            return await call_next(request)

        try:
            request.state.jwt_claims = self._jwt_handler(request).decode_token(token)
        except JWTError:
            return self._problem_response(
                status_code=status.HTTP_401_UNAUTHORIZED,
                title="Unauthorized",
                detail="The bearer token is invalid or has expired.",
                instance=request.url.path,
            )

        bind_caller_context(request.state.jwt_claims.get("sub"))

        return await call_next(request)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _extract_bearer_token(request: Request) -> str | None:
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith(BEARER_PREFIX):
            return None
        token = auth_header.removeprefix(BEARER_PREFIX).strip()
        return token or None

    @staticmethod
    def _jwt_handler(request: Request) -> Any:
        container = getattr(request.app.state, "container", None) or get_container()
        return container.jwt_handler

    @staticmethod
    def _problem_response(
        status_code: int,
        title: str,
        detail: str,
        instance: str | None = None,
    ) -> JSONResponse:
        """Return an RFC 9457 Problem Details JSON response."""
        body: dict[str, Any] = {
            "type": "about:blank",
            "title": title,
            "status": status_code,
            "detail": detail,
        }
        if instance:
            body["instance"] = instance
        return JSONResponse(
            status_code=status_code,
            content=body,
            media_type="application/problem+json",
            headers={"WWW-Authenticate": "Bearer"},
        )


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------


def get_current_caller(
    request: Request,
    service: AuthService = Depends(get_auth_service),
) -> AuthenticatedCaller:
    """FastAPI dependency returning the caller behind the request.

    Raises:
        UnauthorizedError(401): No token, or a token without identity claims.
    """
    claims: dict[str, Any] | None = getattr(request.state, "jwt_claims", None)
    caller = service.resolve_caller(claims)
    request.state.caller = caller
    return caller
