"""Authentication API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from application.services.auth_service import AuthService
from domain.models import AuthenticatedCaller
from infrastructure.container import get_auth_service

from ...middleware.caller_context import get_current_caller
from .schemas import (
    CallerResponse,
    ErrorResponse,
    TokenResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User created."},
        400: {"description": "Invalid username format or missing password.", "model": ErrorResponse},
        409: {"description": "Username already taken.", "model": ErrorResponse},
    },
)
def register(
    body: UserRegister,
    service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    user = service.register(
        username=body.username,
        password=body.password.get_secret_value(),
    )
    return UserResponse(id=user.id, username=user.username, is_admin=user.is_admin)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in and obtain an access token",
    responses={
        200: {"description": "Login successful."},
        401: {"description": "Invalid credentials.", "model": ErrorResponse},
    },
)
def login(
    body: UserLogin,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    access = service.authenticate(
        username=body.username,
        password=body.password.get_secret_value(),
    )
    return TokenResponse(
        token=access.token,
        token_type=access.token_type,
        expires_in=access.expires_in,
    )


@router.get(
    "/me",
    response_model=CallerResponse,
    summary="Get the identity behind the bearer token",
    responses={
        200: {"description": "Current caller."},
        401: {"description": "Not authenticated.", "model": ErrorResponse},
    },
)
def me(caller: AuthenticatedCaller = Depends(get_current_caller)) -> CallerResponse:
    return CallerResponse(id=caller.id, username=caller.username, is_admin=caller.is_admin)
