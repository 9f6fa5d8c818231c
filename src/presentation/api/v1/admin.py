"""Administrative user management API endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from application.services.admin_service import AdminService
from domain.models import AuthenticatedCaller
from infrastructure.container import get_admin_service

from ...middleware.caller_context import get_current_caller
from .schemas import ErrorResponse, UserDelete, UserResponse, UserUpdate

router = APIRouter(prefix="/admin", tags=["Administration"])

UserID = Annotated[int, Path(description="Numeric user identifier.")]

_AUTH_RESPONSES = {
    401: {"description": "Not authenticated.", "model": ErrorResponse},
    403: {"description": "Administrator privileges required.", "model": ErrorResponse},
}


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List all users",
    responses={200: {"description": "Every user, ordered by id."}, **_AUTH_RESPONSES},
)
def list_users(
    caller: AuthenticatedCaller = Depends(get_current_caller),
    service: AdminService = Depends(get_admin_service),
) -> list[UserResponse]:
    return [
        UserResponse(id=user.id, username=user.username, is_admin=user.is_admin)
        for user in service.list_users(caller)
    ]


@router.get(
    "/usernames",
    response_model=list[str],
    summary="List all usernames",
    responses={200: {"description": "Every username."}, **_AUTH_RESPONSES},
)
def list_usernames(
    caller: AuthenticatedCaller = Depends(get_current_caller),
    service: AdminService = Depends(get_admin_service),
) -> list[str]:
    return service.list_usernames(caller)


@router.delete(
    "/users",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user and everything they own",
    response_class=Response,
    responses={
        204: {"description": "User deleted."},
        400: {"description": "Username is required.", "model": ErrorResponse},
        404: {"description": "User not found.", "model": ErrorResponse},
        **_AUTH_RESPONSES,
    },
)
def delete_user(
    body: UserDelete,
    caller: AuthenticatedCaller = Depends(get_current_caller),
    service: AdminService = Depends(get_admin_service),
) -> Response:
    service.delete_user(caller, body.username)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a user's username and admin flag",
    response_class=Response,
    responses={
        204: {"description": "User updated."},
        400: {"description": "Invalid username.", "model": ErrorResponse},
        404: {"description": "User not found.", "model": ErrorResponse},
        409: {"description": "Username already taken.", "model": ErrorResponse},
        **_AUTH_RESPONSES,
    },
)
def update_user(
    user_id: UserID,
    body: UserUpdate,
    caller: AuthenticatedCaller = Depends(get_current_caller),
    service: AdminService = Depends(get_admin_service),
) -> Response:
    service.update_user(caller, user_id, body.username, body.is_admin)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
