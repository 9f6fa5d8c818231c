"""Application service for administrative user management.

Every operation runs inside a single unit of work so that the store, not
this code, serializes competing read-check-write sequences: of two
concurrent deletes for the same user exactly one finds the row.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from domain.exceptions import (
    ForbiddenError,
    UsernameTakenError,
    UserNotFoundError,
)
from domain.models import AuthenticatedCaller, User
from domain.services.username_policy import require_username, validate_username_format

from application.ports import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class AdminService:
    """List, delete and update users on behalf of an administrator."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    # -- helpers ----------------------------------------------------------

    @staticmethod
    def _require_admin(caller: AuthenticatedCaller) -> None:
        if not caller.is_admin:
            raise ForbiddenError("Administrator privileges are required.")

    # -- public API -------------------------------------------------------

    def list_users(self, caller: AuthenticatedCaller) -> list[User]:
        """Return every user ordered by id (empty list when there are none)."""
        self._require_admin(caller)
        with self._uow_factory() as uow:
            return uow.users.list_all()

    def list_usernames(self, caller: AuthenticatedCaller) -> list[str]:
        return [user.username for user in self.list_users(caller)]

    def delete_user(self, caller: AuthenticatedCaller, username: str) -> None:
        """Delete a user together with their to-do items and custom themes."""
        self._require_admin(caller)
        username = require_username(username)

        with self._uow_factory() as uow:
            user = uow.users.get_by_username(username)
            if user is None or user.id is None:
                raise UserNotFoundError(identifier=username)

            todos_deleted = uow.todos.delete_by_user(user.id)
            themes_deleted = uow.themes.delete_by_user(user.id)
            if not uow.users.delete(user.id):
                raise UserNotFoundError(identifier=username)
            uow.commit()

        logger.info(
            "User %s (id=%s) deleted by %s with %d todo item(s) and %d theme(s)",
            username,
            user.id,
            caller.username,
            todos_deleted,
            themes_deleted,
        )

    def update_user(
        self,
        caller: AuthenticatedCaller,
        user_id: int,
        username: str,
        is_admin: bool,
    ) -> User:
        """Overwrite a user's username and admin flag."""
        self._require_admin(caller)
        username = validate_username_format(username)

        with self._uow_factory() as uow:
            existing = uow.users.get_by_id(user_id)
            if existing is None:
                raise UserNotFoundError(identifier=str(user_id))

            holder = uow.users.get_by_username(username)
            if holder is not None and holder.id != user_id:
                raise UsernameTakenError(username=username)

            if not uow.users.update(user_id, username=username, is_admin=is_admin):
                raise UserNotFoundError(identifier=str(user_id))
            uow.commit()

        logger.info("User %s updated by %s (admin=%s)", user_id, caller.username, is_admin)
        return replace(existing, username=username, is_admin=is_admin)
