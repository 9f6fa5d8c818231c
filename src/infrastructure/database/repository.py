"""
Repository pattern implementations for the Todo Platform.

Each repository encapsulates data-access logic for a specific aggregate and
operates through an injected :class:`Session`.  Transaction boundaries are
owned by the caller (see :mod:`infrastructure.database.unit_of_work`); the
repositories only flush.  Rows are mapped to the plain domain dataclasses so
that nothing outside this module holds ORM instances.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from domain.models import ColourTheme, TodoItem, User

from .models import ColourThemeModel, TodoItemModel, UserModel


# =========================================================================
# Row <-> domain mapping
# =========================================================================

def _user_to_domain(row: UserModel) -> User:
    return User(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        password_salt=row.password_salt,
        is_admin=row.is_admin,
    )


def _todo_to_domain(row: TodoItemModel) -> TodoItem:
    return TodoItem(
        id=row.id,
        title=row.title,
        is_completed=row.is_completed,
        user_id=row.user_id,
    )


def _theme_to_domain(row: ColourThemeModel) -> ColourTheme:
    return ColourTheme(
        id=row.id,
        name=row.name,
        colours=row.colours,
        sys_defined=row.sys_defined,
        is_default=row.is_default,
        is_active=row.is_active,
        user_id=row.user_id,
    )


# =========================================================================
# UserRepository
# =========================================================================

class UserRepository:
    """CRUD operations for :class:`UserModel` (``users``)."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, user: User) -> User:
        row = UserModel(
            username=user.username,
            password_hash=user.password_hash,
            password_salt=user.password_salt,
            is_admin=user.is_admin,
        )
        if user.id is not None:
            row.id = user.id
        self._session.add(row)
        self._session.flush()
        return _user_to_domain(row)

    def get_by_id(self, user_id: int) -> Optional[User]:
        row = self._session.get(UserModel, user_id)
        return _user_to_domain(row) if row is not None else None

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.username == username)
        row = self._session.execute(stmt).scalar_one_or_none()
        return _user_to_domain(row) if row is not None else None

    def list_all(self) -> List[User]:
        stmt = select(UserModel).order_by(UserModel.id)
        return [_user_to_domain(row) for row in self._session.execute(stmt).scalars()]

    def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        return int(self._session.execute(stmt).scalar_one())

    def update(self, user_id: int, *, username: str, is_admin: bool) -> bool:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(username=username, is_admin=is_admin)
        )
        result = self._session.execute(stmt)
        self._session.flush()
        return result.rowcount > 0

    def delete(self, user_id: int) -> bool:
        stmt = delete(UserModel).where(UserModel.id == user_id)
        result = self._session.execute(stmt)
        self._session.flush()
        return result.rowcount > 0


# =========================================================================
# TodoItemRepository
# =========================================================================

class TodoItemRepository:
    """Operations on :class:`TodoItemModel` needed for seeding and cascades."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, item: TodoItem) -> TodoItem:
        row = TodoItemModel(
            title=item.title,
            is_completed=item.is_completed,
            user_id=item.user_id,
        )
        if item.id is not None:
            row.id = item.id
        self._session.add(row)
        self._session.flush()
        return _todo_to_domain(row)

    def list_by_user(self, user_id: int) -> List[TodoItem]:
        stmt = (
            select(TodoItemModel)
            .where(TodoItemModel.user_id == user_id)
            .order_by(TodoItemModel.id)
        )
        return [_todo_to_domain(row) for row in self._session.execute(stmt).scalars()]

    def delete_by_user(self, user_id: int) -> int:
        stmt = delete(TodoItemModel).where(TodoItemModel.user_id == user_id)
        result = self._session.execute(stmt)
        self._session.flush()
        return result.rowcount


# =========================================================================
# ColourThemeRepository
# =========================================================================

class ColourThemeRepository:
    """CRUD operations for :class:`ColourThemeModel` (``colour_themes``)."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, theme: ColourTheme) -> ColourTheme:
        row = ColourThemeModel(
            name=theme.name,
            colours=theme.colours,
            sys_defined=theme.sys_defined,
            is_default=theme.is_default,
            is_active=theme.is_active,
            user_id=theme.user_id,
        )
        if theme.id is not None:
            row.id = theme.id
        self._session.add(row)
        self._session.flush()
        return _theme_to_domain(row)

    def get_by_id(self, theme_id: int) -> Optional[ColourTheme]:
        row = self._session.get(ColourThemeModel, theme_id)
        return _theme_to_domain(row) if row is not None else None

    def list_all(self) -> List[ColourTheme]:
        stmt = select(ColourThemeModel).order_by(ColourThemeModel.id)
        return [_theme_to_domain(row) for row in self._session.execute(stmt).scalars()]

    def count_system_defined(self) -> int:
        stmt = (
            select(func.count())
            .select_from(ColourThemeModel)
            .where(ColourThemeModel.sys_defined.is_(True))
        )
        return int(self._session.execute(stmt).scalar_one())

    def replace(self, theme: ColourTheme) -> bool:
        """Overwrite every column of the row identified by ``theme.id``."""
        stmt = (
            update(ColourThemeModel)
            .where(ColourThemeModel.id == theme.id)
            .values(
                name=theme.name,
                colours=theme.colours,
                sys_defined=theme.sys_defined,
                is_default=theme.is_default,
                is_active=theme.is_active,
                user_id=theme.user_id,
            )
        )
        result = self._session.execute(stmt)
        self._session.flush()
        return result.rowcount > 0

    def clear_default(self, keep_id: Optional[int] = None) -> int:
        """Unset ``is_default`` on every theme except *keep_id*."""
        stmt = update(ColourThemeModel).where(ColourThemeModel.is_default.is_(True))
        if keep_id is not None:
            stmt = stmt.where(ColourThemeModel.id != keep_id)
        result = self._session.execute(stmt.values(is_default=False))
        self._session.flush()
        return result.rowcount

    def delete(self, theme_id: int) -> bool:
        stmt = delete(ColourThemeModel).where(ColourThemeModel.id == theme_id)
        result = self._session.execute(stmt)
        self._session.flush()
        return result.rowcount > 0

    def delete_by_user(self, user_id: int) -> int:
        stmt = delete(ColourThemeModel).where(ColourThemeModel.user_id == user_id)
        result = self._session.execute(stmt)
        self._session.flush()
        return result.rowcount
