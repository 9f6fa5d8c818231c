"""SQLAlchemy-backed unit of work.

One unit of work is one database transaction.  Changes are persisted only by
an explicit :meth:`SqlAlchemyUnitOfWork.commit`; leaving the context without
committing rolls everything back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .repository import ColourThemeRepository, TodoItemRepository, UserRepository

if TYPE_CHECKING:
    from sqlalchemy.orm import Session, sessionmaker


class SqlAlchemyUnitOfWork:
    """Context-managed transaction exposing the three repositories."""

    users: UserRepository
    todos: TodoItemRepository
    themes: ColourThemeRepository

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.users = UserRepository(self._session)
        self.todos = TodoItemRepository(self._session)
        self.themes = ColourThemeRepository(self._session)
        return self

    def __exit__(self, *args: Any) -> None:
        try:
            self.rollback()
        finally:
            if self._session is not None:
                self._session.close()
                self._session = None

    def commit(self) -> None:
        if self._session is not None:
            self._session.commit()

    def rollback(self) -> None:
        if self._session is not None:
            self._session.rollback()


class SqlAlchemyUnitOfWorkFactory:
    """Callable producing a fresh :class:`SqlAlchemyUnitOfWork` per operation."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def __call__(self) -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(self._session_factory)
