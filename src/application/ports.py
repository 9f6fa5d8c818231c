"""Repository / infrastructure port interfaces (dependency-inversion).

Services only see these protocols.  The SQLAlchemy adapters in
``infrastructure.database`` satisfy them structurally.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from domain.models import ColourTheme, TodoItem, User


class UserRepository(Protocol):
    """Port: persistence operations for :class:`User` records."""

    def add(self, user: User) -> User: ...

    def get_by_id(self, user_id: int) -> Optional[User]: ...

    def get_by_username(self, username: str) -> Optional[User]: ...

    def list_all(self) -> list[User]: ...

    def count(self) -> int: ...

    def update(self, user_id: int, *, username: str, is_admin: bool) -> bool: ...

    def delete(self, user_id: int) -> bool: ...


class TodoItemRepository(Protocol):
    """Port: the to-do operations this service needs (cascade only)."""

    def add(self, item: TodoItem) -> TodoItem: ...

    def list_by_user(self, user_id: int) -> list[TodoItem]: ...

    def delete_by_user(self, user_id: int) -> int: ...


class ColourThemeRepository(Protocol):
    """Port: persistence operations for :class:`ColourTheme` records."""

    def add(self, theme: ColourTheme) -> ColourTheme: ...

    def get_by_id(self, theme_id: int) -> Optional[ColourTheme]: ...

    def list_all(self) -> list[ColourTheme]: ...

    def replace(self, theme: ColourTheme) -> bool: ...

    def clear_default(self, keep_id: Optional[int] = None) -> int: ...

    def delete(self, theme_id: int) -> bool: ...

    def delete_by_user(self, user_id: int) -> int: ...


class UnitOfWork(Protocol):
    """Port: one transactional unit against the store.

    Leaving the context without :meth:`commit` discards every change.
    """

    users: UserRepository
    todos: TodoItemRepository
    themes: ColourThemeRepository

    def __enter__(self) -> UnitOfWork: ...

    def __exit__(self, *args: Any) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    def __call__(self) -> UnitOfWork: ...


class PasswordHasher(Protocol):
    """Port: password hashing."""

    def hash_password(self, plain_password: str) -> tuple[bytes, bytes]: ...

    def verify_password(self, plain_password: str, password_hash: bytes) -> bool: ...


class TokenIssuer(Protocol):
    """Port: bearer token issuance."""

    @property
    def access_token_ttl_seconds(self) -> int: ...

    def create_access_token(
        self,
        user_id: str,
        username: str,
        is_admin: bool = False,
        extra_claims: Optional[dict[str, Any]] = None,
    ) -> str: ...
