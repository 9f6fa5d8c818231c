"""
SQLAlchemy 2.0+ ORM models for the Todo Platform.

Tables
------
* ``users``         -- registered accounts (unique username)
* ``todo_items``    -- to-do entries, deleted together with their owner
* ``colour_themes`` -- system-defined themes (no owner) and user themes
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------

class Base(DeclarativeBase):
    """Shared declarative base for every ORM model."""
    pass


# ---------------------------------------------------------------------------
# UserModel
# ---------------------------------------------------------------------------

class UserModel(Base):
    """A registered account.  Owns to-do items and custom colour themes."""

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    password_hash: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    password_salt: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    todo_items: Mapped[List["TodoItemModel"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    colour_themes: Mapped[List["ColourThemeModel"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id!r}, username={self.username!r}, is_admin={self.is_admin!r})>"


# ---------------------------------------------------------------------------
# TodoItemModel
# ---------------------------------------------------------------------------

class TodoItemModel(Base):
    """A single to-do entry belonging to exactly one user."""

    __tablename__ = "todo_items"
    __table_args__ = (
        Index("ix_todo_items_user_id", "user_id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    user: Mapped["UserModel"] = relationship(back_populates="todo_items")

    def __repr__(self) -> str:
        return f"<TodoItem(id={self.id!r}, user_id={self.user_id!r}, title={self.title!r})>"


# ---------------------------------------------------------------------------
# ColourThemeModel
# ---------------------------------------------------------------------------

class ColourThemeModel(Base):
    """A named set of UI colours.

    ``colours`` holds the encoded colour data (see
    :mod:`domain.models.colour_theme`).  System-defined rows have no owner.
    """

    __tablename__ = "colour_themes"
    __table_args__ = (
        Index("ix_colour_themes_user_id", "user_id"),
        Index("ix_colour_themes_is_default", "is_default"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    colours: Mapped[str] = mapped_column(Text, nullable=False, default="")
    sys_defined: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
    )

    user: Mapped[Optional["UserModel"]] = relationship(back_populates="colour_themes")

    def __repr__(self) -> str:
        return f"<ColourTheme(id={self.id!r}, name={self.name!r}, user_id={self.user_id!r})>"
