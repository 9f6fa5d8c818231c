"""Tests for the SQLAlchemy repositories and unit of work."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from domain.models import ColourTheme, TodoItem, User


class TestUnitOfWork:
    def test_changes_without_commit_are_rolled_back(self, uow_factory):
        with uow_factory() as uow:
            uow.users.add(User(username="transient", password_hash=b"h", password_salt=b"s"))
        with uow_factory() as uow:
            assert uow.users.get_by_username("transient") is None

    def test_commit_persists(self, uow_factory):
        with uow_factory() as uow:
            uow.users.add(User(username="durable", password_hash=b"h", password_salt=b"s"))
            uow.commit()
        with uow_factory() as uow:
            assert uow.users.get_by_username("durable") is not None


class TestUserRepository:
    def test_add_assigns_id(self, uow_factory):
        with uow_factory() as uow:
            user = uow.users.add(User(username="alice", password_hash=b"h", password_salt=b"s"))
        assert user.id is not None

    def test_username_is_unique(self, uow_factory):
        with uow_factory() as uow:
            uow.users.add(User(username="alice", password_hash=b"h", password_salt=b"s"))
            with pytest.raises(IntegrityError):
                uow.users.add(User(username="alice", password_hash=b"h", password_salt=b"s"))

    def test_count_and_list(self, seeded):
        with seeded() as uow:
            assert uow.users.count() == 2
            assert [u.username for u in uow.users.list_all()] == ["AdminUser", "RegularUser"]

    def test_update_and_delete_report_rowcount(self, seeded):
        with seeded() as uow:
            assert uow.users.update(2, username="Renamed", is_admin=True) is True
            assert uow.users.update(999, username="Nobody", is_admin=False) is False
            assert uow.users.delete(999) is False


class TestTodoItemRepository:
    def test_delete_by_user_returns_count(self, seeded):
        with seeded() as uow:
            assert uow.todos.delete_by_user(1) == 2
            assert uow.todos.list_by_user(1) == []

    def test_todo_requires_existing_user(self, uow_factory):
        with uow_factory() as uow:
            with pytest.raises(IntegrityError):
                uow.todos.add(TodoItem(title="orphan", user_id=999))


class TestColourThemeRepository:
    def test_clear_default_keeps_requested_theme(self, seeded):
        with seeded() as uow:
            other = uow.themes.add(ColourTheme(name="Other", is_default=True, user_id=1))
            assert uow.themes.clear_default(keep_id=other.id) == 1
            defaults = [t.id for t in uow.themes.list_all() if t.is_default]
            assert defaults == [other.id]

    def test_replace_unknown_returns_false(self, seeded):
        with seeded() as uow:
            assert uow.themes.replace(ColourTheme(id=999, name="Ghost")) is False

    def test_delete_by_user_spares_system_themes(self, seeded):
        with seeded() as uow:
            uow.themes.add(ColourTheme(name="Mine", user_id=2))
            assert uow.themes.delete_by_user(2) == 1
            assert uow.themes.count_system_defined() == 1


class TestIdentifierAllocation:
    def test_deleted_highest_user_id_is_not_reused(self, seeded):
        with seeded() as uow:
            assert uow.users.delete(2) is True
            uow.commit()
        with seeded() as uow:
            user = uow.users.add(User(username="Newcomer", password_hash=b"h", password_salt=b"s"))
            uow.commit()
        assert user.id == 3

    def test_deleted_highest_theme_id_is_not_reused(self, seeded):
        with seeded() as uow:
            theme = uow.themes.add(ColourTheme(name="Temp", user_id=2))
            uow.commit()
        with seeded() as uow:
            uow.themes.delete(theme.id)
            uow.commit()
        with seeded() as uow:
            again = uow.themes.add(ColourTheme(name="Again", user_id=2))
        assert again.id == theme.id + 1
