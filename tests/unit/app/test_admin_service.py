"""Unit tests for AdminService: list, delete with cascade, update."""

from __future__ import annotations

import pytest

from domain.exceptions import (
    BadInputError,
    ForbiddenError,
    UsernameTakenError,
    UserNotFoundError,
)
from domain.models import ColourTheme


class TestListUsers:
    def test_lists_all_users_ordered_by_id(self, admin_service, admin_caller, seeded):
        users = admin_service.list_users(admin_caller)
        assert [(u.id, u.username, u.is_admin) for u in users] == [
            (1, "AdminUser", True),
            (2, "RegularUser", False),
        ]

    def test_empty_store_returns_empty_list(self, admin_service, admin_caller):
        assert admin_service.list_users(admin_caller) == []
        assert admin_service.list_usernames(admin_caller) == []

    def test_list_usernames(self, admin_service, admin_caller, seeded):
        assert admin_service.list_usernames(admin_caller) == ["AdminUser", "RegularUser"]

    def test_requires_admin(self, admin_service, regular_caller, seeded):
        with pytest.raises(ForbiddenError):
            admin_service.list_users(regular_caller)


class TestDeleteUser:
    def test_delete_admin_user_cascades_todo_items(self, admin_service, admin_caller, seeded):
        with seeded() as uow:
            assert len(uow.todos.list_by_user(1)) == 2

        admin_service.delete_user(admin_caller, "AdminUser")

        with seeded() as uow:
            assert uow.todos.list_by_user(1) == []
            assert uow.users.get_by_id(1) is None
            # Other users are untouched
            assert uow.users.get_by_id(2) is not None

    def test_second_delete_is_not_found(self, admin_service, admin_caller, seeded):
        admin_service.delete_user(admin_caller, "RegularUser")
        with pytest.raises(UserNotFoundError):
            admin_service.delete_user(admin_caller, "RegularUser")

    @pytest.mark.parametrize("username", ["nobody", "adminuser", "Admin User"])
    def test_unknown_username_is_not_found(self, admin_service, admin_caller, seeded, username):
        with pytest.raises(UserNotFoundError):
            admin_service.delete_user(admin_caller, username)

    @pytest.mark.parametrize("username", ["", "   "])
    def test_blank_username_is_bad_input(self, admin_service, admin_caller, seeded, username):
        with pytest.raises(BadInputError, match="Username is required"):
            admin_service.delete_user(admin_caller, username)

    def test_deletes_users_own_themes_but_not_system_themes(
        self, admin_service, admin_caller, seeded
    ):
        with seeded() as uow:
            uow.themes.add(ColourTheme(name="Mine", colours="red", user_id=2))
            uow.commit()

        admin_service.delete_user(admin_caller, "RegularUser")

        with seeded() as uow:
            themes = uow.themes.list_all()
        assert [t.name for t in themes] == ["Default Theme"]

    def test_requires_admin(self, admin_service, regular_caller, seeded):
        with pytest.raises(ForbiddenError):
            admin_service.delete_user(regular_caller, "AdminUser")
        with seeded() as uow:
            assert uow.users.get_by_id(1) is not None


class TestUpdateUser:
    def test_persists_name_and_flag(self, admin_service, admin_caller, seeded):
        updated = admin_service.update_user(admin_caller, 2, "Promoted", True)
        assert updated.username == "Promoted"
        assert updated.is_admin is True

        with seeded() as uow:
            stored = uow.users.get_by_id(2)
        assert stored.username == "Promoted"
        assert stored.is_admin is True

    def test_keeping_own_name_is_allowed(self, admin_service, admin_caller, seeded):
        admin_service.update_user(admin_caller, 2, "RegularUser", True)
        with seeded() as uow:
            assert uow.users.get_by_id(2).is_admin is True

    @pytest.mark.parametrize("user_id", [1, 2, 999])
    @pytest.mark.parametrize("flag", [True, False])
    def test_empty_username_always_bad_input(self, admin_service, admin_caller, seeded, user_id, flag):
        with pytest.raises(BadInputError):
            admin_service.update_user(admin_caller, user_id, "", flag)

    def test_invalid_format_is_bad_input(self, admin_service, admin_caller, seeded):
        with pytest.raises(BadInputError, match="Invalid username format"):
            admin_service.update_user(admin_caller, 2, "no spaces allowed", False)

    def test_unknown_id_is_not_found(self, admin_service, admin_caller, seeded):
        with pytest.raises(UserNotFoundError):
            admin_service.update_user(admin_caller, 999, "Someone", False)

    def test_taken_username_conflicts(self, admin_service, admin_caller, seeded):
        with pytest.raises(UsernameTakenError):
            admin_service.update_user(admin_caller, 2, "AdminUser", False)
        with seeded() as uow:
            assert uow.users.get_by_id(2).username == "RegularUser"

    def test_requires_admin(self, admin_service, regular_caller, seeded):
        with pytest.raises(ForbiddenError):
            admin_service.update_user(regular_caller, 2, "SelfPromoted", True)
