"""Concurrent administrative operations against a shared database."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from domain.exceptions import UserNotFoundError


def _race(fn, args_list):
    """Run *fn* for every args tuple at (nearly) the same moment."""
    barrier = threading.Barrier(len(args_list))

    def run(args):
        barrier.wait()
        try:
            fn(*args)
        except Exception as exc:
            return exc
        return None

    with ThreadPoolExecutor(max_workers=len(args_list)) as pool:
        return list(pool.map(run, args_list))


@pytest.mark.integration
class TestConcurrentDelete:

    def test_exactly_one_of_two_deletes_succeeds(self, admin_service, admin_caller, populated):
        outcomes = _race(admin_service.delete_user, [(admin_caller, "user3"), (admin_caller, "user3")])

        successes = [o for o in outcomes if o is None]
        failures = [o for o in outcomes if o is not None]
        assert len(successes) == 1
        assert len(failures) == 1
        assert isinstance(failures[0], UserNotFoundError)

        with populated() as uow:
            assert uow.users.get_by_username("user3") is None
            assert uow.todos.list_by_user(3) == []

    def test_deletes_of_different_users_all_succeed(self, admin_service, admin_caller, populated):
        names = ["user2", "user3", "user4", "user5"]
        outcomes = _race(admin_service.delete_user, [(admin_caller, n) for n in names])

        assert outcomes == [None] * len(names)
        with populated() as uow:
            assert [u.username for u in uow.users.list_all()] == ["AdminUser", "user6"]


@pytest.mark.integration
class TestConcurrentUpdate:

    def test_updates_of_distinct_users_all_persist(self, admin_service, admin_caller, populated):
        args = [(admin_caller, i, f"renamed{i}", i % 2 == 0) for i in range(2, 7)]
        outcomes = _race(admin_service.update_user, args)

        assert outcomes == [None] * len(args)
        with populated() as uow:
            for i in range(2, 7):
                user = uow.users.get_by_id(i)
                assert user.username == f"renamed{i}"
                assert user.is_admin is (i % 2 == 0)

    def test_update_racing_delete_never_resurrects_user(self, admin_service, admin_caller, populated):
        outcomes = _race(
            lambda op, *a: op(*a),
            [
                (admin_service.delete_user, admin_caller, "user4"),
                (admin_service.update_user, admin_caller, 4, "user4", True),
            ],
        )

        assert outcomes[0] is None
        assert outcomes[1] is None or isinstance(outcomes[1], UserNotFoundError)
        with populated() as uow:
            assert uow.users.get_by_id(4) is None
