"""Integration test fixtures backed by a file-based SQLite database.

Unlike the unit fixtures, every unit of work here gets its own connection, so
concurrent operations compete for the database write lock the same way they
do in a deployed service.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'todo_platform.db'}"


@pytest.fixture
def sync_engine(database_url):
    """Create a synchronous SQLAlchemy engine for integration tests."""
    from infrastructure.database.engine import build_engine, init_database

    engine = build_engine(database_url, busy_timeout=30.0)
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def uow_factory(sync_engine):
    from infrastructure.database.engine import build_session_factory
    from infrastructure.database.unit_of_work import SqlAlchemyUnitOfWorkFactory

    return SqlAlchemyUnitOfWorkFactory(build_session_factory(sync_engine))


@pytest.fixture
def admin_service(uow_factory):
    from application.services.admin_service import AdminService

    return AdminService(uow_factory=uow_factory)


@pytest.fixture
def admin_caller():
    from domain.models import AuthenticatedCaller

    return AuthenticatedCaller(id=1, username="AdminUser", is_admin=True)


@pytest.fixture
def populated(uow_factory):
    """One administrator with two to-do items plus a handful of regular users."""
    from domain.models import TodoItem, User
    from infrastructure.database.seed import seed_system_themes

    with uow_factory() as uow:
        uow.users.add(User(id=1, username="AdminUser", password_hash=b"h", password_salt=b"s", is_admin=True))
        for i in range(2, 7):
            uow.users.add(User(id=i, username=f"user{i}", password_hash=b"h", password_salt=b"s"))
            uow.todos.add(TodoItem(title=f"task for user{i}", user_id=i))
        uow.todos.add(TodoItem(title="first", user_id=1))
        uow.todos.add(TodoItem(title="second", user_id=1))
        uow.commit()
    seed_system_themes(uow_factory)
    return uow_factory
