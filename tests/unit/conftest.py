"""Shared fixtures for unit tests.

Every test gets a fresh in-memory SQLite database holding one administrator
("AdminUser", id 1) with two to-do items, one regular user and the seeded
system colour theme (id 1).
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from application.services.admin_service import AdminService
from application.services.auth_service import AuthService
from application.services.colour_theme_service import ColourThemeService
from domain.models import AuthenticatedCaller, TodoItem, User
from infrastructure.auth.jwt_handler import JWTConfig, JWTHandler
from infrastructure.auth.password_handler import PasswordHandler
from infrastructure.database.engine import build_engine, build_session_factory, init_database
from infrastructure.database.seed import seed_system_themes
from infrastructure.database.unit_of_work import SqlAlchemyUnitOfWorkFactory

ADMIN_ID = 1
ADMIN_NAME = "AdminUser"
REGULAR_ID = 2
REGULAR_NAME = "RegularUser"
DEFAULT_THEME_ID = 1
JWT_SECRET = "unit-test-secret"


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def uow_factory(engine) -> SqlAlchemyUnitOfWorkFactory:
    return SqlAlchemyUnitOfWorkFactory(build_session_factory(engine))


@pytest.fixture
def password_handler() -> PasswordHandler:
    # Use lower cost for fast tests
    return PasswordHandler(time_cost=1, memory_cost=16384, parallelism=1)


@pytest.fixture
def jwt_handler() -> JWTHandler:
    return JWTHandler(secret_key=JWT_SECRET, config=JWTConfig())


@pytest.fixture
def seeded(uow_factory, password_handler):
    """Populate the store and return the factory for convenience."""
    password_hash, password_salt = password_handler.hash_password("admin-pass")
    with uow_factory() as uow:
        uow.users.add(
            User(
                id=ADMIN_ID,
                username=ADMIN_NAME,
                password_hash=password_hash,
                password_salt=password_salt,
                is_admin=True,
            )
        )
        uow.users.add(
            User(
                id=REGULAR_ID,
                username=REGULAR_NAME,
                password_hash=password_hash,
                password_salt=password_salt,
                is_admin=False,
            )
        )
        uow.todos.add(TodoItem(title="Buy milk", user_id=ADMIN_ID))
        uow.todos.add(TodoItem(title="Walk the dog", user_id=ADMIN_ID, is_completed=True))
        uow.commit()
    seed_system_themes(uow_factory)
    return uow_factory


@pytest.fixture
def admin_caller() -> AuthenticatedCaller:
    return AuthenticatedCaller(id=ADMIN_ID, username=ADMIN_NAME, is_admin=True)


@pytest.fixture
def regular_caller() -> AuthenticatedCaller:
    return AuthenticatedCaller(id=REGULAR_ID, username=REGULAR_NAME, is_admin=False)


@pytest.fixture
def auth_service(uow_factory, password_handler, jwt_handler) -> AuthService:
    return AuthService(
        uow_factory=uow_factory,
        password_hasher=password_handler,
        token_issuer=jwt_handler,
    )


@pytest.fixture
def admin_service(uow_factory) -> AdminService:
    return AdminService(uow_factory=uow_factory)


@pytest.fixture
def theme_service(uow_factory) -> ColourThemeService:
    return ColourThemeService(uow_factory=uow_factory)
