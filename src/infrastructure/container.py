"""Dependency injection container for the Todo Platform.

Wires together all infrastructure adapters and application services,
exposing factory functions suitable for FastAPI's ``Depends()`` system.
"""

from __future__ import annotations

import logging

from application.services.admin_service import AdminService
from application.services.auth_service import AuthService
from application.services.colour_theme_service import ColourThemeService
from infrastructure.auth.jwt_handler import JWTConfig, JWTHandler
from infrastructure.auth.password_handler import PasswordHandler
from infrastructure.database.engine import (
    build_engine_from_settings,
    build_session_factory,
    init_database,
)
from infrastructure.database.seed import seed_system_themes
from infrastructure.database.unit_of_work import SqlAlchemyUnitOfWorkFactory
from infrastructure.settings import AppSettings, get_settings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Central DI container that owns all service instances."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self.settings = settings or get_settings()

        # Infrastructure adapters
        self.engine = build_engine_from_settings(self.settings)
        self.session_factory = build_session_factory(self.engine)
        self.uow_factory = SqlAlchemyUnitOfWorkFactory(self.session_factory)
        self.password_handler = PasswordHandler()
        self.jwt_handler = JWTHandler(
            secret_key=self.settings.jwt_secret_key,
            config=JWTConfig(
                algorithm=self.settings.jwt_algorithm,
                access_token_expire_minutes=self.settings.jwt_access_token_minutes,
                issuer=self.settings.jwt_issuer,
                audience=self.settings.jwt_audience,
            ),
        )

        # Application services
        self.auth_service = AuthService(
            uow_factory=self.uow_factory,
            password_hasher=self.password_handler,
            token_issuer=self.jwt_handler,
        )
        self.admin_service = AdminService(uow_factory=self.uow_factory)
        self.colour_theme_service = ColourThemeService(uow_factory=self.uow_factory)

        logger.info("ServiceContainer initialized")

    def bootstrap(self) -> None:
        """Create the schema and seed system data."""
        init_database(self.engine)
        if self.settings.seed_system_themes:
            seed_system_themes(self.uow_factory)

    def dispose(self) -> None:
        self.engine.dispose()


# Module-level singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return the global container singleton."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Reset the global container (for testing)."""
    global _container
    if _container is not None:
        _container.dispose()
    _container = None


# ---------------------------------------------------------------------------
# FastAPI dependency factories
# ---------------------------------------------------------------------------


def get_auth_service() -> AuthService:
    return get_container().auth_service


def get_admin_service() -> AdminService:
    return get_container().admin_service


def get_colour_theme_service() -> ColourThemeService:
    return get_container().colour_theme_service


def get_jwt_handler() -> JWTHandler:
    return get_container().jwt_handler
