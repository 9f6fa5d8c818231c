"""Application service for colour theme management.

Themes are either system-defined (no owner) or owned by a user.  Any
authenticated caller may create, replace or delete any theme.  Updates are
full-record replacements: the caller sends the complete theme and every
column is overwritten.

At most one theme is the default.  Marking a theme default clears the flag
on all other themes in the same transaction.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from domain.exceptions import BadInputError, ColourThemeNotFoundError
from domain.models import AuthenticatedCaller, ColourTheme

from application.ports import UnitOfWork, UnitOfWorkFactory

logger = logging.getLogger(__name__)


class ColourThemeService:
    """CRUD over colour themes on behalf of an authenticated caller."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    # -- helpers ----------------------------------------------------------

    @staticmethod
    def _normalise(caller: AuthenticatedCaller, theme: ColourTheme) -> ColourTheme:
        """Validate an incoming record and fill in its owner."""
        name = (theme.name or "").strip()
        if not name:
            raise BadInputError("Theme name is required.")
        if theme.sys_defined and theme.user_id is not None:
            raise BadInputError("System-defined themes cannot have an owner.")

        user_id = theme.user_id
        if not theme.sys_defined and user_id is None:
            if caller.id is None:
                raise BadInputError("Theme owner could not be determined.")
            user_id = caller.id
        return replace(theme, name=name, user_id=user_id)

    @staticmethod
    def _ensure_owner_exists(uow: UnitOfWork, user_id: Optional[int]) -> None:
        if user_id is not None and uow.users.get_by_id(user_id) is None:
            raise BadInputError("Theme owner does not exist.")

    # -- public API -------------------------------------------------------

    def list_themes(self, caller: AuthenticatedCaller) -> list[ColourTheme]:
        """Return every theme, system-defined and user-owned, ordered by id."""
        with self._uow_factory() as uow:
            return uow.themes.list_all()

    def get_theme(self, caller: AuthenticatedCaller, theme_id: int) -> ColourTheme:
        with self._uow_factory() as uow:
            theme = uow.themes.get_by_id(theme_id)
        if theme is None:
            raise ColourThemeNotFoundError(theme_id=theme_id)
        return theme

    def create_theme(self, caller: AuthenticatedCaller, draft: ColourTheme) -> ColourTheme:
        """Persist a new theme; any id on *draft* is ignored."""
        theme = self._normalise(caller, replace(draft, id=None))

        with self._uow_factory() as uow:
            self._ensure_owner_exists(uow, theme.user_id)
            if theme.is_default:
                uow.themes.clear_default()
            created = uow.themes.add(theme)
            uow.commit()

        logger.info("Colour theme %s created (id=%s, owner=%s)", created.name, created.id, created.user_id)
        return created

    def replace_theme(
        self,
        caller: AuthenticatedCaller,
        theme_id: int,
        replacement: ColourTheme,
    ) -> ColourTheme:
        """Overwrite theme *theme_id* with *replacement*.

        A replacement without an id targets *theme_id*; one whose id differs
        is rejected before the store is touched.
        """
        if replacement.id is not None and replacement.id != theme_id:
            raise BadInputError(
                f"Theme id in the body ({replacement.id}) does not match the target id ({theme_id})."
            )
        theme = self._normalise(caller, replace(replacement, id=theme_id))

        with self._uow_factory() as uow:
            existing = uow.themes.get_by_id(theme_id)
            if existing is None:
                raise ColourThemeNotFoundError(theme_id=theme_id)
            self._ensure_owner_exists(uow, theme.user_id)
            if theme.is_default:
                uow.themes.clear_default(keep_id=theme_id)
            if not uow.themes.replace(theme):
                raise ColourThemeNotFoundError(theme_id=theme_id)
            uow.commit()

        logger.info("Colour theme %s replaced by %s", theme_id, caller.username)
        return theme

    def delete_theme(self, caller: AuthenticatedCaller, theme_id: int) -> None:
        with self._uow_factory() as uow:
            if not uow.themes.delete(theme_id):
                raise ColourThemeNotFoundError(theme_id=theme_id)
            uow.commit()

        logger.info("Colour theme %s deleted by %s", theme_id, caller.username)
