"""Seed data for a fresh database."""

from __future__ import annotations

import logging
from typing import Callable

from domain.models import ColourSetting, ColourTheme, encode_colours

from .unit_of_work import SqlAlchemyUnitOfWork

logger = logging.getLogger(__name__)

DEFAULT_THEME_NAME = "Default Theme"

DEFAULT_THEME_COLOURS: tuple[ColourSetting, ...] = (
    ColourSetting("--button-bgcolour", "#00796b"),
    ColourSetting("--button-hover-bgcolour", "#004d40"),
    ColourSetting("--button-text-colour", "#ffffff"),
    ColourSetting("--input-bgcolour", "#e0f7fa"),
    ColourSetting("--input-border-colour", "#b2ebf2"),
    ColourSetting("--table-header-bgcolour", "#f1f1db"),
    ColourSetting("--table-border-colour", "#ddd"),
    ColourSetting("--modal-bgcolour", "white"),
    ColourSetting("--modal-overlay-bgcolour", "rgba(0, 0, 0, 0.5)"),
    ColourSetting("--loading-spinner-colour", "#00796b"),
    ColourSetting("--logout-button-bgcolour", "#f56c6c"),
    ColourSetting("--portal-switch-button-bgcolour", "#409EFF"),
)


def default_theme() -> ColourTheme:
    return ColourTheme(
        name=DEFAULT_THEME_NAME,
        colours=encode_colours(DEFAULT_THEME_COLOURS),
        sys_defined=True,
        is_default=True,
    )


def seed_system_themes(uow_factory: Callable[[], SqlAlchemyUnitOfWork]) -> bool:
    """Insert the default system theme unless a system theme already exists.

    Returns ``True`` when a theme was inserted.
    """
    with uow_factory() as uow:
        if uow.themes.count_system_defined() > 0:
            return False
        uow.themes.clear_default()
        theme = uow.themes.add(default_theme())
        uow.commit()
    logger.info("Seeded system colour theme %s (id=%s)", theme.name, theme.id)
    return True
