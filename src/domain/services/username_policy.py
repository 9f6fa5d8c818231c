from __future__ import annotations

import re

from domain.exceptions import BadInputError

USERNAME_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9_.-]{3,50}$")

USERNAME_REQUIRED = "Username is required."
INVALID_USERNAME_FORMAT = "Invalid username format"


def require_username(username: str | None) -> str:
    cleaned = (username or "").strip()
    if not cleaned:
        raise BadInputError(USERNAME_REQUIRED)
    return cleaned


def validate_username_format(username: str | None) -> str:
    cleaned = require_username(username)
    if USERNAME_PATTERN.fullmatch(cleaned) is None:
        raise BadInputError(INVALID_USERNAME_FORMAT)
    return cleaned
