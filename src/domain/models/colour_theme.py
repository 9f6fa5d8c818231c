"""Colour theme aggregate and the encoding of its colour data.

Colour data is persisted as a single string.  Structured data is encoded as
a JSON list of ``{"colourProperty": ..., "colourValue": ...}`` objects, which
is also the format the default system theme is seeded with.  Any other string
(e.g. ``"red,green"``) is stored verbatim.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class ColourSetting:
    colour_property: str
    colour_value: str


@dataclass
class ColourTheme:
    id: Optional[int] = None
    name: str = ""
    colours: str = ""
    sys_defined: bool = False
    is_default: bool = False
    is_active: bool = False
    user_id: Optional[int] = None


def encode_colours(settings: Iterable[ColourSetting]) -> str:
    """Encode colour settings into the persisted JSON string."""
    return json.dumps(
        [
            {"colourProperty": s.colour_property, "colourValue": s.colour_value}
            for s in settings
        ]
    )


def decode_colours(colours: str) -> list[ColourSetting]:
    """Decode a persisted colour string.

    Returns an empty list when the string is not the JSON encoding produced
    by :func:`encode_colours`.
    """
    try:
        raw = json.loads(colours)
    except ValueError:
        return []
    if not isinstance(raw, list):
        return []
    settings: list[ColourSetting] = []
    for item in raw:
        if not isinstance(item, dict):
            return []
        prop = item.get("colourProperty")
        value = item.get("colourValue")
        if not isinstance(prop, str) or not isinstance(value, str):
            return []
        settings.append(ColourSetting(colour_property=prop, colour_value=value))
    return settings
