from domain.models.caller import AuthenticatedCaller
from domain.models.colour_theme import ColourSetting, ColourTheme, decode_colours, encode_colours
from domain.models.todo import TodoItem
from domain.models.user import User

__all__ = [
    "AuthenticatedCaller",
    "ColourSetting",
    "ColourTheme",
    "TodoItem",
    "User",
    "decode_colours",
    "encode_colours",
]
