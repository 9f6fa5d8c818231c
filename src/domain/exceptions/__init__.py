from domain.exceptions.errors import (
    BadInputError,
    ColourThemeNotFoundError,
    DomainError,
    ForbiddenError,
    InvalidCredentialsError,
    UnauthorizedError,
    UsernameTakenError,
    UserNotFoundError,
)

__all__ = [
    "BadInputError",
    "ColourThemeNotFoundError",
    "DomainError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "UnauthorizedError",
    "UserNotFoundError",
    "UsernameTakenError",
]
