from __future__ import annotations

_PROBLEM_BASE = "https://api.todo-platform.example/problems"


class DomainError(Exception):
    """Base class for all domain-layer exceptions.

    Carries HTTP-mapping metadata so the presentation layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Domain Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type


class BadInputError(DomainError):
    def __init__(self, detail: str = "The request is invalid.") -> None:
        super().__init__(
            detail=detail,
            title="Bad Request",
            status_code=400,
            error_type=f"{_PROBLEM_BASE}/bad-input",
        )


class UnauthorizedError(DomainError):
    def __init__(self, detail: str = "User information is missing.") -> None:
        super().__init__(
            detail=detail,
            title="Unauthorized",
            status_code=401,
            error_type=f"{_PROBLEM_BASE}/unauthorized",
        )


class InvalidCredentialsError(UnauthorizedError):
    def __init__(self, detail: str = "Invalid username or password.") -> None:
        super().__init__(detail=detail)


class ForbiddenError(DomainError):
    def __init__(self, detail: str = "You do not have permission to perform this action.") -> None:
        super().__init__(
            detail=detail,
            title="Forbidden",
            status_code=403,
            error_type=f"{_PROBLEM_BASE}/forbidden",
        )


class UserNotFoundError(DomainError):
    def __init__(self, identifier: str = "") -> None:
        self.identifier = identifier
        super().__init__(
            detail="User not found.",
            title="User Not Found",
            status_code=404,
            error_type=f"{_PROBLEM_BASE}/user-not-found",
        )


class ColourThemeNotFoundError(DomainError):
    def __init__(self, theme_id: int | None = None) -> None:
        self.theme_id = theme_id
        super().__init__(
            detail=f"Colour theme not found: {theme_id}",
            title="Colour Theme Not Found",
            status_code=404,
            error_type=f"{_PROBLEM_BASE}/colour-theme-not-found",
        )


class UsernameTakenError(DomainError):
    def __init__(self, username: str = "") -> None:
        self.username = username
        super().__init__(
            detail=f"Username is already taken: {username}",
            title="Username Conflict",
            status_code=409,
            error_type=f"{_PROBLEM_BASE}/username-conflict",
        )
