"""Authentication and identity resolution application service.

Handles user registration, credential validation, access-token issuance, and
turning verified token claims into an :class:`AuthenticatedCaller`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from domain.exceptions import (
    BadInputError,
    InvalidCredentialsError,
    UnauthorizedError,
    UsernameTakenError,
)
from domain.models import AuthenticatedCaller, User
from domain.services.username_policy import validate_username_format

from application.ports import PasswordHasher, TokenIssuer, UnitOfWorkFactory

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

ID_CLAIM = "sub"
NAME_CLAIM = "name"


@dataclass(frozen=True)
class AccessToken:
    """Bearer token handed out after a successful login."""

    token: str
    expires_in: int
    token_type: str = "Bearer"


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class AuthService:
    """Handles registration, authentication, and caller resolution."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self._uow_factory = uow_factory
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer

    # -- public API -------------------------------------------------------

    def register(self, username: str, password: str) -> User:
        """Register a new user.

        The first user registered on an empty platform becomes an
        administrator; everyone after that starts as a regular user.
        """
        username = validate_username_format(username)
        if not password:
            raise BadInputError("Password is required.")

        password_hash, password_salt = self._password_hasher.hash_password(password)

        with self._uow_factory() as uow:
            if uow.users.get_by_username(username) is not None:
                raise UsernameTakenError(username=username)
            is_admin = uow.users.count() == 0
            user = uow.users.add(
                User(
                    username=username,
                    password_hash=password_hash,
                    password_salt=password_salt,
                    is_admin=is_admin,
                )
            )
            uow.commit()

        logger.info("User %s registered (id=%s, admin=%s)", user.username, user.id, user.is_admin)
        return user

    def authenticate(self, username: str, password: str) -> AccessToken:
        """Validate credentials and return a signed access token."""
        with self._uow_factory() as uow:
            user = uow.users.get_by_username((username or "").strip())

        if user is None:
            raise InvalidCredentialsError()
        if not self._password_hasher.verify_password(password, user.password_hash):
            raise InvalidCredentialsError()

        token = self._token_issuer.create_access_token(
            user_id=str(user.id),
            username=user.username,
            is_admin=user.is_admin,
        )
        logger.info("User %s authenticated successfully", user.id)
        return AccessToken(token=token, expires_in=self._token_issuer.access_token_ttl_seconds)

    def resolve_caller(self, claims: Optional[Mapping[str, Any]]) -> AuthenticatedCaller:
        """Build the caller identity from verified token claims.

        Fails closed with :class:`UnauthorizedError` before touching the
        store when neither an id nor a name claim is present.  The admin
        flag always comes from the stored user; a caller whose account no
        longer exists keeps its claimed identity without privileges, and a
        token whose name claim disagrees with the stored username is
        rejected.
        """
        claims = claims or {}
        username: Optional[str] = claims.get(NAME_CLAIM) or None
        user_id = _parse_user_id(claims.get(ID_CLAIM))
        if user_id is None and username is None:
            raise UnauthorizedError()

        with self._uow_factory() as uow:
            if user_id is not None:
                user = uow.users.get_by_id(user_id)
            else:
                user = uow.users.get_by_username(username)

        if user is None:
            return AuthenticatedCaller(id=user_id, username=username, is_admin=False)
        if username is not None and user.username != username:
            # The id now belongs to a different (or renamed) account.
            raise UnauthorizedError("Token identity does not match the stored user.")
        return AuthenticatedCaller(id=user.id, username=user.username, is_admin=user.is_admin)


def _parse_user_id(raw: Any) -> Optional[int]:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise UnauthorizedError("Invalid user id claim.") from exc
