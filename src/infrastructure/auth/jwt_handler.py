"""
JWT token management for the Todo Platform.

Handles creation, decoding, and verification of HS256-signed JWT access
tokens that carry the caller's id, username and admin flag as claims.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt


@dataclass(frozen=True)
class JWTConfig:
    """Configuration for JWT token generation and validation."""

    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    issuer: str = "todo-platform"
    audience: str = "todo-platform-clients"


class JWTHandler:
    """
    Manages JWT token lifecycle: creation, decoding, and verification.

    A single shared secret signs and verifies tokens; the issuer and audience
    claims are checked on every decode.
    """

    def __init__(
        self,
        secret_key: str,
        config: Optional[JWTConfig] = None,
    ) -> None:
        self._secret_key = secret_key
        self._config = config or JWTConfig()

    @property
    def access_token_ttl_seconds(self) -> int:
        return self._config.access_token_expire_minutes * 60

    # ------------------------------------------------------------------
    # Token creation
    # ------------------------------------------------------------------

    def create_access_token(
        self,
        user_id: str,
        username: str,
        is_admin: bool = False,
        extra_claims: Optional[dict[str, Any]] = None,
    ) -> str:
        """Create an access token carrying identity and admin claims."""

        now = datetime.now(timezone.utc)
        expires = now + timedelta(minutes=self._config.access_token_expire_minutes)

        payload: dict[str, Any] = {
            "sub": user_id,
            "name": username,
            "is_admin": is_admin,
            "iat": now,
            "exp": expires,
            "iss": self._config.issuer,
            "aud": self._config.audience,
            "jti": str(uuid.uuid4()),
        }

        if extra_claims:
            payload.update(extra_claims)

        return jwt.encode(
            payload,
            self._secret_key,
            algorithm=self._config.algorithm,
        )

    # ------------------------------------------------------------------
    # Token consumption
    # ------------------------------------------------------------------

    def decode_token(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a JWT token.

        Raises ``jose.JWTError`` when the token is invalid, expired, or has
        an unexpected issuer or audience.
        """

        claims: dict[str, Any] = jwt.decode(
            token,
            self._secret_key,
            algorithms=[self._config.algorithm],
            issuer=self._config.issuer,
            audience=self._config.audience,
            options={"require_exp": True, "require_iat": True},
        )
        return claims

    def verify_token(self, token: str) -> bool:
        """Return *True* when the token is structurally valid and not expired."""

        try:
            self.decode_token(token)
            return True
        except JWTError:
            return False
