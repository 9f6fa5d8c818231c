"""
Password hashing using Argon2id.

Each password gets its own random salt.  The salt is embedded in the encoded
Argon2 hash and is also returned separately so the user record can store it
next to the hash.
"""

from __future__ import annotations

import secrets

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

SALT_BYTES: int = 16


class PasswordHandler:
    """
    Thin wrapper around argon2-cffi configured with secure defaults.

    Parameters mirror OWASP recommendations for interactive logins:
    - time_cost=3        (iterations)
    - memory_cost=65536  (64 MiB)
    - parallelism=4      (threads)
    """

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ) -> None:
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=Type.ID,  # Argon2id
        )

    def hash_password(self, plain_password: str) -> tuple[bytes, bytes]:
        """
        Hash *plain_password* with a fresh random salt.

        Returns ``(encoded_hash, salt)``.  The encoded hash is the standard
        Argon2id string (UTF-8 bytes) and is sufficient on its own for
        verification.
        """
        salt = secrets.token_bytes(SALT_BYTES)
        encoded = self._hasher.hash(plain_password, salt=salt)
        return encoded.encode("utf-8"), salt

    def verify_password(self, plain_password: str, password_hash: bytes) -> bool:
        """
        Verify *plain_password* against *password_hash*.

        Returns ``True`` on match, ``False`` on mismatch or when the hash is
        malformed.
        """
        try:
            return self._hasher.verify(password_hash.decode("utf-8"), plain_password)
        except (VerifyMismatchError, VerificationError, InvalidHashError, UnicodeDecodeError):
            return False
