from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class AuthenticatedCaller:
    """Identity of the user issuing the current request.

    Built once per request by the identity resolver and handed to every
    service operation explicitly.

    Attributes:
        id:       Stored user id, or the ``sub`` claim when the user no longer exists.
        username: Name claim / stored username.
        is_admin: Taken from the stored user record, never from the token alone.
    """

    id: Optional[int]
    username: Optional[str]
    is_admin: bool = False
