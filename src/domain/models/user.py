from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class User:
    id: Optional[int] = None
    username: str = ""
    password_hash: bytes = field(default=b"", repr=False)
    password_salt: bytes = field(default=b"", repr=False)
    is_admin: bool = False
