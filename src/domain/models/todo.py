from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TodoItem:
    id: Optional[int] = None
    title: str = ""
    is_completed: bool = False
    user_id: Optional[int] = None
