"""In-memory record set owned by the user service for the process lifetime."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional

from demoapp.domain.users import is_numeric_id, next_user_id
from demoapp.repositories.json_storage import load_initial_users


class UserStore:
    """Mutable list of raw user entries.

    Entries seeded from the backing file are kept exactly as read, so ids
    are only guaranteed unique among records created here.
    """

    def __init__(self, users: Optional[Iterable[dict]] = None) -> None:
        self._users: list = list(users or [])

    @classmethod
    def from_file(cls, path: Path) -> "UserStore":
        return cls(load_initial_users(path))

    def __len__(self) -> int:
        return len(self._users)

    def snapshot(self) -> list:
        """Shallow copy of the current entries, in insertion order."""
        return list(self._users)

    def next_id(self) -> Any:
        return next_user_id(self._users)

    def append(self, user: dict) -> dict:
        self._users.append(user)
        return user

    def index_of(self, user_id: Optional[int]) -> int:
        if user_id is None:
            return -1
        for idx, user in enumerate(self._users):
            candidate = user.get("id") if isinstance(user, dict) else None
            if is_numeric_id(candidate) and candidate == user_id:
                return idx
        return -1

    def remove(self, user_id: Optional[int]) -> Optional[dict]:
        """Remove the first entry whose id equals ``user_id``; ``None`` if absent."""
        idx = self.index_of(user_id)
        if idx == -1:
            return None
        return self._users.pop(idx)
