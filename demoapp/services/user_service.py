"""User listing, creation and deletion over the in-memory store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from starlette.concurrency import run_in_threadpool

from demoapp.domain.users import DEFAULT_NAME, DEFAULT_ROLE, UserRecord, normalize_users
from demoapp.repositories.json_storage import read_users
from demoapp.repositories.memory_store import UserStore

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base exception for user workflows."""


class UserNotFoundError(UserServiceError):
    """Raised when no record carries the requested id."""


def _coerce_text(value: Any, default: str) -> Any:
    if not value:
        return default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class UserService:
    """Serves the user list from the backing file or, failing that, from memory.

    Create and delete only touch the in-memory store. While the backing file
    holds a non-empty ``users`` array, list responses come from the file, so
    records created here do not show up there and deleted ones may still be
    listed. This precedence is kept on purpose for client compatibility.
    """

    def __init__(self, store: UserStore, store_path: Path) -> None:
        self.store = store
        self.store_path = Path(store_path)

    async def list_users(self) -> list[UserRecord]:
        file_users = await run_in_threadpool(read_users, self.store_path)
        source = file_users if file_users is not None else self.store.snapshot()
        return normalize_users(source)

    def create_user(self, name: Any = None, role: Any = None) -> UserRecord:
        record = UserRecord(
            id=self.store.next_id(),
            name=_coerce_text(name, DEFAULT_NAME),
            role=_coerce_text(role, DEFAULT_ROLE),
        )
        self.store.append(record.as_dict())
        logger.info("Created user %s (%s)", record.id, record.role)
        return record

    def delete_user(self, user_id: Optional[int]) -> None:
        removed = self.store.remove(user_id)
        if removed is None:
            logger.info("Delete requested for unknown user id %r", user_id)
            raise UserNotFoundError(f"User {user_id!r} not found")
        logger.info("Deleted user %s", user_id)

    def debug_snapshot(self) -> dict:
        return {"filePath": str(self.store_path), "users": self.store.snapshot()}
