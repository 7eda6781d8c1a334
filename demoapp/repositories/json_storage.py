"""
JSON file adapter for the backing user list.

The file layout is ``{"users": [{"id": 1, "name": "...", "role": "..."}]}``.
The running service only ever reads it: once at startup through
``load_initial_users`` and again on every list request through
``read_users``. ``write_users`` exists for the maintenance script.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional
import json
import logging
import math

from demoapp.domain.users import SEED_USERS, seed_users

logger = logging.getLogger(__name__)

SEED_COUNT = len(SEED_USERS)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name}")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def _read_document(path: Path) -> Any:
    # NaN, Infinity and overflowing numbers cannot be served back as JSON
    with path.open("r", encoding="utf-8") as f:
        return json.load(f, parse_constant=_reject_constant, parse_float=_finite_float)


def _users_array(document: Any) -> list:
    if isinstance(document, dict) and isinstance(document.get("users"), list):
        return document["users"]
    return []


def load_initial_users(path: Path) -> list:
    """Build the startup record set from ``path``.

    The first two file entries are kept verbatim; missing slots are filled
    with the seed record for that position. Entries past the second are
    dropped. Any read or parse failure yields the two seeds.
    """
    path = Path(path)
    try:
        if not path.exists():
            logger.info("Store file %s not found, using seed users", path)
            return seed_users()
        document = _read_document(path)
    except (OSError, ValueError):
        logger.exception("Could not load store file %s, using seed users", path)
        return seed_users()

    users = list(_users_array(document)[:SEED_COUNT])
    while len(users) < SEED_COUNT:
        users.append(SEED_USERS[len(users)].as_dict())
    return users


def read_users(path: Path) -> Optional[list]:
    """Re-read the file's ``users`` array.

    Returns ``None`` when the file is missing, unreadable, malformed or its
    array is empty, so callers can fall back to in-memory state.
    """
    path = Path(path)
    try:
        if not path.exists():
            return None
        document = _read_document(path)
    except (OSError, ValueError):
        logger.exception("Error re-reading store file %s", path)
        return None
    users = _users_array(document)
    return users or None


def write_users(path: Path, users: list) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"users": users}, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
