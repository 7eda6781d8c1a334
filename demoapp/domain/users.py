"""Domain helpers for user records: seeds, read-time normalization, id parsing."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Mapping, Optional

DEFAULT_NAME = "User"
DEFAULT_ROLE = "user"

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class UserRecord:
    id: Any
    name: Any
    role: Any

    def as_dict(self) -> dict:
        return asdict(self)


SEED_USERS: tuple[UserRecord, ...] = (
    UserRecord(id=1, name="Admin", role="admin"),
    UserRecord(id=2, name="User", role="user"),
)


def seed_users() -> list[dict]:
    """Fresh copies of the two seed records."""
    return [seed.as_dict() for seed in SEED_USERS]


def is_numeric_id(value: Any) -> bool:
    """True for finite int/float values; bools are not ids."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


@dataclass(frozen=True)
class ParsedUser:
    """Per-field parse result of a raw stored entry.

    A field set to ``None`` failed to parse and must be replaced during
    normalization; ``issues`` names those fields in declaration order.
    """

    id: Optional[Any]
    name: Optional[Any]
    role: Optional[Any]

    @property
    def issues(self) -> tuple[str, ...]:
        return tuple(f for f in ("id", "name", "role") if getattr(self, f) is None)


def parse_user(raw: Any) -> ParsedUser:
    """Validate each field of a raw entry independently.

    Entries that are not mappings are treated as having no usable fields.
    """
    data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    user_id = data.get("id")
    name = data.get("name")
    role = data.get("role")
    # Python truthiness: empty lists/dicts count as missing
    return ParsedUser(
        id=user_id if is_numeric_id(user_id) else None,
        name=name if name else None,
        role=role if role and str(role).strip() else None,
    )


def normalize_user(raw: Any, position: int) -> UserRecord:
    """Fill every failed field of ``raw`` with its placeholder.

    ``position`` is the zero-based index of the entry in its source list; a
    missing or non-numeric id becomes ``position + 1`` even if that collides
    with another entry's id.
    """
    parsed = parse_user(raw)
    if parsed.issues:
        logger.debug("User entry at position %d: replaced %s", position, ", ".join(parsed.issues))
    return UserRecord(
        id=parsed.id if parsed.id is not None else position + 1,
        name=parsed.name if parsed.name is not None else DEFAULT_NAME,
        role=parsed.role if parsed.role is not None else DEFAULT_ROLE,
    )


def normalize_users(raw_users: Iterable[Any]) -> list[UserRecord]:
    return [normalize_user(raw, idx) for idx, raw in enumerate(raw_users)]


def next_user_id(users: Iterable[Mapping[str, Any]]) -> Any:
    """``max(existing numeric ids) + 1``, or 1 when there are none."""
    ids = [u.get("id") for u in users if isinstance(u, Mapping)]
    numeric = [i for i in ids if is_numeric_id(i)]
    if not numeric:
        return 1
    return max(numeric) + 1


def parse_user_id(value: str | None) -> Optional[int]:
    """Parse a path segment as a base-10 integer.

    Leading whitespace and trailing garbage are tolerated (``"12abc"`` is 12);
    anything without leading digits yields ``None``, which matches no record.
    """
    match = _LEADING_INT.match(value or "")
    if not match:
        return None
    return int(match.group(1), 10)
