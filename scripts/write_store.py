#!/usr/bin/env python3
"""
Write or extend the JSON file the API seeds its user list from.

The running service never writes this file; use this script to prepare it
before starting the server.

Usage:
  python scripts/write_store.py [--path database/db.json] [--reset] [--user Ana:admin --user Bruno]
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from demoapp.core.config import get_settings
from demoapp.domain.users import DEFAULT_ROLE, next_user_id, seed_users
from demoapp.repositories.json_storage import read_users, write_users


def parse_user_spec(spec: str) -> tuple[str, str]:
    """``"name:role"`` -> (name, role); the role part is optional."""
    name, _, role = (spec or "").partition(":")
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid user spec {spec!r}: name is required")
    return name, (role.strip() or DEFAULT_ROLE)


def build_users(existing: list | None, specs: list[str], *, reset: bool) -> list:
    users = seed_users() if reset or not existing else list(existing)
    for spec in specs:
        name, role = parse_user_spec(spec)
        users.append({"id": next_user_id(users), "name": name, "role": role})
    return users


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Write the users JSON store")
    ap.add_argument("--path", help="Store file (default: STORE_PATH or database/db.json)")
    ap.add_argument("--reset", action="store_true", help="Start from the two seed users")
    ap.add_argument("--user", action="append", default=[], metavar="NAME[:ROLE]", help="Append a user (repeatable)")
    args = ap.parse_args(argv)

    path = Path(args.path) if args.path else get_settings().store_path
    users = build_users(read_users(path), args.user, reset=args.reset)
    write_users(path, users)
    print(f"OK: {len(users)} users written to {path}")
    print(json.dumps({"users": users}, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
