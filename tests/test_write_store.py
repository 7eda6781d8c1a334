from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scripts import write_store  # noqa: E402


def test_parse_user_spec():
    assert write_store.parse_user_spec("Ana:admin") == ("Ana", "admin")
    assert write_store.parse_user_spec(" Bruno ") == ("Bruno", "user")
    with pytest.raises(ValueError):
        write_store.parse_user_spec(":admin")


def test_build_users_appends_after_existing():
    existing = [{"id": 4, "name": "A", "role": "user"}]
    users = write_store.build_users(existing, ["B", "C:admin"], reset=False)
    assert [(u["id"], u["name"], u["role"]) for u in users] == [
        (4, "A", "user"),
        (5, "B", "user"),
        (6, "C", "admin"),
    ]


def test_build_users_reset_starts_from_seeds():
    users = write_store.build_users([{"id": 9}], [], reset=True)
    assert [u["name"] for u in users] == ["Admin", "User"]


def test_main_writes_file(tmp_path, capsys):
    path = tmp_path / "db.json"
    assert write_store.main(["--path", str(path), "--user", "Ana:admin"]) == 0
    data = json.loads(path.read_text(encoding="utf-8"))
    assert [u["id"] for u in data["users"]] == [1, 2, 3]
    assert "3 users written" in capsys.readouterr().out
