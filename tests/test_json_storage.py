"""
Store loading and live re-read against temporary JSON files.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

# Make the demoapp package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from demoapp.repositories import json_storage  # noqa: E402
from demoapp.repositories.json_storage import load_initial_users, read_users, write_users  # noqa: E402

SEEDS = [
    {"id": 1, "name": "Admin", "role": "admin"},
    {"id": 2, "name": "User", "role": "user"},
]


@pytest.fixture()
def store_file(tmp_path):
    path = tmp_path / "database" / "db.json"
    path.parent.mkdir()
    return path


def _write(path: Path, document) -> None:
    path.write_text(json.dumps(document), encoding="utf-8")


def test_missing_file_yields_seed_users(store_file):
    assert load_initial_users(store_file) == SEEDS


def test_empty_users_array_is_padded_with_seeds(store_file):
    _write(store_file, {"users": []})
    assert load_initial_users(store_file) == SEEDS


def test_single_entry_is_kept_and_second_slot_synthesized(store_file):
    _write(store_file, {"users": [{"id": 5, "name": "X", "role": "y"}]})
    assert load_initial_users(store_file) == [
        {"id": 5, "name": "X", "role": "y"},
        {"id": 2, "name": "User", "role": "user"},
    ]


def test_only_first_two_entries_are_kept_verbatim(store_file):
    entries = [
        {"id": "a", "name": "", "role": "  ", "extra": True},
        {"name": "NoId"},
        {"id": 3, "name": "Dropped", "role": "user"},
    ]
    _write(store_file, {"users": entries})
    assert load_initial_users(store_file) == entries[:2]


@pytest.mark.parametrize("document", [["not", "an", "object"], {"users": "nope"}, {"people": []}, None])
def test_unexpected_document_shapes_fall_back_to_seeds(store_file, document):
    _write(store_file, document)
    assert load_initial_users(store_file) == SEEDS


def test_malformed_file_logs_and_falls_back(store_file, caplog):
    store_file.write_text("{ not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger=json_storage.__name__):
        users = load_initial_users(store_file)
    assert users == SEEDS
    assert any("Could not load store file" in r.getMessage() for r in caplog.records)


def test_seed_copies_are_independent(store_file):
    first = load_initial_users(store_file)
    first[0]["name"] = "Changed"
    assert load_initial_users(store_file)[0]["name"] == "Admin"


def test_read_users_returns_none_when_no_usable_data(store_file):
    assert read_users(store_file) is None
    _write(store_file, {"users": []})
    assert read_users(store_file) is None
    store_file.write_text("[", encoding="utf-8")
    assert read_users(store_file) is None


def test_read_users_returns_whole_array(store_file):
    entries = [{"id": i, "name": f"U{i}", "role": "user"} for i in range(1, 5)]
    _write(store_file, {"users": entries})
    assert read_users(store_file) == entries


def test_write_users_creates_parent_dirs(tmp_path):
    path = tmp_path / "nested" / "db.json"
    write_users(path, SEEDS)
    assert json.loads(path.read_text(encoding="utf-8")) == {"users": SEEDS}


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity", "1e999"])
def test_non_finite_numbers_are_parse_failures(store_file, literal):
    store_file.write_text('{"users": [{"id": 1, "name": %s, "role": "admin"}]}' % literal, encoding="utf-8")
    assert load_initial_users(store_file) == SEEDS
    assert read_users(store_file) is None


def test_unreadable_parent_falls_back_to_seeds(store_file, monkeypatch):
    def _denied(self, *args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "exists", _denied)
    assert load_initial_users(store_file) == SEEDS
    assert read_users(store_file) is None
