"""Tests for the JSON key/value store and its path configuration."""

import json
from pathlib import Path

from pagewidgets.environment import storage_path
from pagewidgets.storage import Storage


# --- Storage ---

def test_round_trip(storage):
    assert storage.save("todos", [{"id": 1}])
    assert storage.load("todos") == [{"id": 1}]


def test_keys_are_independent(storage):
    storage.save("a", 1)
    storage.save("b", 2)
    assert storage.load("a") == 1
    assert storage.load("b") == 2


def test_missing_file_loads_none(storage):
    assert not storage.path.exists()
    assert storage.load("contrast-mode") is None


def test_corrupt_file_loads_none(storage):
    storage.path.parent.mkdir(parents=True)
    storage.path.write_text("{not json", encoding="utf-8")
    assert storage.load("todos") is None


def test_save_refuses_to_overwrite_corrupt_file(storage):
    storage.save("todos", [1])
    storage.save("contrast-mode", "high")
    truncated = '{"todos": [1], "contrast-mode": "hi'
    storage.path.write_text(truncated, encoding="utf-8")

    assert storage.save("x", 1) is False
    assert storage.path.read_text(encoding="utf-8") == truncated


def test_save_refuses_to_overwrite_non_object(storage):
    storage.path.parent.mkdir(parents=True)
    storage.path.write_text("[1, 2]", encoding="utf-8")
    assert storage.save("k", "v") is False
    assert storage.path.read_text(encoding="utf-8") == "[1, 2]"


def test_save_keeps_other_keys_and_leaves_no_temp_files(storage):
    storage.save("a", 1)
    storage.save("b", 2)
    assert json.loads(storage.path.read_text(encoding="utf-8")) == {"a": 1, "b": 2}
    assert [p.name for p in storage.path.parent.iterdir()] == ["storage.json"]


def test_unserializable_value_is_refused(storage):
    assert storage.save("bad", object()) is False
    assert storage.load("bad") is None


def test_unwritable_path_returns_false(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    assert Storage(blocker / "storage.json").save("k", 1) is False


# --- Path configuration ---

def test_default_path():
    assert storage_path({}) == Path.home() / ".pagewidgets" / "storage.json"


def test_home_override(tmp_path):
    assert storage_path({"PAGEWIDGETS_HOME": str(tmp_path)}) == tmp_path / "storage.json"


def test_explicit_file_wins(tmp_path):
    env = {"PAGEWIDGETS_HOME": str(tmp_path), "PAGEWIDGETS_STORAGE": str(tmp_path / "x.json")}
    assert storage_path(env) == tmp_path / "x.json"


def test_storage_reads_environment(isolated_home):
    assert Storage().path == isolated_home / "storage.json"
