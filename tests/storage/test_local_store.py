from __future__ import annotations

import json

from src.personnel_panel.personnel_panel.storage.local_store import JsonFileStore


def test_missing_file_reads_as_empty(tmp_path):
    store = JsonFileStore(tmp_path / "store.json")
    assert store.get_item("a") is None
    assert store.keys() == []


def test_set_get_remove_persist_across_instances(tmp_path):
    path = tmp_path / "nested" / "store.json"
    JsonFileStore(path).set_item("excelTemplates", '["a"]')

    store = JsonFileStore(path)
    assert store.get_item("excelTemplates") == '["a"]'

    store.remove_item("excelTemplates")
    assert JsonFileStore(path).get_item("excelTemplates") is None


def test_writes_leave_no_temp_files(tmp_path):
    store = JsonFileStore(tmp_path / "store.json")
    store.set_item("k", "v")
    store.set_item("k2", "şablon")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["store.json"]
    assert json.loads((tmp_path / "store.json").read_text(encoding="utf-8")) == {"k": "v", "k2": "şablon"}


def test_corrupted_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    store = JsonFileStore(path)
    assert store.get_item("k") is None

    store.set_item("k", "v")
    assert store.get_item("k") == "v"


def test_removing_missing_key_is_noop(tmp_path):
    store = JsonFileStore(tmp_path / "store.json")
    store.remove_item("nope")
    assert not (tmp_path / "store.json").exists()
