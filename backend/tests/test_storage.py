import pytest

from nutrisnap.client.storage import JsonFileStore, StorageError


def test_missing_file_reads_as_empty(tmp_path):
    store = JsonFileStore(tmp_path / "nested" / "store.json")
    assert store.get_item("k") is None


def test_set_get_remove(tmp_path):
    store = JsonFileStore(tmp_path / "nested" / "store.json")
    store.set_item("k", "v1")
    store.set_item("other", "x")
    store.set_item("k", "v2")
    assert JsonFileStore(store.path).get_item("k") == "v2"

    store.remove_item("k")
    assert store.get_item("k") is None
    assert store.get_item("other") == "x"


def test_remove_missing_key_is_noop(tmp_path):
    store = JsonFileStore(tmp_path / "store.json")
    store.remove_item("k")
    assert not store.path.exists()


def test_corrupt_file_raises(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).get_item("k")


def test_non_object_file_raises_on_read(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).get_item("k")


def test_write_replaces_unreadable_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{torn", encoding="utf-8")
    store = JsonFileStore(path)

    store.set_item("k", "v")

    assert store.get_item("k") == "v"


def test_remove_from_unreadable_file_does_not_raise(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{torn", encoding="utf-8")
    JsonFileStore(path).remove_item("k")


def test_non_string_value_raises(tmp_path):
    path = tmp_path / "store.json"
    path.write_text('{"k": [1, 2]}', encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).get_item("k")
