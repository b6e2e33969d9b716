"""Unit tests for key-value stores."""

from .store import FileKeyValueStore, MemoryKeyValueStore


class TestMemoryKeyValueStore:
    def test_get_missing_returns_none(self):
        assert MemoryKeyValueStore().get("missing") is None

    def test_set_then_get(self):
        store = MemoryKeyValueStore()
        store.set("k", "[1, 2]")
        assert store.get("k") == "[1, 2]"
        assert "k" in store

    def test_delete(self):
        store = MemoryKeyValueStore({"k": "v"})
        store.delete("k")
        assert store.get("k") is None

    def test_delete_missing_is_noop(self):
        MemoryKeyValueStore().delete("nothing")


class TestFileKeyValueStore:
    def test_get_missing_returns_none(self, tmp_path):
        assert FileKeyValueStore(tmp_path).get("history") is None

    def test_set_creates_directory(self, tmp_path):
        directory = tmp_path / "nested" / "store"
        store = FileKeyValueStore(directory)

        store.set("history", '["a"]')

        assert (directory / "history.json").read_text(encoding="utf-8") == '["a"]'
        assert store.get("history") == '["a"]'

    def test_overwrite_leaves_no_temp_file(self, tmp_path):
        store = FileKeyValueStore(tmp_path)
        store.set("history", "one")
        store.set("history", "two")

        assert store.get("history") == "two"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["history.json"]

    def test_unicode_round_trip(self, tmp_path):
        store = FileKeyValueStore(tmp_path)
        store.set("history", "नमस्ते")
        assert store.get("history") == "नमस्ते"

    def test_delete(self, tmp_path):
        store = FileKeyValueStore(tmp_path)
        store.set("history", "x")
        store.delete("history")
        assert store.get("history") is None
        store.delete("history")  # second delete is fine

    def test_key_is_sanitized(self, tmp_path):
        store = FileKeyValueStore(tmp_path)
        assert store.path_for("../evil key").parent == tmp_path
        assert store.path_for("../evil key").name == ".._evil_key.json"
