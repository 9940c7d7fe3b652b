"""Tests for the JSON user store and snapshot normalization."""

import json

from server.services import JsonUserStore
from server.services.user_store import FirebaseUserStore


class TestJsonUserStore:
    def test_missing_file_is_empty(self, tmp_path):
        store = JsonUserStore(tmp_path / "data" / "users.json")
        assert store.fetch_all() == {}

    def test_create_persists(self, tmp_path):
        path = tmp_path / "users.json"
        store = JsonUserStore(path)
        store.create("u1", {"username": "alice", "points": 10})
        reloaded = JsonUserStore(path)
        assert reloaded.get_by_id("u1")["username"] == "alice"
        assert json.loads(path.read_text())["users"]["u1"]["points"] == 10

    def test_loads_list_format(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps([{"id": "a", "username": "ann"}, {"uid": "b", "username": "ben"}, {"username": "no-id"}]))
        store = JsonUserStore(path)
        assert sorted(store.fetch_all()) == ["a", "b"]

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text("{broken")
        assert JsonUserStore(path).fetch_all() == {}

    def test_find_by_field(self, tmp_path):
        store = JsonUserStore(tmp_path / "users.json")
        store.create("u1", {"username_lower": "alice"})
        store.create("u2", {"username_lower": "bob"})
        assert list(store.find_by_field("username_lower", "bob")) == ["u2"]
        assert store.find_by_field("username_lower", "carol") == {}

    def test_update(self, tmp_path):
        store = JsonUserStore(tmp_path / "users.json")
        store.create("u1", {"username": "alice", "lastActive": 1})
        updated = store.update("u1", {"lastActive": 2})
        assert updated["lastActive"] == 2
        assert updated["username"] == "alice"
        assert store.update("missing", {"lastActive": 2}) is None

    def test_returns_copies(self, tmp_path):
        store = JsonUserStore(tmp_path / "users.json")
        store.create("u1", {"points": 1})
        store.fetch_all()["u1"]["points"] = 99
        assert store.get_by_id("u1")["points"] == 1


class TestFirebaseSnapshot:
    def test_mapping_snapshot(self):
        assert FirebaseUserStore._as_mapping({"a": {"points": 1}}) == {"a": {"points": 1}}

    def test_array_snapshot_drops_holes(self):
        assert FirebaseUserStore._as_mapping([None, {"points": 1}]) == {"1": {"points": 1}}

    def test_empty_snapshot(self):
        assert FirebaseUserStore._as_mapping(None) == {}
