"""
Unit tests for the user registry and its DTOs.
"""

import json

import pytest
from pydantic import ValidationError

from card_games.controller import RegistrySnapshot, UserManager, UserRecord, dump_registry, load_registry
from card_games.core.exceptions import UserAlreadyExistsError, UserNotFoundError, UserRegistryError


@pytest.mark.unit
@pytest.mark.fast
class TestUserRecord:

    def test_defaults(self):
        record = UserRecord(username="alice")
        assert record.games_played == 0
        assert record.games_won == 0

    def test_username_is_stripped(self):
        assert UserRecord(username="  alice ").username == "alice"

    @pytest.mark.parametrize("kwargs", [
        {"username": ""},
        {"username": "   "},
        {"username": "a", "games_played": -1},
        {"username": "a", "games_played": 1, "games_won": 2},
    ])
    def test_invalid_records_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            UserRecord(**kwargs)

    def test_duplicate_usernames_rejected_in_snapshot(self):
        with pytest.raises(ValidationError):
            RegistrySnapshot(users=[UserRecord(username="a"), UserRecord(username="a")])

    def test_json_shape(self):
        snapshot = RegistrySnapshot(users=[UserRecord(username="alice", games_played=3, games_won=1)])
        data = json.loads(dump_registry(snapshot))
        assert data["users"] == [{"username": "alice", "games_played": 3, "games_won": 1}]
        assert "exported_at" in data
        assert load_registry(dump_registry(snapshot)).users[0].games_won == 1


@pytest.mark.unit
@pytest.mark.fast
class TestUserManager:

    def test_add_and_get(self):
        manager = UserManager()
        manager.add_user("alice")
        assert manager.has_user("alice")
        assert "alice" in manager
        assert manager.get_user("alice").games_played == 0
        assert manager.usernames() == ["alice"]
        assert len(manager) == 1

    def test_duplicate_user_rejected(self, user_manager):
        with pytest.raises(UserAlreadyExistsError) as exc_info:
            user_manager.add_user("alice")
        assert exc_info.value.username == "alice"
        assert isinstance(exc_info.value, UserRegistryError)

    def test_missing_user(self, user_manager):
        with pytest.raises(UserNotFoundError):
            user_manager.get_user("zed")
        with pytest.raises(UserNotFoundError):
            user_manager.add_games_played("zed", 1)
        with pytest.raises(UserNotFoundError):
            user_manager.add_games_won("zed", 1)

    def test_counters(self, user_manager):
        assert user_manager.add_games_played("alice", 2) == 2
        assert user_manager.add_games_won("alice", 1) == 1
        record = user_manager.get_user("alice")
        assert (record.games_played, record.games_won) == (2, 1)

    def test_counters_cannot_go_negative_or_inconsistent(self, user_manager):
        with pytest.raises(ValueError):
            user_manager.add_games_played("alice", -1)
        with pytest.raises(ValueError):
            user_manager.add_games_won("alice", 1)
        assert user_manager.get_user("alice").games_won == 0

    def test_export_then_import(self, user_manager, tmp_path):
        user_manager.add_games_played("bob", 4)
        user_manager.add_games_won("bob", 3)
        path = tmp_path / "users.json"

        written = user_manager.export_users(path)
        loaded = UserManager.import_users(written)

        assert written == path
        assert loaded.usernames() == user_manager.usernames()
        assert loaded.get_user("bob").games_won == 3

    def test_export_falls_back_to_timestamped_file(self, user_manager, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        target = tmp_path / "missing_dir" / "users.json"

        written = user_manager.export_users(target)

        assert written.name.startswith("users_")
        assert written.suffix == ".json"
        assert written.exists()
        assert UserManager.import_users(written).usernames() == user_manager.usernames()

    def test_import_missing_file_gives_empty_registry(self, tmp_path):
        manager = UserManager.import_users(tmp_path / "nope.json")
        assert len(manager) == 0

    @pytest.mark.parametrize("content", [
        "not json",
        '{"users": [{"username": ""}]}',
        '{"users": [{"username": "a", "games_played": 1, "games_won": 5}]}',
    ])
    def test_import_invalid_file_gives_empty_registry(self, tmp_path, content, caplog):
        path = tmp_path / "users.json"
        path.write_text(content, encoding="utf-8")
        manager = UserManager.import_users(path)
        assert len(manager) == 0
        assert "Could not load registry" in caplog.text

    def test_snapshot_is_a_copy(self, user_manager):
        snapshot = user_manager.snapshot()
        snapshot.users[0].games_played = 10
        assert user_manager.get_user("alice").games_played == 0
