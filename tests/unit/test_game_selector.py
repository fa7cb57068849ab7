"""
Unit tests for GameSelector.
"""

import pytest

from conftest import RecordingOutput, ScriptedInput
from card_games.controller import INVALID_SELECTION, GameSelector, UserManager
from card_games.core import GameConfig
from card_games.variants import VariantFactory


def make_selector(selector_input, games=None, user_manager=None):
    game_output = RecordingOutput()
    menu_output = RecordingOutput()
    selector = GameSelector(
        selector_input,
        menu_output,
        games or VariantFactory.available_variants(),
        user_manager if user_manager is not None else UserManager(),
        selector_input,
        game_output,
        config=GameConfig.quick_game(),
    )
    return selector, menu_output


@pytest.mark.unit
class TestGameSelector:

    def test_menu_lines(self):
        selector, _ = make_selector(ScriptedInput())
        assert selector.menu_lines() == ["[1] CRAZY EIGHTS", "[2] WAR", "[3] GO FISH", "[0] EXIT"]

    def test_exit_immediately(self):
        selector, output = make_selector(ScriptedInput(get_user_selection=[0]))
        assert selector.run() == []
        assert "[0] EXIT" in output.messages

    @pytest.mark.parametrize("selection", [9, -1, "2", True])
    def test_invalid_selection_reprompts(self, selection):
        selector, output = make_selector(ScriptedInput(get_user_selection=[selection, 0]))
        assert selector.run() == []
        assert INVALID_SELECTION in output.messages

    def test_unknown_variant_in_menu_is_invalid(self):
        scripted = ScriptedInput(get_user_selection=[2, 0])
        selector, output = make_selector(scripted, games=["WAR", "Uno"])
        assert selector.run() == []
        assert INVALID_SELECTION in output.messages
        assert 'get_player_count' not in scripted.calls

    def test_plays_selected_game_and_registers_players(self):
        manager = UserManager()
        manager.add_user("alice")
        scripted = ScriptedInput(
            get_user_selection=[2, 0],
            get_player_count=[3, 2],
            get_username=["alice", "alice", " ", "newbie"],
        )
        selector, output = make_selector(scripted, user_manager=manager)

        results = selector.run()

        assert len(results) == 1
        assert results[0].variant == "War"
        assert sorted(manager.usernames()) == ["alice", "newbie"]
        assert manager.get_user("newbie").games_played == 1
        assert manager.get_user("alice").games_played == 1
        assert output.contains("Enter a number of players from 2 to 2")
        assert output.contains("alice is already seated")
        assert output.contains("Username cannot be empty")

    def test_runs_several_games(self):
        scripted = ScriptedInput(
            get_user_selection=[2, 2, 0],
            get_player_count=[2, 2],
            get_username=["alice", "bob", "bob", "alice"],
        )
        manager = UserManager()
        selector, _ = make_selector(scripted, user_manager=manager)

        results = selector.run()

        assert len(results) == 2
        assert manager.get_user("alice").games_played == 2
        wins = sum(manager.get_user(name).games_won for name in ("alice", "bob"))
        assert wins >= 2
