"""
Unit tests for VariantFactory.
"""

import pytest

from card_games.core import GameConfig, VariantKind
from card_games.core.exceptions import GameConfigError, UnknownVariantError
from card_games.variants import CrazyEights, GoFish, VariantFactory, War


@pytest.mark.unit
@pytest.mark.fast
class TestVariantFactory:

    @pytest.mark.parametrize("name", ["go fish", "GO FISH", "Go Fish", "  go   fish "])
    def test_go_fish_in_any_case(self, name, user_manager, scripted_input, recording_output):
        game = VariantFactory.create(name, ["alice", "bob"], user_manager, scripted_input, recording_output)
        assert isinstance(game, GoFish)

    @pytest.mark.parametrize("name, cls", [
        ("crazy eights", CrazyEights),
        ("WAR", War),
        ("Go Fish", GoFish),
    ])
    def test_variant_class(self, name, cls):
        assert VariantFactory.variant_class(name) is cls

    def test_unknown_name_raises(self, user_manager, scripted_input, recording_output):
        with pytest.raises(UnknownVariantError) as exc_info:
            VariantFactory.create("Uno", ["alice", "bob"], user_manager, scripted_input, recording_output)
        assert exc_info.value.name == "Uno"

    def test_non_string_name_raises(self):
        with pytest.raises(UnknownVariantError):
            VariantFactory.kind_for(None)

    def test_available_variants(self):
        assert VariantFactory.available_variants() == ["CRAZY EIGHTS", "WAR", "GO FISH"]

    def test_kind_and_player_limits(self):
        assert VariantFactory.kind_for("war") is VariantKind.WAR
        assert VariantFactory.max_players("crazy eights") == 5
        assert VariantFactory.max_players("war") == 2
        assert VariantFactory.max_players("go fish") == 6
        assert VariantFactory.min_players("go fish") == 2

    def test_options_reach_the_variant(self, user_manager, scripted_input, recording_output):
        config = GameConfig(crazy_eights_hand_size=4)
        game = VariantFactory.create("crazy eights", ["alice", "bob"], user_manager,
                                     scripted_input, recording_output, config=config, seed=9)
        assert game.config is config
        assert game.seed == 9
        assert game.players[0].hand.size == 4

    def test_roster_errors_propagate(self, user_manager, scripted_input, recording_output):
        with pytest.raises(GameConfigError):
            VariantFactory.create("war", ["alice", "bob", "carol"], user_manager,
                                  scripted_input, recording_output)
