"""
Property-based tests for the deck and the rule predicates.

Uses hypothesis to check that shuffling permutes the deck, draws shrink it
one card at a time, Crazy Eights legality follows the matching rule and
War comparisons are antisymmetric and suit-independent.
"""

import pytest
from hypothesis import given, settings, strategies as st

from conftest import RecordingOutput, ScriptedInput, set_hand
from card_games.controller import UserManager
from card_games.core import Card, Deck, GameConfig, Hand, Rank, RoundOutcome, Suit
from card_games.core.exceptions import EmptyDeckError
from card_games.variants import CrazyEights, War

ranks = st.sampled_from(list(Rank))
suits = st.sampled_from(list(Suit))
card_strategy = st.builds(Card, ranks, suits)
seed_strategy = st.integers(min_value=0, max_value=2 ** 32 - 1)


def build(variant_cls):
    return variant_cls(["alice", "bob"], UserManager(), ScriptedInput(), RecordingOutput())


@pytest.mark.property_test
@given(seed_strategy)
def test_shuffle_is_a_permutation(seed):
    deck = Deck()
    deck.shuffle(seed)
    assert len(deck) == 52
    assert set(deck.cards) == set(Deck().cards)


@pytest.mark.property_test
@given(seed_strategy)
def test_same_seed_same_order(seed):
    first, second = Deck(), Deck()
    first.shuffle(seed)
    second.shuffle(seed)
    assert first.cards == second.cards


@pytest.mark.property_test
@given(st.integers(min_value=0, max_value=52), seed_strategy)
def test_each_draw_removes_one_card(draws, seed):
    deck = Deck()
    deck.shuffle(seed)
    seen = set()
    for expected in range(51, 51 - draws, -1):
        seen.add(deck.draw_card())
        assert len(deck) == expected
    assert len(seen) == draws
    assert not seen & set(deck.cards)
    if draws == 52:
        with pytest.raises(EmptyDeckError):
            deck.draw_card()


@pytest.mark.property_test
@settings(max_examples=200)
@given(st.lists(card_strategy, max_size=10, unique=True), card_strategy, suits)
def test_crazy_eights_legality(hand_cards, top, active_suit):
    game = build(CrazyEights)
    game.field = [top]
    game.active_suit = active_suit
    set_hand(game.curr_player)
    game.curr_player.hand.add_cards(hand_cards)

    for card in hand_cards:
        expected = card.rank == Rank.EIGHT or card.suit == active_suit or card.rank == top.rank
        assert game.check_move(card) is expected

    expected_any = any(
        card.rank == Rank.EIGHT or card.suit == active_suit or card.rank == top.rank
        for card in hand_cards
    )
    assert game.has_valid_move(Hand(hand_cards)) is expected_any


@pytest.mark.property_test
@given(st.lists(card_strategy, max_size=10, unique=True), card_strategy)
def test_crazy_eights_rejects_cards_not_held(hand_cards, other):
    game = build(CrazyEights)
    set_hand(game.curr_player)
    game.curr_player.hand.add_cards(hand_cards)
    if other not in hand_cards:
        assert game.check_move(other) is False


@pytest.mark.property_test
@given(card_strategy, card_strategy)
def test_war_comparison_is_antisymmetric(card_a, card_b):
    game = build(War)
    forward = game.decide_round_winner(card_a, card_b)
    backward = game.decide_round_winner(card_b, card_a)
    if card_a.rank == card_b.rank:
        assert forward == backward == RoundOutcome.TIE
    else:
        assert {forward, backward} == {RoundOutcome.FIRST, RoundOutcome.SECOND}
        assert (forward == RoundOutcome.FIRST) == (card_a.rank > card_b.rank)


@pytest.mark.property_test
@given(ranks, ranks, suits, suits, suits, suits)
def test_war_comparison_ignores_suits(rank_a, rank_b, s1, s2, s3, s4):
    game = build(War)
    assert game.decide_round_winner(Card(rank_a, s1), Card(rank_b, s2)) == \
        game.decide_round_winner(Card(rank_a, s3), Card(rank_b, s4))


@pytest.mark.property_test
@settings(max_examples=25, deadline=None)
@given(seed_strategy)
def test_war_conserves_cards(seed):
    game = War(["alice", "bob"], UserManager(), ScriptedInput(), RecordingOutput(),
               config=GameConfig(war_max_rounds=100), seed=seed)
    result = game.start_game()
    assert sum(result.scores.values()) == 52
    assert result.winners
