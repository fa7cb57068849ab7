"""
Core card game components.

This package contains the rule-independent building blocks shared by every
variant: cards, the deck, hands, players, configuration and errors.
"""

from .enums import Suit, Rank, VariantKind, RoundOutcome, get_all_suits, get_all_ranks
from .cards import Card, Deck
from .hand import Hand
from .player import Player
from .config import GameConfig, LoggingConfig, setup_logging, DEFAULT_SEED
from .exceptions import (
    CardGameError,
    EmptyDeckError,
    InvalidCardError,
    UnknownVariantError,
    GameConfigError,
    UserRegistryError,
    UserAlreadyExistsError,
    UserNotFoundError,
)


def new_deck(seed=None) -> Deck:
    """Create a full deck, shuffled when a seed is given.

    Args:
        seed: shuffle seed; the deck stays in its unshuffled order when None.

    Returns:
        A new 52-card deck.
    """
    deck = Deck()
    if seed is not None:
        deck.shuffle(seed)
    return deck


__all__ = [
    'Suit', 'Rank', 'VariantKind', 'RoundOutcome', 'get_all_suits', 'get_all_ranks',
    'Card', 'Deck', 'Hand', 'Player',
    'GameConfig', 'LoggingConfig', 'setup_logging', 'DEFAULT_SEED',
    'CardGameError', 'EmptyDeckError', 'InvalidCardError', 'UnknownVariantError',
    'GameConfigError', 'UserRegistryError', 'UserAlreadyExistsError', 'UserNotFoundError',
    'new_deck',
]
