"""
Card and deck data structures.

Card is an immutable value; Deck holds the undealt cards with seeded,
reproducible shuffling.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .enums import Suit, Rank, get_all_suits, get_all_ranks
from .exceptions import EmptyDeckError, InvalidCardError


@dataclass(frozen=True)
class Card:
    """
    A playing card.

    Frozen dataclass: two cards with the same rank and suit are equal and
    hash alike, whatever their identity.

    Examples:
        >>> card = Card(Rank.EIGHT, Suit.HEARTS)
        >>> str(card)
        '8H'
        >>> card.to_token()
        'H8'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        Validate field types.

        Raises:
            TypeError: when rank or suit is not the enum type
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got: {type(self.suit)}")

    def __str__(self) -> str:
        """Rank then suit, e.g. "10C"."""
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def to_token(self) -> str:
        """
        Return the input token for this card: suit code then rank code.

        Returns:
            str: e.g. "H8", "S10"
        """
        return f"{self.suit}{self.rank}"

    def to_display_str(self) -> str:
        """Rank with the suit symbol, e.g. "8♥"."""
        return f"{self.rank}{self.suit.symbol}"

    @property
    def is_eight(self) -> bool:
        return self.rank == Rank.EIGHT

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        Parse a card token.

        Both the suit-first input encoding ("H8", "s10") and the rank-first
        display form ("8H", "10s") are accepted.

        Args:
            card_str: 2-3 character token

        Returns:
            Card: the parsed card

        Raises:
            InvalidCardError: when the token is not a card
        """
        if not isinstance(card_str, str):
            raise InvalidCardError(f"Card token must be a string, got: {type(card_str)}")

        token = card_str.strip().upper()
        if len(token) < 2:
            raise InvalidCardError(f"Malformed card token: {card_str!r}")

        suit_codes = {suit.value for suit in Suit}

        if token[0] in suit_codes:
            try:
                return cls(Rank.from_str(token[1:]), Suit.from_str(token[0]))
            except ValueError:
                pass

        if token[-1] in suit_codes:
            try:
                return cls(Rank.from_str(token[:-1]), Suit.from_str(token[-1]))
            except ValueError:
                pass

        raise InvalidCardError(f"Malformed card token: {card_str!r}")


class Deck:
    """
    A standard 52-card deck.

    Constructed fully populated and unshuffled. The top of the deck is the
    end of the internal list.

    Attributes:
        _cards: cards still in the deck
        _rng: random generator used by shuffle()
    """

    def __init__(self, rng: Optional[random.Random] = None, cards: Optional[Iterable[Card]] = None):
        """
        Initialise the deck.

        Args:
            rng: random generator for shuffling; a fresh one when None
            cards: explicit contents (top last); the full 52 cards when None
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        if cards is None:
            self._reset_deck()
        else:
            self._cards = list(cards)

    def _reset_deck(self) -> None:
        """Reload all 52 cards in deck order."""
        self._cards = [
            Card(rank, suit)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]

    def shuffle(self, seed: Optional[int] = None) -> None:
        """
        Shuffle the remaining cards.

        Args:
            seed: when given, the generator is reseeded first so the same
                seed always yields the same order
        """
        if seed is not None:
            self._rng = random.Random(seed)
        self._rng.shuffle(self._cards)

    def draw_card(self) -> Card:
        """
        Remove and return the top card.

        Raises:
            EmptyDeckError: when the deck is empty
        """
        if not self._cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self._cards.pop()

    def draw_cards(self, count: int) -> List[Card]:
        """
        Draw several cards from the top.

        Raises:
            ValueError: when count is negative
            EmptyDeckError: when fewer than count cards remain
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            raise EmptyDeckError(f"Cannot draw {count} cards, only {len(self._cards)} remaining")
        return [self.draw_card() for _ in range(count)]

    def add_to_bottom(self, cards: Iterable[Card]) -> None:
        """Put cards under the deck, first card lowest."""
        self._cards[0:0] = list(cards)

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return len(self._cards) == 0

    @property
    def cards(self) -> List[Card]:
        """Copy of the deck contents, bottom first."""
        return self._cards.copy()

    def peek_top(self) -> Optional[Card]:
        """Top card without drawing it, None on an empty deck."""
        return self._cards[-1] if self._cards else None

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
