"""
A player's hand: an unordered multiset of cards.
"""

from typing import Iterable, Iterator, List

from .cards import Card
from .enums import Rank


class Hand:
    """
    Cards held by one player.

    Order carries no meaning for the rules, but insertion order is kept so
    that rendering and tests are stable.
    """

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: List[Card] = list(cards)

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def remove_card(self, card: Card) -> Card:
        """
        Remove one card equal to the given card.

        Returns:
            Card: the removed card

        Raises:
            ValueError: when the card is not held
        """
        try:
            index = self._cards.index(card)
        except ValueError:
            raise ValueError(f"Card {card} is not in hand")
        return self._cards.pop(index)

    def remove_rank(self, rank: Rank) -> List[Card]:
        """Remove and return every card of the given rank."""
        taken = [card for card in self._cards if card.rank == rank]
        self._cards = [card for card in self._cards if card.rank != rank]
        return taken

    def pop_top(self) -> Card:
        """
        Remove the first card (the top of a face-down pile).

        Raises:
            IndexError: on an empty hand
        """
        if not self._cards:
            raise IndexError("Cannot take a card from an empty hand")
        return self._cards.pop(0)

    def contains(self, card: Card) -> bool:
        return card in self._cards

    def count_rank(self, rank: Rank) -> int:
        return sum(1 for card in self._cards if card.rank == rank)

    def ranks(self) -> List[Rank]:
        """Distinct ranks held, in ascending order."""
        return sorted({card.rank for card in self._cards})

    def clear(self) -> None:
        self._cards.clear()

    @property
    def cards(self) -> List[Card]:
        return self._cards.copy()

    @property
    def size(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return len(self._cards) == 0

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards.copy())

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return "[" + ", ".join(str(card) for card in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Hand(size={len(self._cards)})"
