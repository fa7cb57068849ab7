"""
Enumerations shared by every game variant.

Contains the card suits and ranks, the variant kinds known to the factory
and the outcome codes of a War round.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    Card suit.

    The value is the single-letter code used in card tokens ("H8", "S10").
    """

    HEARTS = "H"
    SPADES = "S"
    DIAMONDS = "D"
    CLUBS = "C"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Return the suit symbol."""
        symbols = {
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
        }
        return symbols[self]

    @classmethod
    def from_str(cls, suit_str: str) -> 'Suit':
        """
        Parse a suit code, case-insensitive.

        Raises:
            ValueError: when the code is not one of H, S, D, C
        """
        try:
            return cls(suit_str.strip().upper())
        except (ValueError, AttributeError):
            raise ValueError(f"Invalid suit: {suit_str!r}")


class Rank(IntEnum):
    """
    Card rank.

    The integer value orders ranks for comparison games; the ace is high.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        """Return the short rank code ("A", "2" .. "10", "J", "Q", "K")."""
        if self.value <= 10:
            return str(self.value)
        return {
            11: "J",
            12: "Q",
            13: "K",
            14: "A",
        }[self.value]

    def __format__(self, format_spec: str) -> str:
        # IntEnum formats as the integer value otherwise
        return format(str(self), format_spec)

    @classmethod
    def from_str(cls, rank_str: str) -> 'Rank':
        """
        Parse a rank code, case-insensitive. "T" is accepted for ten.

        Raises:
            ValueError: when the code is not a rank
        """
        if not isinstance(rank_str, str):
            raise ValueError(f"Invalid rank: {rank_str!r}")
        code = rank_str.strip().upper()
        if code.isdigit():
            value = int(code)
            if 2 <= value <= 10:
                return cls(value)
            raise ValueError(f"Invalid rank: {rank_str!r}")

        rank_map = {
            "T": cls.TEN,
            "J": cls.JACK,
            "Q": cls.QUEEN,
            "K": cls.KING,
            "A": cls.ACE,
        }
        if code not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str!r}")
        return rank_map[code]


class VariantKind(Enum):
    """Game variants the factory can build."""

    CRAZY_EIGHTS = "CRAZY EIGHTS"
    WAR = "WAR"
    GO_FISH = "GO FISH"

    @property
    def display_name(self) -> str:
        return self.value


class RoundOutcome(IntEnum):
    """Result codes of a War comparison: the winning player's index, or a tie."""

    FIRST = 0
    SECOND = 1
    TIE = 2


def get_all_suits() -> List[Suit]:
    """Return all suits in deck order."""
    return [Suit.HEARTS, Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS]


def get_all_ranks() -> List[Rank]:
    """Return all ranks in deck order (ace first, as printed on a new deck)."""
    return [Rank.ACE] + [rank for rank in Rank if rank != Rank.ACE]
