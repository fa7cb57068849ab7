"""
Player identity and owned hand.
"""

from dataclasses import dataclass, field

from .cards import Card
from .hand import Hand


@dataclass
class Player:
    """
    A seated player.

    Usernames are unique within a game session; equality and hashing use
    the username only.
    """

    username: str
    hand: Hand = field(default_factory=Hand)

    def __post_init__(self) -> None:
        """
        Validate the username.

        Raises:
            ValueError: when the username is blank
        """
        if not isinstance(self.username, str) or not self.username.strip():
            raise ValueError(f"Username must be a non-empty string: {self.username!r}")

    def __hash__(self) -> int:
        return hash(self.username)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return False
        return self.username == other.username

    def add_to_hand(self, card: Card) -> None:
        self.hand.add_card(card)

    def remove_from_hand(self, card: Card) -> Card:
        """
        Remove the given card from this player's hand.

        Raises:
            ValueError: when the card is not held
        """
        return self.hand.remove_card(card)

    def __str__(self) -> str:
        return f"{self.username}: {self.hand}"

    def __repr__(self) -> str:
        return f"Player(username='{self.username}', cards={self.hand.size})"
