"""Console input handling.

Implements the game and selector input contracts on top of click prompts.
Validation of game rules stays in the variants; this module only makes sure
the typed value has the right shape.
"""

import time
from typing import List, Sequence

import click

from card_games.core import Suit, Rank


class CLIInputHandler:
    """Console input handler.

    Prompts through click so that typed values are checked (IntRange,
    Choice) before they reach the game.

    Attributes:
        stall_seconds: pause between War rounds, 0 disables it
    """

    SUIT_CODES: List[str] = [suit.value for suit in Suit]
    RANK_CODES: List[str] = [str(rank) for rank in Rank]

    def __init__(self, stall_seconds: float = 0.0):
        self.stall_seconds = stall_seconds

    # Game input

    def get_card(self) -> str:
        """Card token such as H8 or S10.

        Returns:
            The raw token; the game parses and validates it.
        """
        return click.prompt("Card to play (e.g. H8, S10)", type=str).strip()

    def draw_card(self) -> bool:
        return click.confirm("Draw a card instead of playing?", default=False)

    def get_suit(self) -> str:
        return click.prompt(
            "Choose the new suit",
            type=click.Choice(self.SUIT_CODES, case_sensitive=False),
        ).upper()

    def get_rank(self) -> str:
        return click.prompt(
            "Rank to ask for",
            type=click.Choice(self.RANK_CODES, case_sensitive=False),
        ).upper()

    def get_player_username(self, current_username: str, usernames: Sequence[str]) -> str:
        """Opponent picked by the current player.

        Args:
            current_username: player whose turn it is
            usernames: opponents that may be asked
        """
        return click.prompt(
            f"{current_username}, who do you ask?",
            type=click.Choice(list(usernames)),
        )

    def stall(self) -> bool:
        if self.stall_seconds > 0:
            time.sleep(self.stall_seconds)
        return True

    # Selector input

    def get_user_selection(self) -> int:
        return click.prompt("Select a game", type=int)

    def get_player_count(self, minimum: int, maximum: int) -> int:
        """Number of players, limited to the variant's range.

        Raises:
            click.Abort: when the user cancels the prompt
        """
        if minimum == maximum:
            click.echo(f"This game is played by {minimum} players.")
            return minimum
        return click.prompt(
            f"Number of players ({minimum}-{maximum})",
            type=click.IntRange(minimum, maximum),
        )

    def get_username(self, seat: int) -> str:
        return click.prompt(f"Username for player {seat}", type=str).strip()
