"""Console rendering.

Formats banners, menus and results, and echoes game messages.
"""

from typing import Any, List

import click

from card_games.controller import UserRecord
from card_games.variants import GameResult


class CLIRenderer:
    """Console renderer.

    All methods are pure functions returning the text to print.
    """

    @staticmethod
    def render_banner() -> str:
        return "\n".join([
            "=== Card Games ===",
            "Pick a game by number, 0 to quit.",
        ])

    @staticmethod
    def render_result(result: GameResult) -> str:
        """Summarise a finished game.

        Args:
            result: result returned by the game

        Returns:
            Multi-line summary with the score table.
        """
        lines = [f"=== {result.variant} finished after {result.turns_played} turns ==="]
        lines.append(f"Winner(s): {', '.join(result.winners)}")
        for name, score in sorted(result.scores.items(), key=lambda item: (-item[1], item[0])):
            lines.append(f"  {name}: {score}")
        return "\n".join(lines)

    @staticmethod
    def render_standings(users: List[UserRecord]) -> str:
        if not users:
            return "No registered players yet."
        lines = ["=== Standings ==="]
        ranked = sorted(users, key=lambda u: (-u.games_won, -u.games_played, u.username))
        for user in ranked:
            lines.append(f"  {user.username}: {user.games_won} won / {user.games_played} played")
        return "\n".join(lines)


class ConsoleOutput:
    """Game and selector output that echoes to the console."""

    def send_output(self, value: Any) -> None:
        if isinstance(value, GameResult):
            value = CLIRenderer.render_result(value)
        click.echo(value)
