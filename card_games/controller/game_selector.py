"""
Game selection controller.

Shows the variant menu, seats the players, registers them and runs the
chosen game through the variant factory.
"""

import logging
from typing import Any, List, Optional, Protocol, Sequence

from ..core.config import GameConfig
from ..core.exceptions import UnknownVariantError, UserAlreadyExistsError
from ..variants.base import GameInput, GameOutput, GameResult
from ..variants.factory import VariantFactory
from .user_manager import UserManager

__all__ = ['GameSelector', 'SelectorInput', 'SelectorOutput']

INVALID_SELECTION = "Invalid menu selection."


class SelectorInput(Protocol):
    """Source of menu choices and seat registrations."""

    def get_user_selection(self) -> int:
        ...

    def get_player_count(self, minimum: int, maximum: int) -> int:
        ...

    def get_username(self, seat: int) -> str:
        ...


class SelectorOutput(Protocol):
    def send_output(self, value: Any) -> None:
        ...


class GameSelector:
    """
    Menu loop over the available games.

    Menu entries are numbered from 1 in the order of `games`; 0 exits.
    """

    def __init__(
        self,
        selector_input: SelectorInput,
        selector_output: SelectorOutput,
        games: Sequence[str],
        user_manager: UserManager,
        game_input: GameInput,
        game_output: GameOutput,
        config: Optional[GameConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialise the selector.

        Args:
            selector_input: menu and registration input
            selector_output: menu output
            games: variant names shown in the menu
            user_manager: registry players are added to
            game_input: input handed to each game
            game_output: output handed to each game
            config: rule parameters handed to each game
            logger: logger, defaults to the module logger
        """
        self.selector_input = selector_input
        self.selector_output = selector_output
        self.games = list(games)
        self.user_manager = user_manager
        self.game_input = game_input
        self.game_output = game_output
        self.config = config or GameConfig()
        self._logger = logger or logging.getLogger(__name__)

    def menu_lines(self) -> List[str]:
        lines = [f"[{i}] {name}" for i, name in enumerate(self.games, start=1)]
        lines.append("[0] EXIT")
        return lines

    def run(self) -> List[GameResult]:
        """
        Loop over the menu until the user exits.

        Returns:
            List[GameResult]: results of the games played, in order
        """
        results: List[GameResult] = []
        while True:
            for line in self.menu_lines():
                self.selector_output.send_output(line)

            selection = self.selector_input.get_user_selection()
            if selection == 0:
                self._logger.info(f"Selector closed after {len(results)} game(s)")
                return results

            name = self._resolve(selection)
            if name is None:
                self.selector_output.send_output(INVALID_SELECTION)
                continue

            results.append(self.play(name))

    def play(self, name: str) -> GameResult:
        """Seat players for a variant, run it and return its result."""
        variant_cls = VariantFactory.variant_class(name)
        count = self._read_player_count(variant_cls.MIN_PLAYERS, variant_cls.MAX_PLAYERS)
        usernames = self._read_usernames(count)
        self._register(usernames)

        self._logger.info(f"Starting {variant_cls.NAME} for {usernames}")
        game = VariantFactory.create(
            name, usernames, self.user_manager, self.game_input, self.game_output,
            config=self.config,
        )
        return game.start_game()

    def _resolve(self, selection: Any) -> Optional[str]:
        """Variant name for a menu number, None when the selection is invalid."""
        if isinstance(selection, bool) or not isinstance(selection, int):
            return None
        if not 1 <= selection <= len(self.games):
            return None
        name = self.games[selection - 1]
        try:
            VariantFactory.kind_for(name)
        except UnknownVariantError as e:
            self._logger.warning(str(e))
            return None
        return name

    def _read_player_count(self, minimum: int, maximum: int) -> int:
        while True:
            count = self.selector_input.get_player_count(minimum, maximum)
            if isinstance(count, int) and minimum <= count <= maximum:
                return count
            self.selector_output.send_output(f"Enter a number of players from {minimum} to {maximum}.")

    def _read_usernames(self, count: int) -> List[str]:
        usernames: List[str] = []
        for seat in range(1, count + 1):
            while True:
                name = (self.selector_input.get_username(seat) or "").strip()
                if not name:
                    self.selector_output.send_output("Username cannot be empty.")
                elif name in usernames:
                    self.selector_output.send_output(f"{name} is already seated, choose another username.")
                else:
                    usernames.append(name)
                    break
        return usernames

    def _register(self, usernames: Sequence[str]) -> None:
        for name in usernames:
            try:
                self.user_manager.add_user(name)
            except UserAlreadyExistsError:
                self._logger.debug(f"Returning user {name}")
