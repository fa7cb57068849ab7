"""
Game variant template.

Defines the contract every card game variant follows, the input/output
collaborator protocols, and the result returned when a game finishes.
"""

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence, TYPE_CHECKING

from ..core.cards import Card, Deck
from ..core.config import GameConfig
from ..core.enums import VariantKind
from ..core.exceptions import GameConfigError, UserNotFoundError
from ..core.player import Player

if TYPE_CHECKING:
    from ..controller.user_manager import UserManager

__all__ = ['GameVariant', 'GameInput', 'GameOutput', 'GameResult']


class GameInput(Protocol):
    """Source of player decisions during a game."""

    def get_card(self) -> str:
        """Card token the current player wants to play."""
        ...

    def draw_card(self) -> bool:
        """Whether the current player chooses to draw."""
        ...

    def get_suit(self) -> str:
        """Suit code chosen after playing an eight."""
        ...

    def get_rank(self) -> str:
        """Rank code asked for in Go Fish."""
        ...

    def get_player_username(self, current_username: str, usernames: Sequence[str]) -> str:
        """Opponent chosen by the current player."""
        ...

    def stall(self) -> bool:
        """Pause between War rounds; False stops the game."""
        ...


class GameOutput(Protocol):
    """Sink for game messages."""

    def send_output(self, value: Any) -> None:
        ...


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of a finished game.

    Attributes:
        variant: display name of the variant
        winners: usernames of the winners
        turns_played: turns (or rounds) taken
        scores: per-player score as defined by the variant
    """
    variant: str
    winners: List[str]
    turns_played: int
    scores: Dict[str, int] = field(default_factory=dict)


class GameVariant(ABC):
    """
    Abstract base of all card game variants.

    Construction validates the roster, seats the players, builds an
    unshuffled deck and then calls _setup(), which shuffles and deals.
    """

    NAME: str = ""
    KIND: Optional[VariantKind] = None
    MIN_PLAYERS: int = 2
    MAX_PLAYERS: int = 2

    def __init__(
        self,
        usernames: Sequence[str],
        user_manager: 'UserManager',
        game_input: GameInput,
        game_output: GameOutput,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialise the variant.

        Args:
            usernames: seated players, in turn order
            user_manager: registry updated when the game ends
            game_input: source of player decisions
            game_output: sink for game messages
            config: rule parameters; defaults when None
            seed: shuffle seed overriding config.random_seed
            logger: logger, defaults to the module logger

        Raises:
            GameConfigError: when the roster size or names are invalid
        """
        self.config = config or GameConfig()
        self._logger = logger or logging.getLogger(self.__class__.__module__)
        self._validate_roster(usernames)

        self.user_manager = user_manager
        self.game_input = game_input
        self.game_output = game_output

        self.players: List[Player] = [Player(name) for name in usernames]
        self.seed = self.config.resolve_seed(seed)
        self.deck = Deck(rng=random.Random(self.seed))
        self.curr_player_index = 0
        self.turns_played = 0

        self._setup()

    def _validate_roster(self, usernames: Sequence[str]) -> None:
        count = len(usernames)
        if not self.MIN_PLAYERS <= count <= self.MAX_PLAYERS:
            raise GameConfigError(
                f"{self.NAME} needs {self.MIN_PLAYERS}-{self.MAX_PLAYERS} players, got {count}")
        if any(not isinstance(name, str) or not name.strip() for name in usernames):
            raise GameConfigError(f"Usernames cannot be blank: {list(usernames)}")
        if len(set(usernames)) != count:
            raise GameConfigError(f"Usernames must be unique: {list(usernames)}")

    @abstractmethod
    def _setup(self) -> None:
        """Shuffle and deal."""
        pass

    @abstractmethod
    def start_game(self) -> GameResult:
        """
        Run the game to completion.

        Returns:
            GameResult: winners and scores
        """
        pass

    @abstractmethod
    def check_move(self, card: Card) -> bool:
        """Whether the current player may play the given card."""
        pass

    @abstractmethod
    def make_move(self, card: Card) -> None:
        """Apply a move that check_move accepted."""
        pass

    @abstractmethod
    def check_win(self) -> bool:
        """Whether the game has been won."""
        pass

    @property
    def curr_player(self) -> Player:
        return self.players[self.curr_player_index]

    @property
    def usernames(self) -> List[str]:
        return [player.username for player in self.players]

    @property
    def num_players(self) -> int:
        return len(self.players)

    def advance_turn(self) -> Player:
        """
        Pass the turn to the next seat.

        Returns:
            Player: the new current player
        """
        self.curr_player_index = (self.curr_player_index + 1) % len(self.players)
        return self.curr_player

    def get_player(self, username: str) -> Player:
        """
        Find a seated player by username.

        Raises:
            KeyError: when no seated player has that username
        """
        for player in self.players:
            if player.username == username:
                return player
        raise KeyError(username)

    def output(self, value: Any) -> None:
        self.game_output.send_output(value)

    def _record_result(self, winners: Sequence[str]) -> None:
        """
        Update the registry: every participant played, winners also won.

        Registry misses are logged and skipped.
        """
        winner_set = set(winners)
        for username in self.usernames:
            try:
                self.user_manager.add_games_played(username, 1)
                if username in winner_set:
                    self.user_manager.add_games_won(username, 1)
            except UserNotFoundError as e:
                self._logger.warning(f"Result not recorded: {e}")

    def _announce_winners(self, winners: Sequence[str]) -> None:
        if len(winners) == 1:
            self.output(f"{winners[0]} wins!")
        else:
            self.output(f"It's a tie between {', '.join(winners)}!")
        self._logger.info(f"{self.NAME} finished after {self.turns_played} turns, winners: {list(winners)}")

    def _finish(self, winners: Sequence[str], scores: Optional[Dict[str, int]] = None) -> GameResult:
        """Record, announce and package the result of a decided game."""
        self._record_result(winners)
        self._announce_winners(winners)
        return GameResult(
            variant=self.NAME,
            winners=list(winners),
            turns_played=self.turns_played,
            scores=dict(scores or {}),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(players={self.usernames}, deck={len(self.deck)})"
