"""
Game and logging configuration.

GameConfig carries the tunable rule parameters shared by the variants;
LoggingConfig describes how the console front-end sets up logging.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .exceptions import GameConfigError

DEFAULT_SEED = 12345
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class GameConfig:
    """
    Rule parameters for a game session.

    Attributes:
        random_seed: shuffle seed used when a variant is not given one
        crazy_eights_hand_size: cards dealt to each Crazy Eights player
        max_invalid_attempts: re-prompts allowed for an illegal Crazy Eights
            card before the turn becomes a draw; None means unbounded
        war_face_down_cards: face-down cards each player adds in a war
        war_max_rounds: rounds after which War is decided by card count
        go_fish_small_table_hand_size: Go Fish deal for 2-3 players
        go_fish_large_table_hand_size: Go Fish deal for 4 or more players
    """
    random_seed: Optional[int] = DEFAULT_SEED
    crazy_eights_hand_size: int = 1
    max_invalid_attempts: Optional[int] = None
    war_face_down_cards: int = 3
    war_max_rounds: int = 5000
    go_fish_small_table_hand_size: int = 7
    go_fish_large_table_hand_size: int = 5

    def __post_init__(self):
        """Validate the settings."""
        self._validate_hand_sizes()
        self._validate_limits()

    def _validate_hand_sizes(self):
        if not 1 <= self.crazy_eights_hand_size <= 8:
            raise GameConfigError(
                f"crazy_eights_hand_size must be between 1 and 8: {self.crazy_eights_hand_size}")

        for name in ("go_fish_small_table_hand_size", "go_fish_large_table_hand_size"):
            value = getattr(self, name)
            if not 1 <= value <= 8:
                raise GameConfigError(f"{name} must be between 1 and 8: {value}")

    def _validate_limits(self):
        if self.max_invalid_attempts is not None and self.max_invalid_attempts < 1:
            raise GameConfigError(
                f"max_invalid_attempts must be positive or None: {self.max_invalid_attempts}")

        if self.war_face_down_cards < 0:
            raise GameConfigError(f"war_face_down_cards cannot be negative: {self.war_face_down_cards}")

        if self.war_max_rounds < 1:
            raise GameConfigError(f"war_max_rounds must be positive: {self.war_max_rounds}")

    def resolve_seed(self, seed: Optional[int] = None) -> int:
        """Pick the explicit seed, else the configured one, else the default."""
        if seed is not None:
            return seed
        if self.random_seed is not None:
            return self.random_seed
        return DEFAULT_SEED

    @classmethod
    def quick_game(cls) -> 'GameConfig':
        """Short games for demos and tests: small deals and a low War cap."""
        return cls(
            crazy_eights_hand_size=1,
            war_max_rounds=200,
            go_fish_small_table_hand_size=5,
            go_fish_large_table_hand_size=4,
        )


@dataclass
class LoggingConfig:
    """Logging setup for the console front-end"""
    log_level: str = 'WARNING'
    log_format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None

    def __post_init__(self):
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise GameConfigError(f"Unknown log level: {self.log_level}")
        self.log_level = self.log_level.upper()


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the root logger.

    Existing handlers installed by a previous call are replaced so the
    function can be called more than once per process.

    Args:
        config: logging settings; defaults when None

    Returns:
        logging.Logger: the configured root logger
    """
    config = config or LoggingConfig()
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        if getattr(handler, '_card_games_handler', False):
            root_logger.removeHandler(handler)
            handler.close()

    if config.log_file:
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding='utf-8')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.log_format, datefmt='%H:%M:%S'))
    handler._card_games_handler = True

    root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level)
    return root_logger
