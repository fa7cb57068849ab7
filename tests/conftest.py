"""
Shared test fixtures.

Scripted input replays queued answers so complete games can be driven
without a console; recording output keeps every message for assertions.
"""

import logging
from collections import deque
from typing import Any, Dict, Iterable, List, Optional, Sequence

import pytest

from card_games.controller import UserManager
from card_games.core import Card, Hand


class ScriptedInput:
    """
    Game and selector input that replays queued answers.

    Each method pops from its own queue; running out of answers raises
    AssertionError so a test never loops forever.
    """

    def __init__(self, **answers: Iterable[Any]):
        self.queues: Dict[str, deque] = {name: deque(values) for name, values in answers.items()}
        self.calls: List[str] = []

    def push(self, name: str, *values: Any) -> None:
        self.queues.setdefault(name, deque()).extend(values)

    def _next(self, name: str) -> Any:
        self.calls.append(name)
        queue = self.queues.get(name)
        if not queue:
            raise AssertionError(f"No scripted answer left for {name}")
        return queue.popleft()

    def get_card(self) -> str:
        return self._next('get_card')

    def draw_card(self) -> bool:
        return self._next('draw_card')

    def get_suit(self) -> str:
        return self._next('get_suit')

    def get_rank(self) -> str:
        return self._next('get_rank')

    def get_player_username(self, current_username: str, usernames: Sequence[str]) -> str:
        return self._next('get_player_username')

    def stall(self) -> bool:
        self.calls.append('stall')
        queue = self.queues.get('stall')
        return queue.popleft() if queue else True

    def get_user_selection(self) -> int:
        return self._next('get_user_selection')

    def get_player_count(self, minimum: int, maximum: int) -> int:
        return self._next('get_player_count')

    def get_username(self, seat: int) -> str:
        return self._next('get_username')


class RecordingOutput:
    """Output that keeps every message."""

    def __init__(self):
        self.messages: List[Any] = []

    def send_output(self, value: Any) -> None:
        self.messages.append(value)

    def contains(self, text: str) -> bool:
        return any(text in str(message) for message in self.messages)


def cards(*tokens: str) -> List[Card]:
    """Build cards from tokens, e.g. cards("H8", "S10")."""
    return [Card.from_str(token) for token in tokens]


def set_hand(player, *tokens: str) -> None:
    player.hand = Hand(cards(*tokens))


@pytest.fixture
def scripted_input():
    return ScriptedInput()


@pytest.fixture
def recording_output():
    return RecordingOutput()


@pytest.fixture
def user_manager():
    manager = UserManager()
    for name in ("alice", "bob", "carol", "dave"):
        manager.add_user(name)
    return manager


@pytest.fixture
def make_game(user_manager, scripted_input, recording_output):
    """Factory fixture building a variant with the shared fakes."""
    def _make(variant_cls, usernames: Optional[Sequence[str]] = None, **options):
        names = list(usernames or ("alice", "bob"))
        return variant_cls(names, user_manager, scripted_input, recording_output, **options)
    return _make


@pytest.fixture(autouse=True)
def _drop_logging_handlers():
    """Remove handlers installed by setup_logging once a test finishes."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if getattr(handler, '_card_games_handler', False):
            root.removeHandler(handler)
            handler.close()
