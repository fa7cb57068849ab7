"""
Controller layer: user registry and game selection.
"""

from .dto import UserRecord, RegistrySnapshot, dump_registry, load_registry
from .user_manager import UserManager
from .game_selector import GameSelector, SelectorInput, SelectorOutput, INVALID_SELECTION

__all__ = [
    'UserRecord', 'RegistrySnapshot', 'dump_registry', 'load_registry',
    'UserManager', 'GameSelector', 'SelectorInput', 'SelectorOutput', 'INVALID_SELECTION',
]
