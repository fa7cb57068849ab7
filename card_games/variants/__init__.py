"""
Game variants.

Each variant implements the GameVariant template; VariantFactory builds
them by name.
"""

from .base import GameVariant, GameInput, GameOutput, GameResult
from .crazy_eights import CrazyEights
from .war import War
from .go_fish import GoFish
from .factory import VariantFactory

__all__ = [
    'GameVariant', 'GameInput', 'GameOutput', 'GameResult',
    'CrazyEights', 'War', 'GoFish', 'VariantFactory',
]
