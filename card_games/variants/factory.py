"""
Variant factory.

Maps variant names to their implementations and builds configured games.
"""

from typing import Any, Dict, List, Sequence, Type, TYPE_CHECKING

from ..core.enums import VariantKind
from ..core.exceptions import UnknownVariantError
from .base import GameInput, GameOutput, GameVariant
from .crazy_eights import CrazyEights
from .go_fish import GoFish
from .war import War

if TYPE_CHECKING:
    from ..controller.user_manager import UserManager

__all__ = ['VariantFactory']


class VariantFactory:
    """Factory for game variants, keyed by case-insensitive display name"""

    _VARIANTS: Dict[VariantKind, Type[GameVariant]] = {
        VariantKind.CRAZY_EIGHTS: CrazyEights,
        VariantKind.WAR: War,
        VariantKind.GO_FISH: GoFish,
    }

    @staticmethod
    def normalize_name(name: str) -> str:
        """Strip, collapse inner whitespace and upper-case a variant name."""
        if not isinstance(name, str):
            raise UnknownVariantError(str(name))
        return " ".join(name.split()).upper()

    @classmethod
    def kind_for(cls, name: str) -> VariantKind:
        """
        Resolve a variant name.

        Raises:
            UnknownVariantError: when the name matches no variant
        """
        try:
            return VariantKind(cls.normalize_name(name))
        except ValueError:
            raise UnknownVariantError(name)

    @classmethod
    def variant_class(cls, name: str) -> Type[GameVariant]:
        return cls._VARIANTS[cls.kind_for(name)]

    @classmethod
    def max_players(cls, name: str) -> int:
        return cls.variant_class(name).MAX_PLAYERS

    @classmethod
    def min_players(cls, name: str) -> int:
        return cls.variant_class(name).MIN_PLAYERS

    @classmethod
    def available_variants(cls) -> List[str]:
        """Display names of every registered variant, in menu order."""
        return [kind.display_name for kind in cls._VARIANTS]

    @classmethod
    def create(
        cls,
        name: str,
        usernames: Sequence[str],
        user_manager: 'UserManager',
        game_input: GameInput,
        game_output: GameOutput,
        **options: Any,
    ) -> GameVariant:
        """
        Build a variant by name.

        The name is resolved before any game state is built.

        Args:
            name: variant name, any case
            usernames: seated players
            user_manager: registry updated at game end
            game_input: source of player decisions
            game_output: sink for game messages
            **options: config, seed or logger passed to the variant

        Returns:
            GameVariant: the dealt game

        Raises:
            UnknownVariantError: when the name matches no variant
            GameConfigError: when the roster does not fit the variant
        """
        variant_cls = cls.variant_class(name)
        return variant_cls(usernames, user_manager, game_input, game_output, **options)
