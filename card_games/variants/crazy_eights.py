"""
Crazy Eights.

Players take turns matching the top card of the playing field by suit or
rank. Eights are wild and let the player name the active suit. The first
player to empty their hand wins.
"""

from typing import Iterable, List, Optional

from ..core.cards import Card
from ..core.enums import Suit, VariantKind
from ..core.exceptions import InvalidCardError
from ..core.player import Player
from .base import GameResult, GameVariant

__all__ = ['CrazyEights']


class CrazyEights(GameVariant):
    """
    Crazy Eights for 2-5 players.

    Attributes:
        field: played cards, top of the stack last
        active_suit: suit the next card must follow unless it matches rank
        hand_size: cards dealt to each player
    """

    NAME = "Crazy Eights"
    KIND = VariantKind.CRAZY_EIGHTS
    MIN_PLAYERS = 2
    MAX_PLAYERS = 5
    HAND_SIZE = 1

    def _setup(self) -> None:
        self.hand_size = self.config.crazy_eights_hand_size or self.HAND_SIZE
        self.field: List[Card] = []

        self.deck.shuffle(self.seed)
        for _ in range(self.hand_size):
            for player in self.players:
                player.add_to_hand(self.deck.draw_card())

        first = self.deck.draw_card()
        self.field.append(first)
        self.active_suit: Suit = first.suit
        self._logger.info(
            f"Dealt {self.hand_size} card(s) to {self.usernames}, field starts with {first}")

    @property
    def top_card(self) -> Card:
        return self.field[-1]

    def matches_field(self, card: Card) -> bool:
        """Whether a card may go on the field, ignoring who holds it."""
        if card.is_eight:
            return True
        return card.suit == self.active_suit or card.rank == self.top_card.rank

    def has_valid_move(self, hand: Optional[Iterable[Card]] = None) -> bool:
        """
        Whether any card of the hand can be played.

        Args:
            hand: cards to test; the current player's hand when None
        """
        cards = self.curr_player.hand if hand is None else hand
        return any(self.matches_field(card) for card in cards)

    def check_move(self, card: Card) -> bool:
        hand = self.curr_player.hand
        if hand.is_empty or card not in hand:
            return False
        return self.matches_field(card)

    def make_move(self, card: Card) -> None:
        """
        Move a card from the current player's hand onto the field.

        The active suit follows the card; for an eight the caller then
        replaces it with the suit the player names.
        """
        self.curr_player.remove_from_hand(card)
        self.field.append(card)
        self.active_suit = card.suit
        self._logger.info(f"{self.curr_player.username} played {card}")

    def check_win(self) -> bool:
        return self.curr_player.hand.is_empty

    def start_game(self) -> GameResult:
        while True:
            player = self.curr_player
            self.turns_played += 1

            card = self._take_turn(player)
            if card is not None:
                self.make_move(card)
                if card.is_eight:
                    self.active_suit = self._read_suit(player)
                    self.output(f"{player.username} changed the suit to {self.active_suit.name.title()}.")
                if self.check_win():
                    return self._finish([player.username], scores=self._cards_left())

            self.advance_turn()

    def _take_turn(self, player: Player) -> Optional[Card]:
        """
        Prompt the player until they draw or name a legal card.

        An invalid card restarts the prompt from the top, draw offer
        included.

        Returns:
            The card to play, or None when the player drew instead.
        """
        attempts = 0
        limit = self.config.max_invalid_attempts
        while True:
            self.output(f"Top card: {self.top_card}  Active suit: {self.active_suit.name.title()}")
            self.output(f"{player.username}'s hand: {player.hand}")

            if not self.has_valid_move(player.hand):
                self.output(f"{player.username} has no playable card and must draw.")
                self._draw_for(player)
                return None
            if self.game_input.draw_card():
                self._draw_for(player)
                return None

            card = self._read_card(player)
            if card is not None:
                return card

            attempts += 1
            if limit is not None and attempts >= limit:
                self.output(f"Too many invalid attempts, {player.username} draws a card.")
                self._logger.warning(f"{player.username} exhausted {limit} attempts")
                self._draw_for(player)
                return None

    def _read_card(self, player: Player) -> Optional[Card]:
        """Read one card token; None when it is not a legal play."""
        token = self.game_input.get_card()
        try:
            card = Card.from_str(token)
        except InvalidCardError:
            self.output(f"'{token}' is not a card, try again.")
            self._logger.debug(f"{player.username} entered unparsable card {token!r}")
            return None
        if not self.check_move(card):
            self.output(f"{card} cannot be played, try again.")
            self._logger.debug(f"{player.username} tried illegal card {card}")
            return None
        return card

    def _read_suit(self, player: Player) -> Suit:
        while True:
            token = self.game_input.get_suit()
            try:
                return Suit.from_str(token)
            except ValueError:
                self.output(f"'{token}' is not a suit, choose one of H, S, D, C.")
                self._logger.debug(f"{player.username} entered invalid suit {token!r}")

    def _draw_for(self, player: Player) -> Optional[Card]:
        """
        Move the top deck card into the player's hand.

        An empty deck is refilled from the field below its top card; when
        nothing can be drawn the turn simply passes.
        """
        if self.deck.is_empty:
            self._recycle_field()
        if self.deck.is_empty:
            self.output(f"No cards left to draw, {player.username} passes.")
            self._logger.info(f"{player.username} could not draw, deck and field exhausted")
            return None

        card = self.deck.draw_card()
        player.add_to_hand(card)
        self.output(f"{player.username} draws a card.")
        self._logger.info(f"{player.username} drew {card}")
        return card

    def _recycle_field(self) -> None:
        if len(self.field) < 2:
            return
        recycled = self.field[:-1]
        self.field = self.field[-1:]
        self.deck.add_to_bottom(recycled)
        self.deck.shuffle()
        self._logger.info(f"Shuffled {len(recycled)} field cards back into the deck")

    def _cards_left(self) -> dict:
        return {player.username: player.hand.size for player in self.players}
