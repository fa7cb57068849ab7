"""
Go Fish.

On their turn a player asks an opponent for a rank they hold. A hit hands
over every card of that rank and the asker goes again; a miss sends the
asker fishing in the deck. Four of a kind form a book. When all thirteen
books are down, the player with the most books wins.
"""

from typing import Dict, List, Optional

from ..core.cards import Card
from ..core.enums import Rank, VariantKind
from ..core.player import Player
from .base import GameResult, GameVariant

__all__ = ['GoFish']

BOOK_SIZE = 4
TOTAL_BOOKS = 13


class GoFish(GameVariant):
    """
    Go Fish for 2-6 players.

    Attributes:
        books: ranks laid down by each player
        target: opponent chosen for the current ask
        extra_turn: whether the last ask lets the asker go again
    """

    NAME = "Go Fish"
    KIND = VariantKind.GO_FISH
    MIN_PLAYERS = 2
    MAX_PLAYERS = 6

    def _setup(self) -> None:
        self.books: Dict[str, List[Rank]] = {player.username: [] for player in self.players}
        self.target: Optional[Player] = None
        self.extra_turn = False

        if len(self.players) <= 3:
            self.hand_size = self.config.go_fish_small_table_hand_size
        else:
            self.hand_size = self.config.go_fish_large_table_hand_size

        self.deck.shuffle(self.seed)
        for _ in range(self.hand_size):
            for player in self.players:
                player.add_to_hand(self.deck.draw_card())
        self._logger.info(f"Dealt {self.hand_size} cards to {self.usernames}")

        for player in self.players:
            self._lay_books(player)

    def check_move(self, card: Card) -> bool:
        """The asked rank must be one the current player holds."""
        return self.curr_player.hand.count_rank(card.rank) > 0

    def make_move(self, card: Card) -> None:
        """Ask the chosen target for the card's rank."""
        if self.target is None:
            raise ValueError("No opponent chosen for the ask")
        self.extra_turn = self.ask(self.curr_player, self.target, card.rank)

    def check_win(self) -> bool:
        return sum(len(books) for books in self.books.values()) == TOTAL_BOOKS

    def ask(self, asker: Player, target: Player, rank: Rank) -> bool:
        """
        Resolve one ask.

        Returns:
            bool: True when the asker goes again
        """
        self.output(f"{asker.username} asks {target.username} for {rank}s.")
        taken = target.hand.remove_rank(rank)
        if taken:
            asker.hand.add_cards(taken)
            self.output(f"{target.username} hands over {len(taken)} card(s).")
            self._logger.info(f"{asker.username} took {len(taken)} {rank}(s) from {target.username}")
            self._lay_books(asker)
            return True

        self.output("Go fish!")
        drawn = self._draw_for(asker)
        if drawn is None:
            return False
        self._lay_books(asker)
        if drawn.rank == rank:
            self.output(f"{asker.username} fished the {rank} they asked for and goes again.")
            return True
        return False

    def start_game(self) -> GameResult:
        while not self.check_win():
            player = self.curr_player
            self.turns_played += 1

            if player.hand.is_empty:
                if self._draw_for(player) is None:
                    self.output(f"{player.username} has no cards and the deck is empty, turn passes.")
                    self.advance_turn()
                    continue

            self.output(f"{player.username}'s hand: {player.hand}")
            self.target = self._read_target(player)
            rank = self._read_rank(player)
            self.make_move(next(card for card in player.hand if card.rank == rank))
            self.target = None

            if not self.extra_turn:
                self.advance_turn()

        scores = {name: len(books) for name, books in self.books.items()}
        best = max(scores.values())
        winners = [name for name, count in scores.items() if count == best]
        return self._finish(winners, scores=scores)

    def _read_target(self, player: Player) -> Player:
        others = [name for name in self.usernames if name != player.username]
        while True:
            name = self.game_input.get_player_username(player.username, others)
            if name in others:
                return self.get_player(name)
            self.output(f"'{name}' is not an opponent, choose one of {', '.join(others)}.")
            self._logger.debug(f"{player.username} picked invalid opponent {name!r}")

    def _read_rank(self, player: Player) -> Rank:
        while True:
            token = self.game_input.get_rank()
            try:
                rank = Rank.from_str(token)
            except ValueError:
                self.output(f"'{token}' is not a rank, try again.")
                continue
            if player.hand.count_rank(rank) > 0:
                return rank
            self.output(f"You must ask for a rank you hold, you have no {rank}s.")
            self._logger.debug(f"{player.username} asked for unheld rank {rank}")

    def _draw_for(self, player: Player) -> Optional[Card]:
        if self.deck.is_empty:
            return None
        card = self.deck.draw_card()
        player.add_to_hand(card)
        self._logger.info(f"{player.username} drew {card}")
        return card

    def _lay_books(self, player: Player) -> None:
        """Remove every four of a kind from the player's hand into their books."""
        for rank in player.hand.ranks():
            if player.hand.count_rank(rank) == BOOK_SIZE:
                player.hand.remove_rank(rank)
                self.books[player.username].append(rank)
                self.output(f"{player.username} lays down a book of {rank}s.")
                self._logger.info(f"{player.username} completed the book of {rank}s")
