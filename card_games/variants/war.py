"""
War.

Two players flip the top card of their piles; the higher rank takes both.
Equal ranks start a war: each player adds face-down cards and flips again.
The player who ends up holding the whole deck wins.
"""

from typing import Dict, List, Optional

from ..core.cards import Card
from ..core.enums import RoundOutcome, VariantKind
from .base import GameResult, GameVariant

__all__ = ['War']


class War(GameVariant):
    """
    War for exactly two players.

    Each player's hand is a face-down draw pile whose top is index 0.
    Cards in play sit on per-player face-up piles until a round is decided.
    """

    NAME = "War"
    KIND = VariantKind.WAR
    MIN_PLAYERS = 2
    MAX_PLAYERS = 2

    def _setup(self) -> None:
        self.piles: List[List[Card]] = [[] for _ in self.players]
        self.deck.shuffle(self.seed)
        while not self.deck.is_empty:
            for player in self.players:
                if self.deck.is_empty:
                    break
                player.add_to_hand(self.deck.draw_card())
        self._logger.info(
            f"Split the deck: {', '.join(f'{p.username}={p.hand.size}' for p in self.players)}")

    def check_move(self, card: Optional[Card] = None) -> bool:
        """Whether the current player still has a card to flip."""
        return not self.curr_player.hand.is_empty

    def make_move(self, card: Card) -> None:
        """Put a card on the current player's face-up pile."""
        self.piles[self.curr_player_index].append(card)

    def flip_cards(self) -> bool:
        """
        Each player moves the top card of their hand to their face-up pile.

        Returns:
            bool: False when a player had nothing to flip
        """
        if any(player.hand.is_empty for player in self.players):
            return False
        current = self.curr_player_index
        for index, player in enumerate(self.players):
            self.curr_player_index = index
            self.make_move(player.hand.pop_top())
        self.curr_player_index = current
        return True

    def return_top_card(self, player_index: int) -> Optional[Card]:
        """Top card of a player's face-up pile, None when the pile is empty."""
        pile = self.piles[player_index]
        return pile[-1] if pile else None

    def decide_round_winner(self, card_a: Card, card_b: Card, is_war: bool = False) -> int:
        """
        Compare two flipped cards by rank; suits never matter.

        Returns:
            int: RoundOutcome.FIRST (0) when card_a wins, RoundOutcome.SECOND
            (1) when card_b wins, RoundOutcome.TIE (2) on equal ranks
        """
        if card_a.rank > card_b.rank:
            outcome = RoundOutcome.FIRST
        elif card_b.rank > card_a.rank:
            outcome = RoundOutcome.SECOND
        else:
            outcome = RoundOutcome.TIE
        label = "war" if is_war else "round"
        self._logger.debug(f"{label}: {card_a} vs {card_b} -> {outcome.name}")
        return outcome

    def check_win(self) -> bool:
        return any(self._cards_held(i) == 0 for i in range(len(self.players)))

    def play_round(self) -> None:
        """Flip, compare and settle one round, including any wars."""
        if not self.flip_cards():
            return

        is_war = False
        while True:
            first, second = self.return_top_card(0), self.return_top_card(1)
            self.output(
                f"{self.players[0].username} flips {first}, {self.players[1].username} flips {second}")
            outcome = self.decide_round_winner(first, second, is_war)
            if outcome != RoundOutcome.TIE:
                self._collect(outcome, is_war)
                return

            is_war = True
            self.output("War!")
            short = [i for i, p in enumerate(self.players)
                     if p.hand.size < self.config.war_face_down_cards + 1]
            if short:
                self._forfeit(short)
                return
            for index, player in enumerate(self.players):
                self.curr_player_index = index
                for _ in range(self.config.war_face_down_cards + 1):
                    self.make_move(player.hand.pop_top())
            self.curr_player_index = 0

    def start_game(self) -> GameResult:
        while not self.check_win():
            if self.turns_played >= self.config.war_max_rounds:
                self.output(f"Round limit of {self.config.war_max_rounds} reached.")
                self._logger.info("War stopped at the round limit")
                break
            self.turns_played += 1
            self.play_round()
            if not self.game_input.stall() and not self.check_win():
                self.output("Game stopped, the player holding more cards wins.")
                self._logger.info(f"War stopped after {self.turns_played} rounds")
                break

        scores = self._scores()
        best = max(scores.values())
        winners = [name for name, held in scores.items() if held == best]
        return self._finish(winners, scores=scores)

    def _collect(self, winner_index: int, is_war: bool) -> None:
        """The round winner puts both face-up piles under their hand."""
        winner = self.players[winner_index]
        taken: List[Card] = []
        for pile in self.piles:
            taken.extend(pile)
            pile.clear()
        winner.hand.add_cards(taken)
        what = "war" if is_war else "round"
        self.output(f"{winner.username} wins the {what} and takes {len(taken)} cards.")
        self._logger.info(f"{winner.username} won the {what}, taking {len(taken)} cards")

    def _forfeit(self, short: List[int]) -> None:
        """
        Settle a war some players cannot fund.

        A single short player loses everything to the opponent. When both
        are short the cards go back to their owners.
        """
        if len(short) == len(self.players):
            for player, pile in zip(self.players, self.piles):
                player.hand.add_cards(pile)
                pile.clear()
            self.output("Neither player can fight the war, the cards are returned.")
            return

        loser = self.players[short[0]]
        winner_index = 1 - short[0]
        self.piles[winner_index].extend(loser.hand.cards)
        loser.hand.clear()
        self.output(f"{loser.username} cannot finish the war.")
        self._collect(winner_index, is_war=True)

    def _cards_held(self, index: int) -> int:
        return self.players[index].hand.size + len(self.piles[index])

    def _scores(self) -> Dict[str, int]:
        return {player.username: self._cards_held(i) for i, player in enumerate(self.players)}
