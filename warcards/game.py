"""The game of War between two players."""

from __future__ import annotations

import math
import random

from warcards.card import Card
from warcards.player import Player

SUITS = ("Spades", "Hearts", "Diamonds", "Clubs")
HAND_SIZE = 26


class GameOverError(RuntimeError):
    """Raised when a turn is requested after every card has been played."""


def create_pack(rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled pack of 52 cards, shuffled with ``rng``."""
    pack = [Card(suit, rank) for rank in range(1, 14) for suit in SUITS]
    (rng if rng is not None else random.Random()).shuffle(pack)
    return pack


def compare_cards(card1: Card, card2: Card) -> int:
    """Compare two cards: 1 if the first wins, 2 if the second wins, 0 on a tie.

    An Ace beats everything except a 2, and a 2 beats an Ace.
    """
    r1, r2 = card1.rank, card2.rank
    if r1 == 1 and r2 > 2:
        return 1
    if r2 == 1 and r1 > 2:
        return 2
    if r1 == 1 and r2 == 2:
        return 2
    if r2 == 1 and r1 == 2:
        return 1
    if r1 > r2:
        return 1
    if r1 < r2:
        return 2
    return 0


class Game:
    """A game of War: the pack is dealt evenly and the higher card takes the table."""

    def __init__(
        self, player1: Player, player2: Player, rng: random.Random | None = None
    ) -> None:
        self.player1 = player1
        self.player2 = player2
        pack = create_pack(rng)
        for _ in range(HAND_SIZE):
            player1.add_card(pack.pop())
            player2.add_card(pack.pop())
        self.turns = 0
        self.draws = 0
        self.player1_wins = 0
        self.player2_wins = 0
        self._log_parts: list[str] = []

    @property
    def log(self) -> list[str]:
        """The turns played so far, one line per turn."""
        return "".join(self._log_parts).splitlines()

    def play_turn(self) -> None:
        """Play one turn, including any war that follows a tie."""
        if self.player1.stacksize() == 0 and self.player2.stacksize() == 0:
            raise GameOverError("Game is over. Cannot play a new turn.")
        if self.player1.name == self.player2.name:
            raise ValueError("Can't play with only 1 player.")
        card1 = self.player1.remove_top_card()
        card2 = self.player2.remove_top_card()
        self._settle(card1, card2, 1, 1)

    def _settle(self, card1: Card, card2: Card, on_table1: int, on_table2: int) -> None:
        p1, p2 = self.player1, self.player2
        while True:
            self._log_parts.append(
                f"{p1.name} played {card1} {p2.name} played {card2}. "
            )
            result = compare_cards(card1, card2)
            self.turns += 1
            if result == 1:
                self._log_parts.append(f"{p1.name} wins.\n")
                p1.cards_taken += on_table1 + on_table2
                self.player1_wins += 1
                return
            if result == 2:
                self._log_parts.append(f"{p2.name} wins.\n")
                p2.cards_taken += on_table1 + on_table2
                self.player2_wins += 1
                return

            self._log_parts.append("Draw. ")
            self.draws += 1
            stack1, stack2 = p1.stacksize(), p2.stacksize()
            if stack1 < 2 and stack2 < 2:
                # Not enough cards for a war: everyone keeps what they put down.
                p1.cards_taken += stack1 + on_table1
                p2.cards_taken += stack2 + on_table2
                if p1.stacksize() > 0:
                    p1.remove_top_card()
                if p2.stacksize() > 0:
                    p2.remove_top_card()
                return

            p1.remove_top_card()
            p2.remove_top_card()
            card1 = p1.remove_top_card()
            card2 = p2.remove_top_card()
            on_table1 += 2
            on_table2 += 2

    def play_all(self) -> None:
        """Play turns until a player runs out of cards."""
        while self.player1.stacksize() > 0 and self.player2.stacksize() > 0:
            self.play_turn()

    def last_turn(self) -> str | None:
        """Return the log line of the last turn, or None if nothing was played."""
        lines = self.log
        return lines[-1] if lines else None

    def winner(self) -> Player | None:
        """Return the player who took more cards, or None on a tie."""
        if self.player1.cards_taken > self.player2.cards_taken:
            return self.player1
        if self.player1.cards_taken < self.player2.cards_taken:
            return self.player2
        return None

    def win_rate(self, name: str) -> float:
        """Return the percentage of turns won by the named player."""
        if self.turns == 0:
            return 0.0
        if name == self.player1.name:
            return 100.0 * self.player1_wins / self.turns
        return 100.0 * self.player2_wins / self.turns

    def draw_rate(self) -> float:
        """Return the percentage of turns that were draws (NaN before any turn)."""
        if self.turns == 0:
            return math.nan
        return self.draws / self.turns * 100.0

    def stats(self) -> str:
        """Return a text report of the game's statistics."""
        lines = [
            "Overall statistics:",
            f"  Number of turns played: {self.turns}",
            f"  Number of draws: {self.draws}",
            f"  Draw rate: {self.draw_rate():g}%",
        ]
        for number, player in ((1, self.player1), (2, self.player2)):
            lines += [
                "",
                f"Player {number} ({player.name}):",
                f"  Win rate: {self.win_rate(player.name):g}%",
                f"  Cards won: {player.cards_taken}",
            ]
        return "\n".join(lines)

    def print_last_turn(self) -> None:
        """Print the last turn played."""
        line = self.last_turn()
        print(line if line is not None else "The log is empty.")

    def print_winner(self) -> None:
        """Print the winner's name, or that the game is a draw or not played yet."""
        if self.player1.cards_taken == 0 and self.player2.cards_taken == 0:
            print("The game isn't played yet.")
            return
        winner = self.winner()
        if winner is None:
            print("It's a draw")
        else:
            print(f"The winner is {winner.name}")

    def print_log(self) -> None:
        """Print every turn played, one per line."""
        for line in self.log:
            print(line)

    def print_stats(self) -> None:
        """Print the game's statistics."""
        print(self.stats())