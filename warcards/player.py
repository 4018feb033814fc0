"""A player holding a stack of cards."""

from __future__ import annotations

from dataclasses import dataclass, field

from warcards.card import Card


@dataclass
class Player:
    """A named player with a face-down stack and a count of cards won."""

    name: str
    cards_taken: int = 0
    _stack: list[Card] = field(default_factory=list, repr=False)

    def stacksize(self) -> int:
        """Return how many cards are left in the player's stack."""
        return len(self._stack)

    def add_card(self, card: Card) -> None:
        """Put a card on top of the player's stack."""
        self._stack.append(card)

    def remove_top_card(self) -> Card:
        """Take the top card off the stack and return it."""
        if not self._stack:
            raise IndexError(f"{self.name} has no cards left")
        return self._stack.pop()