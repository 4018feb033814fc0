"""Playing cards."""

from __future__ import annotations

from dataclasses import dataclass

_RANK_NAMES = {1: "Ace", 11: "Jack", 12: "Queen", 13: "King"}


@dataclass(frozen=True)
class Card:
    """A playing card with a suit and a rank from 1 (Ace) to 13 (King)."""

    suit: str
    rank: int

    def __str__(self) -> str:
        rank_str = _RANK_NAMES.get(self.rank, str(self.rank))
        return f"{rank_str} of {self.suit}"