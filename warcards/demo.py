"""Play a demonstration game between Alice and Bob."""

from __future__ import annotations

import argparse
import random

from warcards.game import Game
from warcards.player import Player


def main(argv: list[str] | None = None) -> int:
    """Play a few turns, then the whole game, printing the results."""
    parser = argparse.ArgumentParser(description="Play a game of War.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    alice = Player("Alice")
    bob = Player("Bob")
    game = Game(alice, bob, rng=rng)

    for _ in range(5):
        game.play_turn()
    game.print_last_turn()
    print(alice.stacksize())
    print(bob.cards_taken)
    game.play_all()
    game.print_winner()
    game.print_log()
    game.print_stats()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())