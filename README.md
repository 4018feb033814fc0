# warcards

This package plays a two-player game of War with a standard 52-card pack. The pack is shuffled and each player gets 26 cards.

On each turn both players show their top card, and the higher rank wins. An Ace beats every card except a 2, and a 2 beats an Ace. When the two cards are equal, the players go to war. Each puts one card face down and one face up, and the face-up cards decide the winner. If neither player has at least two cards left for a war, each player keeps the cards they put down, along with any card still in hand.

The game keeps a log of every turn and counts the cards each player takes. It also reports win and draw rates.

## Installation

```
pip install .
```

## Running a game

```
warcards
warcards --seed 42
```

The command plays five turns and prints the last one. It then prints the number of cards Alice still holds and the number of cards Bob has taken so far. After that it plays the game to the end and prints:

- the winner,
- the full log,
- the statistics.

`--seed` fixes the shuffle, so the same game is played every time.

## Using the library

```python
import random

from warcards.player import Player
from warcards.game import Game

alice = Player("Alice")
bob = Player("Bob")
game = Game(alice, bob, rng=random.Random(1))

game.play_turn()
print(game.last_turn())

game.play_all()
game.print_winner()
game.print_log()
game.print_stats()
```

### `warcards.card`

`Card(suit, rank)` is a frozen dataclass. Its `str()` gives text such as `Queen of Hearts` or `7 of Clubs`.

### `warcards.player`

`Player(name)` is a player.

- `stacksize()` gives the number of cards the player still holds.
- `add_card(card)` puts a card on top of the stack.
- `remove_top_card()` takes the top card off the stack and returns it. It raises `IndexError` when the stack is empty.
- `cards_taken` counts the cards the player has won.

### `warcards.game`

`Game(player1, player2, rng=None)` deals the cards to both players. `rng` is an optional `random.Random` used for the shuffle.

- `play_turn()` plays one turn, including any war that follows a tie.
  - It raises `GameOverError` once both stacks are empty.
  - It raises `ValueError` if both players have the same name.
- `play_all()` plays turns until a player runs out of cards.
- `log` is the list of turn lines played so far.
- `last_turn()` gives the last of those lines, or `None` if no turn has been played.
- `winner()` returns the `Player` who took more cards, or `None` on a tie.
- `win_rate(name)` gives the percentage of turns the named player won.
- `draw_rate()` gives the percentage of turns that were draws. It returns NaN before any turn is played.
- `turns`, `draws`, `player1_wins` and `player2_wins` hold the running counts.
- `stats()` returns the statistics report as text.
- `print_last_turn()`, `print_winner()`, `print_log()` and `print_stats()` write the same information to standard output.

`create_pack(rng)` returns a shuffled list of 52 cards. `compare_cards(card1, card2)` returns `1` if the first card wins, `2` if the second wins, and `0` on a tie.

## What it does not do

The turn log is kept in memory only. Nothing is written to a file, so a game cannot be saved or replayed except by reusing the same seed.

## Tests

```
pip install .[test]
pytest
```