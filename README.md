# torre_hanoi

This is the Tower of Hanoi ("Torre de Hanoi") played in the terminal. The board
has three pegs, A, B and C, and you pick from 1 to 10 discs. On every turn the
game draws the board and shows the next move of the optimal solution as a
suggestion. When you win a match it goes into a history file, which you can list
or search later. The game's prompts and messages are in Portuguese.

## Installation

```
pip install .
```

## Playing

```
torre-hanoi
```

To keep the history somewhere other than the default file:

```
torre-hanoi --history-file path/to/historico.txt
```

The main menu offers:

1. Novo Jogo: start a new match. You enter your name, which is cut to 49
   characters, and then the number of discs. After each match the game asks
   whether you want to play again.
2. Ver Historico: list every recorded match.
3. Buscar no Historico: search the history by player name or by date. A name
   search matches any part of the name and is case-sensitive. A date search
   takes `DD/MM/AAAA` and compares it with the local date the match ended.
4. Sair: quit.

During a match, type two peg letters to move the top disc. For example, `AC`
moves the top disc from A to C. Letters can be upper or lower case. `R` restarts
the match and `S` returns to the menu.

A move from an empty peg, or a move that would put a larger disc on a smaller
one, is ignored and is not counted. You win when every disc is stacked on peg B
or on peg C.

The screen is cleared before each board is drawn, but only when output goes to
a terminal.

Winning matches are written to `historico_partidas.txt` in the current
directory unless `--history-file` is given. Each line holds
`moves;name;discs;timestamp`, where the timestamp is in epoch seconds. When the
file is read, lines that cannot be parsed are skipped. A missing file counts as
an empty history.

## Using it as a library

```python
from torre_hanoi.game import HanoiGame, IllegalMoveError
from torre_hanoi.history import History

game = HanoiGame(3)
while not game.is_won():
    source, target = game.next_optimal_move()
    game.move(source, target)
print(game.render())
print(game.moves)  # 7

history = History.load("historico_partidas.txt")
history.add(game.moves, "Ana", 3)
history.save("historico_partidas.txt")
for record in history.search_by_name("An"):
    print(record.describe("Data/Hora"))
```

- `torre_hanoi.peg.Peg` is a stack of disc sizes with `push`, `pop`, `top` and
  `is_empty`. It supports `len()`, and iterating over it goes from bottom to top.
- `torre_hanoi.game.HanoiGame` holds the pegs, the number of discs and the move
  counter.
  - `move(source, target)` raises `IllegalMoveError` when a peg index is out of
    range, when the source peg is empty, or when the move would put a larger
    disc on a smaller one.
  - `reset()` puts every disc back on the first peg and sets the move counter
    to zero.
  - `render()` returns the board as text.
- `torre_hanoi.history.GameRecord` is one recorded match.
  - `to_line()` and `GameRecord.from_line(line)` write and read the file
    format. `from_line` raises `ValueError` on a malformed line.
- `torre_hanoi.history.History` keeps records with the most recently added one
  first.
  - It provides `add`, `save`, `History.load`, `search_by_name`,
    `search_by_date` and `render`.
- `torre_hanoi.cli.main(argv=None)` runs the interactive menu.
  `torre_hanoi.cli.play_match` and `torre_hanoi.cli.search_history` take an
  input function and an output stream, so you can drive them without a
  terminal.

## Running the tests

```
pip install ".[test]"
pytest
```