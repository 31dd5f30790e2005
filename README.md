# hanoitower

A Tower of Hanoi puzzle that you play in the terminal. The game's text is
in Portuguese. Each finished game is added to a history file, so you can
look back at earlier games by player or by date.

## Installation

```
pip install .
```

## Playing

Start the game with:

```
hanoitower
```

By default the history is kept in `historico_hanoi.txt` in the current
directory. Use `--history` to pick another file:

```
hanoitower --history partidas.txt
```

The main menu has four options:

1. **Iniciar Jogo** starts a new game. You give your name, the date
   (`dd/mm/aaaa`) and the number of disks, from 1 to 8. Anything else gives
   a game with 3 disks. When the game is over you are asked whether to play
   again (`S` for yes).
2. **Estatisticas (Historico)** lists every saved game, newest first. You can
   then search by player (`U`, not case-sensitive) or by exact date (`D`).
3. **Regras do Jogo** shows the rules.
4. **Sair** quits. The program also quits when its input ends.

To make a move, type the letter of the tower to take a disk from and the
letter of the tower to put it on, for example `A C` (spaces are optional, so
`ac` works too; case does not matter). A move is refused when a tower does
not exist, when both towers are the same, when the first tower is empty, or
when the disk would land on a smaller one. The game ends when all disks are
on tower C. You then see how many moves you made and the smallest number
possible, `2**disks - 1`.

When the output is a terminal, the screen is cleared between steps by
running the shell command `cls || clear`.

## History file

Finished games are appended to the history file. Each game takes four
lines: player name, number of moves, number of disks and date. The file is
read when the menu starts; a missing file just means an empty history.
Names longer than 99 characters and dates longer than 10 characters are cut
short.

## Using the library

```python
from hanoitower.towers import Towers, InvalidMove, minimum_moves

towers = Towers(3)
towers.move("A", "C")
print(towers.render())

try:
    towers.move("A", "C")   # a larger disk onto a smaller one
except InvalidMove as error:
    print(error)

print(towers.height("A"), towers.disk_at("C", 0), towers.solved())
print(minimum_moves(3))     # 7
```

`Towers.validate(source, target)` raises `InvalidMove` without moving
anything.

```python
from hanoitower.history import History, Record, format_record

history = History("historico_hanoi.txt")
history.load()
history.add(Record("maria", 7, 3, "01/02/2024"))   # in memory only
for record in history.by_player("MARIA"):
    print(format_record(record))
history.show_date("01/02/2024")
```

`History.save(record)` appends a record to the file; `History.records()`
returns all records, newest first.

The game itself can be driven from code through `hanoitower.game.Game`,
which takes a `History`, a function that returns the next input line and an
output stream.

## Running the tests

```
pip install ".[test]"
pytest
```