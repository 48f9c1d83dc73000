# termtetris

A falling-block puzzle game for a POSIX terminal. The board and pieces
are drawn with plain ANSI escape sequences, with no curses and no
dependencies outside the standard library. Two small text tools come
with it.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Playing

    termtetris [--seed N] [--player NAME]

This plays on a 24-row by 18-column board framed in blue. Each piece
(Z, T, O, I or L) gets a random colour, a random starting rotation and a
starting column drawn near the middle of the board. Pieces fall one row
every half second.

Keys (no Enter needed):

| key | action             |
|-----|--------------------|
| `a` | move left          |
| `d` | move right         |
| `w` | rotate             |
| `s` | drop to the bottom |

A full row is cleared and scores 10 points. The player name (default
`hvala`) and the score are shown to the right of the board. The game
ends as soon as a piece settles in the top playing row. Ctrl-C also
stops it.

### The classic variant

    termtetris-classic [--seed N] [--player NAME]

This variant plays on a 24 by 17 board with 3 x 3 pieces, all drawn in
yellow. Pieces fall one row every 0.2 seconds and use the same keys. The
score is the number of rows cleared so far, and the default player name
is `viMer`. A piece that lands, even when it was pushed sideways, stays
where it is. The game ends with `game over!` when a new piece cannot be
placed.

## Other commands

    termtetris-shapes [--seed N] [--delay SECONDS]

clears the screen and shows one random piece in red for `--delay`
seconds (default 2).

    termtetris-rand [--seed N]

prints five uniform random integers from 1 to 9, a line of asterisks,
then fifteen rounded normal draws around 8 kept within 1 to 15.

    termtetris-huffman [WORD]

prints the Huffman code of each character of `WORD`, or of the first
word read from standard input. Each line has the form
`<char> weight:<count> huffmancode:<bits>`.

    termtetris-wordcount [WORD ...]

counts the words given, or the whitespace-separated words read from
standard input, and prints one line per word such as `cat time:1` or
`the times:2`.

## Using it as a library

```python
from termtetris.huffman import HuffmanTree
from termtetris.wordcount import count_words, format_counts

tree = HuffmanTree("abracadabra")
print(tree.codes())    # {character: code}
print(tree.report())   # the lines termtetris-huffman prints

counts = count_words("the cat and the hat".split())
print(format_counts(counts))
```

`HuffmanTree("")` raises `ValueError`.

- `termtetris.game.Game` holds the board and the rules of the main game:
  `create_figure`, `move_figure`, `roll_figure`, `is_legal` and
  `is_over`.
- `termtetris.classic_game.ClassicGame` holds the classic variant. It has
  `create_cube`, `move`, `roll`, `erase_lines` and `down`, and raises
  `GameOver` when a piece cannot be placed.
- `termtetris.shapes` has the pieces (`ZShape`, `TShape`, `OShape`,
  `LShape`, `IShape`), `make_shape`, `random_kind`, `random_color` and
  `Control`.
- `termtetris.classic_shapes` has `ClassicShape`, `make_classic_shape`
  and `Direction`.
- `termtetris.rng.Rand` gives the random draws, and `shared_rand()`
  returns one process-wide instance.
- `termtetris.score.Score` keeps the player name and score.
- `termtetris.terminal` has `save_cursor`, `restore_cursor`,
  `move_cursor`, `Color` and `CubePoint`.

Game objects draw to standard output as they change, so they are best
used in a terminal.

## What it does not do

- It has no pause, no next-piece preview and no levels or speed-up.
- It does not save scores. Nothing is kept once the game ends.
- It needs a terminal that understands ANSI cursor save, restore and
  movement. It does not detect the terminal size.