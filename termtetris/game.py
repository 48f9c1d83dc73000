"""The coloured-piece game: an 18-wide, 24-tall walled board with line clearing."""

from __future__ import annotations

import argparse
import contextlib
import sys
import threading
from typing import Iterator, Sequence, TextIO

from termtetris.rng import Rand, shared_rand
from termtetris.score import Score
from termtetris.shapes import Control, Shape, make_shape, random_kind
from termtetris.terminal import Color, CubePoint

HEIGHT = 24
WIDTH = 18
LINE_POINTS = 10
TICK_SECONDS = 0.5

_CLEAR_SCREEN = "\x1b[H\x1b[2J"
_WALL = 1


def _color_of(value: int) -> Color:
    """The colour to paint a board value with; walls and strays show as blue."""
    try:
        return Color(value)
    except ValueError:
        return Color.BLUE


class Game:
    """The board, the falling figure and the score.

    ``board`` holds 1 for wall cells, a colour code for settled cells and
    0 for empty ones. ``needs_figure`` is set once a figure has landed.
    """

    def __init__(self, rng: Rand | None = None, score: Score | None = None) -> None:
        self.rng = rng if rng is not None else shared_rand()
        self.score = score if score is not None else Score()
        self.board = [
            [
                _WALL if i in (0, HEIGHT - 1) or j in (0, WIDTH - 1) else 0
                for j in range(WIDTH)
            ]
            for i in range(HEIGHT)
        ]
        self.figure: Shape | None = None
        self.needs_figure = True
        self.score.render()
        self.render_board()

    def render_board(self) -> None:
        """Clear the screen and paint the walls in blue."""
        sys.stdout.write(_CLEAR_SCREEN)
        for i, row in enumerate(self.board):
            for j, value in enumerate(row):
                if value == _WALL:
                    CubePoint(Color.BLUE, i, j).render()

    def create_figure(self) -> None:
        """Bring in a new random figure and draw it."""
        shape = make_shape(random_kind(self.rng), self.rng)
        shape.draw()
        shape.render()
        self.figure = shape
        self.needs_figure = False

    def _occupied(self, row: int, column: int) -> bool:
        if not (0 <= row < HEIGHT and 0 <= column < WIDTH):
            return True
        return self.board[row][column] != 0

    def _touches(self, d_row: int, d_column: int) -> bool:
        assert self.figure is not None
        return any(
            self._occupied(row + d_row, column + d_column)
            for row, column in self.figure.cells()
        )

    def _attach_left(self) -> bool:
        return self._touches(0, -1)

    def _attach_right(self) -> bool:
        return self._touches(0, 1)

    def _attach_bottom(self) -> bool:
        """Whether the figure rests on something; if so it is settled."""
        if self._touches(1, 0):
            self._settle()
            return True
        return False

    def is_legal(self, direction: Control) -> bool:
        """Whether the figure may make the move.

        A figure found resting on something is settled into the board.
        """
        if self.figure is None:
            return False
        if direction == Control.DOWN:
            return not self._attach_bottom()
        if direction == Control.LEFT:
            return not (self._attach_bottom() or self._attach_left())
        if direction == Control.RIGHT:
            return not (self._attach_bottom() or self._attach_right())
        if direction == Control.ROLL:
            return not (
                self._attach_left() or self._attach_right() or self._attach_bottom()
            )
        return True

    def move_figure(self, direction: Control) -> None:
        """Move the figure one step if the move is legal."""
        if self.is_legal(direction) and self.figure is not None:
            self.figure.erase()
            self.figure.move(direction)
            self.figure.render()

    def roll_figure(self) -> None:
        """Turn the figure a quarter turn if it is free to turn."""
        if self.is_legal(Control.ROLL) and self.figure is not None:
            self.figure.erase()
            self.figure.roll()
            self.figure.render()

    def is_over(self) -> bool:
        """Whether anything has settled in the top playing row."""
        return any(self.board[1][j] != 0 for j in range(1, WIDTH - 1))

    def _settle(self) -> None:
        figure = self.figure
        assert figure is not None
        top = figure.x
        for i, row in enumerate(figure.grid):
            for j, value in enumerate(row):
                r, c = figure.x + i, figure.y + j
                if value != 0 and 0 <= r < HEIGHT and 0 <= c < WIDTH:
                    self.board[r][c] = value
        self.figure = None
        self.needs_figure = True
        for line in range(HEIGHT - 2, -1, -1):
            if all(self.board[line][j] != 0 for j in range(1, WIDTH - 1)):
                self._clear_line(line, top)
                self.score.add(LINE_POINTS)
                self.score.render()

    def _clear_line(self, line: int, top: int) -> None:
        for j in range(1, WIDTH - 1):
            self.board[line][j] = 0
        self._drop(line, top)

    def _drop(self, line: int, top: int) -> None:
        for i in range(line - 1, max(top - 1, 0) - 1, -1):
            for j in range(1, WIDTH - 1):
                self.board[i + 1][j] = self.board[i][j]
        for i in range(line, 0, -1):
            for j in range(1, WIDTH - 1):
                CubePoint(Color.CLEAR, i, j).erase()
        for i in range(line, 0, -1):
            for j in range(1, WIDTH - 1):
                value = self.board[i][j]
                if value != 0:
                    CubePoint(_color_of(value), i, j).render()

    def _handle_key(self, key: str) -> None:
        if key == "a":
            self.move_figure(Control.LEFT)
        elif key == "d":
            self.move_figure(Control.RIGHT)
        elif key == "w":
            self.roll_figure()
        elif key == "s":
            while self.is_legal(Control.DOWN):
                self.move_figure(Control.DOWN)


@contextlib.contextmanager
def _cbreak(stream: TextIO) -> Iterator[None]:
    """Read keys one at a time without echo while inside the block."""
    if not stream.isatty():
        yield
        return
    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv: Sequence[str] | None = None) -> int:
    """Play: a/d move, w turns, s drops; pieces fall every half second."""
    parser = argparse.ArgumentParser(description="Play the falling-blocks game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the draws")
    parser.add_argument("--player", default="hvala", help="name shown beside the board")
    args = parser.parse_args(argv)
    rng = Rand(args.seed) if args.seed is not None else shared_rand()
    lock = threading.Lock()
    done = threading.Event()

    with _cbreak(sys.stdin):
        game = Game(rng, Score(player=args.player))

        def listen() -> None:
            while not done.is_set():
                with lock:
                    if game.is_over():
                        done.set()
                        break
                    if game.needs_figure:
                        game.create_figure()
                    sys.stdout.flush()
                key = sys.stdin.read(1)
                if not key:
                    done.set()
                    break
                with lock:
                    game._handle_key(key)
                    sys.stdout.flush()

        listener = threading.Thread(target=listen, daemon=True)
        listener.start()
        try:
            while not done.wait(TICK_SECONDS):
                with lock:
                    if game.is_over():
                        done.set()
                        break
                    if game.needs_figure:
                        game.create_figure()
                    game.move_figure(Control.DOWN)
                    sys.stdout.flush()
        except KeyboardInterrupt:
            done.set()
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())