"""The classic game: a 17-wide, 24-tall walled board of three-by-three pieces."""

from __future__ import annotations

import argparse
import contextlib
import sys
import threading
from typing import Iterable, Iterator, Sequence, TextIO

from termtetris.classic_shapes import ClassicShape, Direction, make_classic_shape
from termtetris.rng import Rand, shared_rand
from termtetris.score import Score
from termtetris.terminal import Color, CubePoint

HEIGHT = 24
WIDTH = 17
SPAWN_ROW = 1
SPAWN_COLUMN = 7
TICK_SECONDS = 0.2
PLAYER = "viMer"

_CLEAR_SCREEN = "\x1b[H\x1b[2J"
_KIND_BY_DRAW = {1: "Z", 2: "T", 3: "O", 4: "I", 5: "L"}


class GameOver(Exception):
    """Raised when a new piece cannot be placed on the board."""


class ClassicGame:
    """The board, the piece in play and the score.

    ``board`` holds 1 for walls and settled cells and 0 for empty ones; the
    piece in play is counted on the board too. Pieces come from ``kinds``
    while it lasts, otherwise at random.
    """

    def __init__(
        self,
        rng: Rand | None = None,
        score: Score | None = None,
        kinds: Iterable[str] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else shared_rand()
        self.score = score if score is not None else Score(player=PLAYER, row=2)
        self._kinds: Iterator[str] | None = iter(kinds) if kinds is not None else None
        self.board = [
            [
                1 if i in (0, HEIGHT - 1) or j in (0, WIDTH - 1) else 0
                for j in range(WIDTH)
            ]
            for i in range(HEIGHT)
        ]
        self.shape: ClassicShape | None = None
        self.lines_cleared = 0
        self.score.render()
        for i, row in enumerate(self.board):
            for j, value in enumerate(row):
                if value == 1:
                    CubePoint(Color.BLUE, i, j).render()

    def _next_kind(self) -> str:
        if self._kinds is not None:
            try:
                return next(self._kinds)
            except StopIteration:
                self._kinds = None
        return _KIND_BY_DRAW[self.rng.rand_num(1, 5)]

    def _require_shape(self) -> ClassicShape:
        if self.shape is None:
            raise RuntimeError("no piece in play; call create_cube first")
        return self.shape

    def _occupied(self, row: int, column: int) -> bool:
        if not (0 <= row < HEIGHT and 0 <= column < WIDTH):
            return True
        return self.board[row][column] != 0

    def _blocked(self, cells: Iterable[tuple[int, int]], d_row: int, d_column: int) -> bool:
        return any(self._occupied(r + d_row, c + d_column) for r, c in cells)

    def _place(self) -> None:
        """Count the piece onto the board; overlapping anything ends the game."""
        shape = self._require_shape()
        overlap = False
        for row, column in shape.cells():
            if not (0 <= row < HEIGHT and 0 <= column < WIDTH):
                overlap = True
                continue
            self.board[row][column] += 1
            overlap = overlap or self.board[row][column] > 1
        if overlap:
            raise GameOver("game over!")

    def _lift(self) -> None:
        """Take the piece off the board and off the screen."""
        shape = self._require_shape()
        for row, column in shape.cells():
            if 0 <= row < HEIGHT and 0 <= column < WIDTH:
                self.board[row][column] -= 1
            CubePoint(Color.CLEAR, row, column).erase()

    def create_cube(self) -> None:
        """Bring in a new piece at the top of the board and draw it."""
        shape = make_classic_shape(self._next_kind())
        shape.x, shape.y = SPAWN_ROW, SPAWN_COLUMN
        self.shape = shape
        self._place()
        shape.render(Color.YELLOW)

    def move(self, direction: int) -> bool:
        """Move the piece one step; return True if it landed instead.

        A piece resting on something lands whichever way it is pushed: full
        rows are cleared and a new piece comes in. A sideways push against a
        wall or settled cell leaves the piece where it is.
        """
        direction = Direction(direction)
        shape = self._require_shape()
        self._lift()
        if self._blocked(shape.cells(), 1, 0):
            self._place()
            shape.render(Color.YELLOW)
            self.erase_lines()
            self.create_cube()
            return True
        sideways = {Direction.LEFT: -1, Direction.RIGHT: 1}.get(direction, 0)
        if not (sideways and self._blocked(shape.cells(), 0, sideways)):
            shape.move(direction)
        self._place()
        shape.render(Color.YELLOW)
        return False

    def roll(self) -> None:
        """Turn the piece a quarter turn if the turned piece fits."""
        shape = self._require_shape()
        self._lift()
        turned = ClassicShape(shape.kind, [list(row) for row in shape.grid], shape.x, shape.y)
        turned.roll()
        if not self._blocked(turned.cells(), 0, 0):
            shape.roll()
        self._place()
        shape.render(Color.YELLOW)

    def erase_lines(self) -> int:
        """Clear every full row, bottom up; return how many were cleared.

        Each cleared row raises the score to the running count of rows
        cleared in this game.
        """
        cleared = 0
        line = HEIGHT - 2
        while line > 0:
            if all(self.board[line][j] != 0 for j in range(1, WIDTH - 1)):
                cleared += 1
                self.lines_cleared += 1
                self.score.score = self.lines_cleared
                self.score.render()
                self.down(line)
            else:
                line -= 1
        return cleared

    def down(self, level: int) -> None:
        """Shift the rows above ``level`` down one, then repaint the playfield.

        The top playing row is copied down but left as it was.
        """
        if not 1 <= level < HEIGHT - 1:
            raise ValueError(f"row {level} is not a playing row")
        for i in range(level, 1, -1):
            self.board[i][1 : WIDTH - 1] = self.board[i - 1][1 : WIDTH - 1]
        for i in range(1, HEIGHT - 1):
            for j in range(1, WIDTH - 1):
                value = self.board[i][j]
                if value == 1:
                    CubePoint(Color.YELLOW, i, j).render()
                elif value == 0:
                    CubePoint(Color.CLEAR, i, j).erase()

    def _handle_key(self, key: str) -> None:
        if key == "a":
            self.move(Direction.LEFT)
        elif key == "d":
            self.move(Direction.RIGHT)
        elif key == "w":
            self.roll()
        elif key == "s":
            while not self.move(Direction.DOWN):
                pass


@contextlib.contextmanager
def _raw_keys(stream: TextIO) -> Iterator[None]:
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
    """Play: a/d move, w turns, s drops; pieces fall five times a second."""
    parser = argparse.ArgumentParser(description="Play the classic falling-blocks game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the draws")
    parser.add_argument("--player", default=PLAYER, help="name shown beside the board")
    args = parser.parse_args(argv)
    rng = Rand(args.seed) if args.seed is not None else shared_rand()
    lock = threading.Lock()
    done = threading.Event()
    over = threading.Event()

    sys.stdout.write(_CLEAR_SCREEN)
    with _raw_keys(sys.stdin):
        game = ClassicGame(rng, Score(player=args.player, row=2))
        try:
            game.create_cube()
        except GameOver:
            over.set()
            done.set()

        def listen() -> None:
            while not done.is_set():
                key = sys.stdin.read(1)
                if not key:
                    done.set()
                    break
                with lock:
                    try:
                        game._handle_key(key)
                    except GameOver:
                        over.set()
                        done.set()
                    sys.stdout.flush()

        threading.Thread(target=listen, daemon=True).start()
        try:
            while not done.wait(TICK_SECONDS):
                with lock:
                    sys.stdout.flush()
                    try:
                        game.move(Direction.DOWN)
                    except GameOver:
                        over.set()
                        done.set()
        except KeyboardInterrupt:
            done.set()
    if over.is_set():
        print("game over!")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())