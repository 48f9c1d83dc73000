"""Four-by-four coloured pieces with a random spawn column, angle and colour."""

from __future__ import annotations

import argparse
import sys
import time
from enum import IntEnum
from typing import ClassVar, Sequence

from termtetris.rng import Rand, shared_rand
from termtetris.terminal import Color, CubePoint

_SIZE = 4
_KIND_ORDER = ("Z", "T", "O", "I", "L")
_COLOR_ORDER = (
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.WHITE,
    Color.PURPLE,
    Color.DEEP_GREEN,
)
_CLEAR_SCREEN = "\x1b[H\x1b[2J"


class Control(IntEnum):
    """Player commands for a falling piece."""

    DOWN = 0
    LEFT = 1
    RIGHT = 2
    ROLL = 3


def random_kind(rng: Rand | None = None) -> str:
    """Pick one of Z, T, O, I and L at random."""
    rng = rng if rng is not None else shared_rand()
    return _KIND_ORDER[rng.uniform(0, len(_KIND_ORDER) - 1)]


def random_color(rng: Rand | None = None) -> Color:
    """Pick a piece colour at random."""
    rng = rng if rng is not None else shared_rand()
    return _COLOR_ORDER[rng.uniform(0, len(_COLOR_ORDER) - 1)]


class Shape:
    """A piece on a 4x4 grid whose top-left cell sits at row ``x``, column ``y``.

    Occupied grid cells hold the piece's colour code; empty ones hold 0.
    ``rotation`` is the count of quarter turns, kept modulo 4.
    """

    kind: ClassVar[str] = ""
    pattern: ClassVar[tuple[tuple[int, int], ...]] = ()

    def __init__(self, rng: Rand | None = None) -> None:
        rng = rng if rng is not None else shared_rand()
        self.y = rng.normal(8, 1.0, 2, 14) - 1
        self.x = 1
        self.rotation = rng.uniform(0, 3)
        self.color = random_color(rng)
        self.grid = [[0] * _SIZE for _ in range(_SIZE)]

    def draw(self) -> None:
        """Fill in the piece's pattern and turn it by its starting rotation.

        Each turn advances ``rotation``, so the loop keeps going until the
        count it is compared against wraps back to zero.
        """
        for row, column in self.pattern:
            self.grid[row][column] = int(self.color)
        turns = 0
        while turns < self.rotation:
            self.roll()
            turns += 1

    def move(self, direction: Control) -> None:
        """Shift one step down, left or right; rolling is not a move."""
        if direction == Control.DOWN:
            self.x += 1
        elif direction == Control.LEFT:
            self.y -= 1
        elif direction == Control.RIGHT:
            self.y += 1

    def roll(self) -> bool:
        """Turn the grid a quarter turn clockwise; return whether it turned."""
        self.grid = [list(row) for row in zip(*self.grid[::-1])]
        self.rotation = (self.rotation + 1) % 4
        return True

    def cells(self) -> list[tuple[int, int]]:
        """Board positions of the occupied cells, row by row."""
        return [
            (self.x + i, self.y + j)
            for i, row in enumerate(self.grid)
            for j, value in enumerate(row)
            if value != 0
        ]

    def render(self, color: Color | None = None) -> None:
        """Paint every occupied cell, in ``color`` or else the piece's own."""
        paint = self.color if color is None else color
        for row, column in self.cells():
            CubePoint(paint, row, column).render()

    def erase(self) -> None:
        """Blank every occupied cell on the screen."""
        for row, column in self.cells():
            CubePoint(Color.CLEAR, row, column).erase()


class ZShape(Shape):
    """The Z piece."""

    kind = "Z"
    pattern = ((0, 0), (0, 1), (1, 1), (1, 2))


class TShape(Shape):
    """The T piece."""

    kind = "T"
    pattern = ((0, 0), (0, 1), (0, 2), (1, 1))


class OShape(Shape):
    """The square piece, which never turns."""

    kind = "O"
    pattern = ((0, 0), (0, 1), (1, 0), (1, 1))

    def roll(self) -> bool:
        return False


class LShape(Shape):
    """The L piece."""

    kind = "L"
    pattern = ((0, 0), (0, 1), (1, 1), (2, 1))


class IShape(Shape):
    """The long straight piece, which also starts at a random row."""

    kind = "I"
    pattern = ((0, 0), (1, 0), (2, 0), (3, 0))

    def __init__(self, rng: Rand | None = None) -> None:
        rng = rng if rng is not None else shared_rand()
        super().__init__(rng)
        self.x = rng.normal(8, 1.0, 1, 13) - 1


_SHAPES: dict[str, type[Shape]] = {
    cls.kind: cls for cls in (ZShape, TShape, OShape, LShape, IShape)
}


def make_shape(kind: str, rng: Rand | None = None) -> Shape:
    """Build a piece of ``kind`` (Z, T, O, L or I) with random placement."""
    try:
        cls = _SHAPES[kind]
    except KeyError:
        raise ValueError(f"Type error: unknown shape {kind!r}") from None
    return cls(rng)


def main(argv: Sequence[str] | None = None) -> int:
    """Clear the screen and show one random piece in red for a moment."""
    parser = argparse.ArgumentParser(description="Show a random piece.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the draws")
    parser.add_argument("--delay", type=float, default=2.0, help="seconds to show it")
    args = parser.parse_args(argv)
    rng = Rand(args.seed) if args.seed is not None else shared_rand()
    sys.stdout.write(_CLEAR_SCREEN)
    shape = make_shape(random_kind(rng), rng)
    shape.draw()
    shape.x, shape.y = 3, 3
    shape.render(Color.RED)
    sys.stdout.flush()
    time.sleep(max(args.delay, 0.0))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())