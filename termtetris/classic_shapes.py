"""Three-by-three falling pieces for the classic board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from termtetris.terminal import Color, CubePoint

_SIZE = 3

_PATTERNS: dict[str, tuple[tuple[int, ...], ...]] = {
    "Z": ((1, 1, 0), (0, 1, 1), (0, 0, 0)),
    "T": ((1, 1, 1), (0, 1, 0), (0, 0, 0)),
    "O": ((1, 1, 0), (1, 1, 0), (0, 0, 0)),
    "L": ((0, 1, 0), (0, 1, 0), (0, 1, 1)),
    "I": ((0, 1, 0), (0, 1, 0), (0, 1, 0)),
}


class Direction(IntEnum):
    """Ways a piece can be moved."""

    DOWN = 0
    LEFT = 1
    RIGHT = 2


def _empty_grid() -> list[list[int]]:
    return [[0] * _SIZE for _ in range(_SIZE)]


@dataclass
class ClassicShape:
    """A piece of kind ``kind``: a 3x3 grid whose top-left cell sits at (``x``, ``y``)."""

    kind: str
    grid: list[list[int]] = field(default_factory=_empty_grid)
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.kind not in _PATTERNS:
            raise ValueError(f"Type error: unknown shape {self.kind!r}")
        if len(self.grid) != _SIZE or any(len(row) != _SIZE for row in self.grid):
            raise ValueError("a shape grid must be 3x3")
        self.grid = [list(row) for row in self.grid]

    def move(self, direction: int) -> None:
        """Shift one step down, left or right; other values do nothing."""
        if direction == Direction.DOWN:
            self.x += 1
        elif direction == Direction.LEFT:
            self.y -= 1
        elif direction == Direction.RIGHT:
            self.y += 1

    def roll(self) -> None:
        """Turn the grid a quarter turn anticlockwise; O pieces never turn."""
        if self.kind == "O":
            return
        self.grid = [list(row) for row in zip(*self.grid)][::-1]

    def cells(self) -> list[tuple[int, int]]:
        """Board positions of the occupied cells, row by row."""
        return [
            (self.x + i, self.y + j)
            for i, row in enumerate(self.grid)
            for j, value in enumerate(row)
            if value == 1
        ]

    def render(self, color: Color) -> None:
        """Paint every occupied cell in ``color``."""
        for row, column in self.cells():
            CubePoint(color, row, column).render()


def make_classic_shape(kind: str) -> ClassicShape:
    """Build a piece of ``kind`` (Z, T, O, L or I) with its pattern drawn in."""
    if kind not in _PATTERNS:
        raise ValueError(f"Type error: unknown shape {kind!r}")
    return ClassicShape(kind, [list(row) for row in _PATTERNS[kind]])