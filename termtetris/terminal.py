"""ANSI cursor control and single coloured cells on a terminal."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum

_ESC = "\x1b"
_SAVE = f"{_ESC}[s"
_RESTORE = f"{_ESC}[u"
_RIGHT_ONE_CELL = f"{_ESC}[2C"
_DOWN_ONE_ROW = f"{_ESC}[1B"
_RESET = f"{_ESC}[0m"
_HIDDEN = f"{_ESC}[8m"
_CELL = "  "


class Color(IntEnum):
    """Cell colours, valued by their ANSI foreground code."""

    CLEAR = 0
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35
    DEEP_GREEN = 36
    WHITE = 37

    @property
    def sequence(self) -> str:
        """The text that paints one cell in this colour."""
        if self is Color.CLEAR:
            return _HIDDEN
        background = self.value + 10
        return f"{_ESC}[{background};{self.value}m{_CELL}{_RESET}"


def _emit(text: str) -> str:
    sys.stdout.write(text)
    return text


def save_cursor() -> str:
    """Save the cursor position; return the sequence written."""
    return _emit(_SAVE)


def restore_cursor() -> str:
    """Restore the saved cursor position; return the sequence written."""
    return _emit(_RESTORE)


def move_cursor(x: int, y: int) -> str:
    """Move the cursor down ``x`` rows and right ``y`` cells (two columns each)."""
    return _emit(_RIGHT_ONE_CELL * max(y, 0) + _DOWN_ONE_ROW * max(x, 0))


@dataclass
class CubePoint:
    """One board cell: a colour at row ``x``, column ``y``."""

    color: Color = Color.CLEAR
    x: int = 0
    y: int = 0

    def render(self) -> None:
        """Paint the cell in its colour, leaving the cursor where it was."""
        save_cursor()
        move_cursor(self.x, self.y)
        _emit(Color(self.color).sequence)
        restore_cursor()

    def erase(self) -> None:
        """Blank the cell, leaving the cursor where it was."""
        save_cursor()
        move_cursor(self.x, self.y)
        _emit(_CELL)
        restore_cursor()