"""Player name and score shown beside the board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from termtetris.terminal import Color, CubePoint, move_cursor, restore_cursor, save_cursor
from termtetris import terminal

_MARK_COLUMN = 19
_TEXT_COLUMN = 21


@dataclass
class Score:
    """A player's name and accumulated score; ``row`` is where it is drawn."""

    player: str = "hvala"
    score: int = 0
    row: int = 10

    @classmethod
    def from_stream(cls, stream: TextIO) -> "Score":
        """Take the player's name as the first word read from ``stream``."""
        for line in stream:
            words = line.split()
            if words:
                return cls(player=words[0])
        raise ValueError("no player name in stream")

    def add(self, points: int) -> None:
        """Add ``points`` to the score."""
        self.score += points

    def _line(self, row: int, color: Color, text: str) -> None:
        CubePoint(color, row, _MARK_COLUMN).render()
        save_cursor()
        move_cursor(row, _TEXT_COLUMN)
        terminal._emit(text)
        restore_cursor()

    def render(self) -> None:
        """Draw the player's name and score to the right of the board."""
        self._line(self.row, Color.WHITE, f"player:{self.player}")
        self._line(self.row + 2, Color.GREEN, f"score:{self.score}")