"""Board representation and line scanning for classic 3x3 Tic-Tac-Toe.

Squares are addressed with the keys ``1..9`` in row-major order, matching the
numbers a player types at the prompt::

     1 | 2 | 3
    ---+---+---
     4 | 5 | 6
    ---+---+---
     7 | 8 | 9

The board only knows about markers (single characters).  Mapping a marker back
to the player who owns it is the controller's job.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

Marker = str
Line = Tuple[int, int, int]

SQUARE_KEYS: Tuple[int, ...] = tuple(range(1, 10))
CENTER_KEY = 5

WIN_LINES: Tuple[Line, ...] = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    (1, 5, 9),
    (3, 5, 7),
)


class InvalidMoveError(RuntimeError):
    """Raised when a square is marked that is out of range or already taken."""


@dataclass
class Square:
    INITIAL_MARKER = " "

    marker: Marker = INITIAL_MARKER

    def unmarked(self) -> bool:
        return self.marker == self.INITIAL_MARKER

    def marked(self) -> bool:
        return not self.unmarked()

    def __str__(self) -> str:
        return self.marker


def _fresh_squares() -> Dict[int, Square]:
    return {key: Square() for key in SQUARE_KEYS}


@dataclass
class Board:
    """Nine squares plus the queries the controller and the AI need."""

    squares: Dict[int, Square] = field(default_factory=_fresh_squares)

    def reset(self) -> None:
        self.squares = _fresh_squares()

    def __getitem__(self, key: int) -> Marker:
        return self.get(key)

    def __setitem__(self, key: int, marker: Marker) -> None:
        self.apply(key, marker)

    def get(self, key: int) -> Marker:
        if key not in self.squares:
            raise KeyError(f"square {key} is not on the board")
        return self.squares[key].marker

    def markers(self) -> List[Marker]:
        """Markers of all squares in key order (blank for unmarked)."""

        return [self.squares[key].marker for key in SQUARE_KEYS]

    def apply(self, key: int, marker: Marker) -> None:
        if len(marker) != 1 or marker == Square.INITIAL_MARKER:
            raise ValueError("marker must be a single non-blank character")
        if isinstance(key, bool) or key not in self.squares:
            raise InvalidMoveError(f"Square {key} is not in range 1..9")
        if self.squares[key].marked():
            raise InvalidMoveError(f"Square {key} is already marked")
        self.squares[key].marker = marker

    def unmarked_keys(self) -> List[int]:
        return [key for key in SQUARE_KEYS if self.squares[key].unmarked()]

    def is_full(self) -> bool:
        return not self.unmarked_keys()

    def is_center_unmarked(self) -> bool:
        return self.squares[CENTER_KEY].unmarked()

    def winning_marker(self) -> Optional[Marker]:
        line = self.winning_line()
        if line is None:
            return None
        return self.squares[line[0]].marker

    def winning_line(self) -> Optional[Line]:
        for line in WIN_LINES:
            a, b, c = (self.squares[key] for key in line)
            if a.marked() and a.marker == b.marker == c.marker:
                return line
        return None

    def someone_won(self) -> bool:
        return self.winning_marker() is not None

    def find_at_risk_square(self, marker: Marker) -> Optional[int]:
        """Return the empty key completing a line ``marker`` already holds twice.

        Lines are scanned in ``WIN_LINES`` order and the first match wins, so the
        result is deterministic when several lines are at risk.
        """

        for line in WIN_LINES:
            owned = [key for key in line if self.squares[key].marker == marker]
            empty = [key for key in line if self.squares[key].unmarked()]
            if len(owned) == 2 and len(empty) == 1:
                return empty[0]
        return None

    def render_ascii(self) -> str:
        def row(keys: Tuple[int, int, int]) -> List[str]:
            cells = "  |  ".join(str(self.squares[key]) for key in keys)
            return ["     |     |", f"  {cells}", "     |     |"]

        rows: List[str] = []
        for index, keys in enumerate(WIN_LINES[:3]):
            rows.extend(row(keys))
            if index < 2:
                rows.append("-----+-----+-----")
        return "\n".join(rows)
