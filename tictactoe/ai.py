"""Rule-based computer opponent.

The ``hard`` selector walks a fixed priority chain: complete its own at-risk
line, block the opponent's at-risk line, take the center, otherwise play a
random free square.  Lower difficulties drop links from the chain.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from .board import CENTER_KEY, Board, Marker

DIFFICULTIES = ("easy", "medium", "hard")


def winning_square(board: Board, marker: Marker) -> Optional[int]:
    return board.find_at_risk_square(marker)


def blocking_square(board: Board, opponent: Marker) -> Optional[int]:
    return board.find_at_risk_square(opponent)


def random_square(keys: Sequence[int], rng: np.random.Generator) -> int:
    if not keys:
        raise ValueError("cannot choose from an empty sequence of squares")
    return int(keys[int(rng.integers(len(keys)))])


@dataclass
class MoveSelector:
    difficulty: str = "hard"
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def __post_init__(self) -> None:
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(
                f"difficulty must be one of {', '.join(DIFFICULTIES)}, got {self.difficulty!r}"
            )

    def choose(self, board: Board, own: Marker, opponent: Marker) -> int:
        moves = board.unmarked_keys()
        if not moves:
            raise ValueError("no unmarked squares left to choose from")

        if self.difficulty != "easy":
            winning = winning_square(board, own)
            if winning is not None:
                return winning
            block = blocking_square(board, opponent)
            if block is not None:
                return block

        if self.difficulty == "hard" and board.is_center_unmarked():
            return CENTER_KEY

        return random_square(moves, self.rng)
