"""Evaluation arena comparing two selector difficulties over many rounds."""
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .ai import DIFFICULTIES, MoveSelector
from .board import Board

__all__ = ["Arena", "ArenaResult", "main"]

FIRST_MARKER = "X"
SECOND_MARKER = "O"


@dataclass
class ArenaResult:
    wins: int
    losses: int
    draws: int

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> float:
        return self.wins / self.total if self.total else 0.0


@dataclass
class Arena:
    """Plays ``challenger`` against ``baseline``; results are from the challenger's side."""

    challenger: str = "hard"
    baseline: str = "easy"
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def play_round(self, challenger_first: bool) -> Optional[str]:
        """Play one round and return the winning marker, or ``None`` for a tie."""

        selectors = {
            FIRST_MARKER: MoveSelector(self.challenger if challenger_first else self.baseline, self.rng),
            SECOND_MARKER: MoveSelector(self.baseline if challenger_first else self.challenger, self.rng),
        }
        board = Board()
        marker, other = FIRST_MARKER, SECOND_MARKER
        while not board.someone_won() and not board.is_full():
            board.apply(selectors[marker].choose(board, marker, other), marker)
            marker, other = other, marker
        return board.winning_marker()

    def play_matches(self, num_games: int = 200) -> ArenaResult:
        results = ArenaResult(wins=0, losses=0, draws=0)

        for game_index in range(num_games):
            challenger_first = game_index % 2 == 0
            challenger_marker = FIRST_MARKER if challenger_first else SECOND_MARKER
            winner = self.play_round(challenger_first)
            if winner is None:
                results.draws += 1
            elif winner == challenger_marker:
                results.wins += 1
            else:
                results.losses += 1

        return results


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pit two computer difficulties against each other")
    parser.add_argument("--games", type=int, default=200, help="Number of rounds to play")
    parser.add_argument("--first", choices=DIFFICULTIES, default="hard", help="Challenger difficulty")
    parser.add_argument("--second", choices=DIFFICULTIES, default="easy", help="Baseline difficulty")
    parser.add_argument("--seed", type=non_negative_int, default=None, help="Random seed for reproducibility")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    arena = Arena(args.first, args.second, np.random.default_rng(args.seed))
    result = arena.play_matches(args.games)
    print(
        f"{args.first} vs {args.second}: wins={result.wins} losses={result.losses} "
        f"draws={result.draws} win_rate={result.win_rate:.3f}"
    )


if __name__ == "__main__":
    main()
