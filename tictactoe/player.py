"""Players and their scores."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .board import Marker


class Role(Enum):
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass
class Player:
    marker: Marker
    name: str
    role: Role
    score: int = 0

    @property
    def is_human(self) -> bool:
        return self.role is Role.HUMAN

    def add_point(self) -> None:
        self.score += 1

    def reset_score(self) -> None:
        self.score = 0
