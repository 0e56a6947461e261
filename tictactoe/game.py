"""Round and game controller.

``TTTGame`` owns the board, both players and the round counter.  It never
reads or prints text itself: everything the player sees or types goes through
a ``UserInterface`` so the same controller drives the console front end, the
tests and scripted sessions.

A game is a sequence of rounds.  Each move is followed by a win check and then
a full-board check; a round won adds one point to the winner, and the first
player to reach ``config.win_target`` points takes the game.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Protocol, Tuple, TypeVar

import numpy as np

from .ai import MoveSelector
from .board import Board
from .config import GameConfig
from .player import Player, Role
from .validation import (
    FIRST_MOVER_CHOICES,
    InvalidInputError,
    parse_choice,
    parse_marker,
    parse_name,
    parse_square,
    parse_yes_no,
)

T = TypeVar("T")


class Outcome(Enum):
    HUMAN_WON = "human_won"
    COMPUTER_WON = "computer_won"
    TIE = "tie"


class Phase(Enum):
    AWAITING_MOVE = "awaiting_move"
    ROUND_OVER = "round_over"
    GAME_OVER = "game_over"


class Prompt(Enum):
    """What the controller is asking the player for."""

    NAME = "name"
    MARKER = "marker"
    FIRST_MOVER = "first_mover"
    SQUARE = "square"
    NEXT_ROUND = "next_round"
    PLAY_AGAIN = "play_again"


class UserInterface(Protocol):
    def welcome(self, game: "TTTGame") -> None: ...

    def goodbye(self, game: "TTTGame") -> None: ...

    def render(self, game: "TTTGame") -> None: ...

    def prompt(self, kind: Prompt, game: "TTTGame") -> str: ...

    def reject(self, kind: Prompt, error: InvalidInputError) -> None: ...

    def round_over(self, game: "TTTGame", outcome: Outcome) -> None: ...

    def game_over(self, game: "TTTGame", champion: Player) -> None: ...


class GameError(RuntimeError):
    """Raised when the controller is driven out of order."""


class TTTGame:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        ui: Optional[UserInterface] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.ui = ui
        self.rng = rng or np.random.default_rng(self.config.seed)
        self.selector = MoveSelector(self.config.difficulty, self.rng)
        self.board = Board()

        computer_name = str(self.rng.choice(self.config.computer_names))
        self.human = Player(self.config.human_marker, "Player", Role.HUMAN)
        self.computer = Player(self.config.computer_marker, computer_name, Role.COMPUTER)

        self.round = 1
        self.first_to_move = self._fixed_first_mover() or self.human
        self.current = self.first_to_move
        self.phase = Phase.AWAITING_MOVE
        self.last_outcome: Optional[Outcome] = None

    # ------------------------------------------------------------------
    @property
    def players(self) -> Tuple[Player, Player]:
        return self.human, self.computer

    def opponent_of(self, player: Player) -> Player:
        return self.computer if player is self.human else self.human

    def owner_of(self, marker: Optional[str]) -> Optional[Player]:
        for player in self.players:
            if player.marker == marker:
                return player
        return None

    def round_winner(self) -> Optional[Player]:
        return self.owner_of(self.board.winning_marker())

    def champion(self) -> Optional[Player]:
        """The player who has reached the win target, if any."""

        for player in self.players:
            if player.score >= self.config.win_target:
                return player
        return None

    # ------------------------------------------------------------------
    def play_move(self, key: int) -> Optional[Outcome]:
        """Mark ``key`` for the player on turn and advance the state machine.

        Returns the round outcome when the move ends the round, otherwise
        ``None`` after handing the turn to the other player.  Illegal squares
        raise ``InvalidMoveError`` from the board and leave the state untouched.
        """

        if self.phase is not Phase.AWAITING_MOVE:
            raise GameError(f"cannot move while the game is in phase {self.phase.value}")

        self.board.apply(key, self.current.marker)

        winner = self.round_winner()
        if winner is not None:
            winner.add_point()
            outcome = Outcome.HUMAN_WON if winner.is_human else Outcome.COMPUTER_WON
            return self._end_round(outcome)
        if self.board.is_full():
            return self._end_round(Outcome.TIE)

        self.current = self.opponent_of(self.current)
        return None

    def _end_round(self, outcome: Outcome) -> Outcome:
        self.last_outcome = outcome
        self.phase = Phase.GAME_OVER if self.champion() is not None else Phase.ROUND_OVER
        return outcome

    def computer_move(self) -> int:
        return self.selector.choose(self.board, self.computer.marker, self.human.marker)

    def next_round(self) -> None:
        if self.phase is not Phase.ROUND_OVER:
            raise GameError("next_round is only valid after a round that did not end the game")
        self.round += 1
        self._reset_round()

    def reset_game(self, first_to_move: Optional[Player] = None) -> None:
        for player in self.players:
            player.reset_score()
        self.round = 1
        if first_to_move is not None:
            self.first_to_move = first_to_move
        self._reset_round()

    def _reset_round(self) -> None:
        self.board.reset()
        self.current = self.first_to_move
        self.last_outcome = None
        self.phase = Phase.AWAITING_MOVE

    # ------------------------------------------------------------------
    def _fixed_first_mover(self) -> Optional[Player]:
        policy = self.config.first_mover
        if policy == "human":
            return self.human
        if policy == "computer":
            return self.computer
        return None

    def choose_first_mover(self) -> Player:
        """Resolve the first-mover policy for a new game."""

        fixed = self._fixed_first_mover()
        if fixed is not None:
            return fixed
        if self.config.first_mover == "choose":
            answer = self._ask(Prompt.FIRST_MOVER, lambda raw: parse_choice(raw, FIRST_MOVER_CHOICES))
            if answer == "1":
                return self.human
            if answer == "2":
                return self.computer
        return self.human if self.rng.integers(2) == 0 else self.computer

    def _require_ui(self) -> UserInterface:
        if self.ui is None:
            raise GameError("an interactive session needs a user interface")
        return self.ui

    def _ask(self, kind: Prompt, parse: Callable[[str], T]) -> T:
        ui = self._require_ui()
        while True:
            raw = ui.prompt(kind, self)
            try:
                return parse(raw)
            except InvalidInputError as exc:
                ui.reject(kind, exc)

    def setup_players(self) -> None:
        self.human.name = self._ask(Prompt.NAME, parse_name)
        if self.config.choose_marker:
            self.human.marker = self._ask(
                Prompt.MARKER, lambda raw: parse_marker(raw, taken=[self.computer.marker])
            )

    def take_turn(self) -> Optional[Outcome]:
        if self.current.is_human:
            key = self._ask(Prompt.SQUARE, lambda raw: parse_square(raw, self.board.unmarked_keys()))
        else:
            key = self.computer_move()
        outcome = self.play_move(key)
        self._require_ui().render(self)
        return outcome

    def play_round(self) -> Outcome:
        ui = self._require_ui()
        ui.render(self)
        outcome = None
        while outcome is None:
            outcome = self.take_turn()
        ui.round_over(self, outcome)
        return outcome

    def play_game(self) -> Player:
        """Play rounds until someone reaches the win target."""

        ui = self._require_ui()
        while True:
            self.play_round()
            champion = self.champion()
            if champion is not None:
                ui.game_over(self, champion)
                return champion
            self._ask(Prompt.NEXT_ROUND, lambda raw: raw)
            self.next_round()

    def play(self) -> None:
        ui = self._require_ui()
        ui.welcome(self)
        self.setup_players()
        while True:
            self.reset_game(self.choose_first_mover())
            self.play_game()
            if not self._ask(Prompt.PLAY_AGAIN, parse_yes_no):
                break
        ui.goodbye(self)
