"""Tic-Tac-Toe against a rule-based computer opponent, played in the terminal."""
from .ai import MoveSelector
from .arena import Arena, ArenaResult
from .board import Board, InvalidMoveError, Square
from .config import ConfigError, GameConfig, load_config
from .console import ConsoleUI, main
from .game import GameError, Outcome, Phase, Prompt, TTTGame
from .player import Player, Role
from .validation import InvalidInputError

__all__ = [
    "MoveSelector",
    "Arena",
    "ArenaResult",
    "Board",
    "InvalidMoveError",
    "Square",
    "ConfigError",
    "GameConfig",
    "load_config",
    "ConsoleUI",
    "main",
    "GameError",
    "Outcome",
    "Phase",
    "Prompt",
    "TTTGame",
    "Player",
    "Role",
    "InvalidInputError",
]
