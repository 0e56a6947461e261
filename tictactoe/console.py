"""Terminal front end: prints the board and reads the player's answers."""
from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Callable, List, Optional

from .ai import DIFFICULTIES
from .config import FIRST_MOVERS, ConfigError, GameConfig, load_config
from .game import Outcome, Prompt, TTTGame
from .player import Player
from .validation import InvalidInputError, joinor

REJECTIONS = {
    Prompt.NAME: "Sorry, you must enter a name.",
    Prompt.MARKER: "Sorry, that marker is not available.",
    Prompt.FIRST_MOVER: "Sorry, must be 1, 2 or 3.",
    Prompt.SQUARE: "Sorry, that's not a valid choice.",
    Prompt.PLAY_AGAIN: "Sorry, must be y or n.",
}


class ConsoleUI:
    def __init__(
        self,
        clear_screen: bool = True,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.clear_screen = clear_screen
        self._read = read or input
        self._write = write or print

    def say(self, text: str = "") -> None:
        self._write(text)

    def clear(self) -> None:
        if self.clear_screen:
            os.system("cls" if os.name == "nt" else "clear")

    # ------------------------------------------------------------------
    def welcome(self, game: TTTGame) -> None:
        self.clear()
        self.say("Welcome to Tic Tac Toe!")
        self.say()
        self.say(f"The first to score {game.config.win_target} points wins the game.")
        self.say()

    def goodbye(self, game: TTTGame) -> None:
        self.say()
        self.say(f"Thanks for playing Tic Tac Toe, {game.human.name}! Goodbye!")
        self.say()

    def render(self, game: TTTGame) -> None:
        self.clear()
        human, computer = game.human, game.computer
        self.say(f"************ Round {game.round} ************")
        self.say()
        self.say(f"{human.name}: {human.score}. {computer.name}: {computer.score}.")
        self.say()
        self.say(game.board.render_ascii())
        self.say()
        self.say(f'Your marker: "{human.marker}". {computer.name}\'s marker: "{computer.marker}".')
        self.say()

    def prompt(self, kind: Prompt, game: TTTGame) -> str:
        if kind is Prompt.NAME:
            question = "What's your name?"
        elif kind is Prompt.MARKER:
            question = f"Choose a single-character marker (anything but {game.computer.marker}):"
        elif kind is Prompt.FIRST_MOVER:
            question = f"Who goes first? 1) {game.human.name}  2) {game.computer.name}  3) Random"
        elif kind is Prompt.SQUARE:
            question = f"Choose a square ({joinor(game.board.unmarked_keys())}):"
        elif kind is Prompt.NEXT_ROUND:
            self.say("------------------------------------")
            question = "Press 'enter' to play the next round."
        else:
            self.say("-----------------------------------")
            question = "Would you like to play again? (y/n)"
        self.say(question)
        return self._read("> ")

    def reject(self, kind: Prompt, error: InvalidInputError) -> None:
        self.say()
        self.say(REJECTIONS.get(kind, str(error)))

    def round_over(self, game: TTTGame, outcome: Outcome) -> None:
        if game.champion() is not None:
            return
        if outcome is Outcome.HUMAN_WON:
            self.say("### You won the round! ###")
        elif outcome is Outcome.COMPUTER_WON:
            self.say(f"### {game.computer.name} won the round! ###")
        else:
            self.say("It's a tie!")
        self.say()

    def game_over(self, game: TTTGame, champion: Player) -> None:
        target = game.config.win_target
        if champion.is_human:
            message = f"You scored {target} points and have won the game!"
        else:
            message = f"{champion.name} scored {target} points and has won the game!"
        self.say("*" * len(message))
        self.say(message)
        self.say("*" * len(message))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Tic Tac Toe against the computer")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with game settings")
    parser.add_argument("--win-target", type=int, default=None, help="Round wins needed to take the game")
    parser.add_argument("--first", choices=FIRST_MOVERS, default=None, help="Who moves first each round")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default=None, help="Computer opponent strength")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible games")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the terminal between moves")
    return parser


def parse_config(parser: argparse.ArgumentParser, argv: Optional[List[str]] = None) -> GameConfig:
    args = parser.parse_args(argv)
    try:
        config = load_config(args.config)
        return config.with_overrides(
            win_target=args.win_target,
            first_mover=args.first,
            difficulty=args.difficulty,
            seed=args.seed,
            clear_screen=False if args.no_clear else None,
        )
    except ConfigError as exc:
        parser.error(str(exc))
        raise


def main(argv: Optional[List[str]] = None) -> None:
    config = parse_config(build_parser(), argv)
    ui = ConsoleUI(clear_screen=config.clear_screen)
    game = TTTGame(config, ui)
    try:
        game.play()
    except (EOFError, KeyboardInterrupt):
        ui.goodbye(game)


if __name__ == "__main__":
    main()
