import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tictactoe.config import GameConfig
from tictactoe.console import ConsoleUI, build_parser, main, parse_config
from tictactoe.game import Prompt, TTTGame


def scripted_console(lines):
    answers = iter(lines)
    output = []

    def read(_prompt: str) -> str:
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    return ConsoleUI(clear_screen=False, read=read, write=output.append), output


def test_square_prompt_lists_free_squares() -> None:
    ui, output = scripted_console(["5"])
    game = TTTGame(GameConfig(first_mover="human", seed=0), ui)
    game.play_move(1)
    game.play_move(2)
    assert ui.prompt(Prompt.SQUARE, game) == "5"
    assert output[-1] == "Choose a square (3, 4, 5, 6, 7, 8, or 9):"


def test_render_shows_round_scores_and_board() -> None:
    ui, output = scripted_console([])
    game = TTTGame(GameConfig(first_mover="human", seed=0, computer_names=["Hal"]), ui)
    game.human.name = "Ada"
    game.play_move(5)
    ui.render(game)
    text = "\n".join(output)
    assert "************ Round 1 ************" in text
    assert "Ada: 0. Hal: 0." in text
    assert "     |  X  |   " in text
    assert 'Your marker: "X". Hal\'s marker: "O".' in text


def test_full_console_game(capsys) -> None:
    ui, output = scripted_console(["Ada", "1", "2", "4", "n"])
    game = TTTGame(GameConfig(first_mover="human", win_target=1, seed=0), ui)
    game.play()
    text = "\n".join(output)
    assert text.startswith("Welcome to Tic Tac Toe!")
    assert "The first to score 1 points wins the game." in text
    assert f"{game.computer.name} scored 1 points and has won the game!" in text
    assert "Would you like to play again? (y/n)" in text
    assert output[-2] == "Thanks for playing Tic Tac Toe, Ada! Goodbye!"


def test_round_result_messages() -> None:
    ui, output = scripted_console(["Ada", "1", "2", "4", ""])
    game = TTTGame(GameConfig(first_mover="human", win_target=2, computer_names=["Hal"], seed=0), ui)
    game.setup_players()
    game.play_round()
    assert "### Hal won the round! ###" in output


def test_rejections_are_explained() -> None:
    ui, output = scripted_console(["", "Ada"])
    game = TTTGame(GameConfig(seed=0), ui)
    game.setup_players()
    assert "Sorry, you must enter a name." in output


def test_parse_config_applies_flags(tmp_path: Path) -> None:
    path = tmp_path / "game.yaml"
    path.write_text("win_target: 4\ndifficulty: medium\n", encoding="utf-8")
    config = parse_config(build_parser(), ["--config", str(path), "--first", "computer", "--seed", "9", "--no-clear"])
    assert config.win_target == 4
    assert config.difficulty == "medium"
    assert config.first_mover == "computer"
    assert config.seed == 9
    assert config.clear_screen is False


def test_parse_config_reports_bad_values(capsys) -> None:
    with pytest.raises(SystemExit):
        parse_config(build_parser(), ["--win-target", "0"])
    assert "win_target must be at least 1" in capsys.readouterr().err


def test_main_exits_cleanly_on_end_of_input(monkeypatch, capsys) -> None:
    def closed(_prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    main(["--no-clear", "--seed", "1"])
    out = capsys.readouterr().out
    assert "Welcome to Tic Tac Toe!" in out
    assert "Goodbye!" in out


def test_parse_config_rejects_negative_seed(capsys) -> None:
    with pytest.raises(SystemExit):
        parse_config(build_parser(), ["--seed", "-1"])
    assert "seed must not be negative" in capsys.readouterr().err
