from __future__ import annotations

import pytest

from tictactoe.validation import (
    InvalidInputError,
    joinor,
    parse_choice,
    parse_marker,
    parse_name,
    parse_square,
    parse_yes_no,
)


def test_parse_square_accepts_free_square() -> None:
    assert parse_square(" 5\n", [1, 5, 9]) == 5


@pytest.mark.parametrize("raw", ["", "five", "2", "10", "1.5"])
def test_parse_square_rejects(raw: str) -> None:
    with pytest.raises(InvalidInputError):
        parse_square(raw, [1, 5, 9])


def test_invalid_input_is_a_value_error() -> None:
    assert issubclass(InvalidInputError, ValueError)


@pytest.mark.parametrize("raw, expected", [("y", True), ("Y ", True), ("n", False), ("N", False)])
def test_parse_yes_no(raw: str, expected: bool) -> None:
    assert parse_yes_no(raw) is expected


@pytest.mark.parametrize("raw", ["yes", "", "q"])
def test_parse_yes_no_rejects(raw: str) -> None:
    with pytest.raises(InvalidInputError):
        parse_yes_no(raw)


def test_parse_choice() -> None:
    assert parse_choice("2", ("1", "2", "3")) == "2"
    with pytest.raises(InvalidInputError):
        parse_choice("4", ("1", "2", "3"))


def test_parse_marker() -> None:
    assert parse_marker("#", taken=["O"]) == "#"
    with pytest.raises(InvalidInputError):
        parse_marker("o", taken=["O"])
    with pytest.raises(InvalidInputError):
        parse_marker("XY")
    with pytest.raises(InvalidInputError):
        parse_marker("   ")


def test_parse_name() -> None:
    assert parse_name("  Ada ") == "Ada"
    with pytest.raises(InvalidInputError):
        parse_name("   ")


@pytest.mark.parametrize(
    "items, expected",
    [
        ([], ""),
        ([1], "1"),
        ([1, 2], "1 or 2"),
        ([1, 2, 3], "1, 2, or 3"),
        ([4, 7, 8, 9], "4, 7, 8, or 9"),
    ],
)
def test_joinor(items, expected: str) -> None:
    assert joinor(items) == expected


def test_joinor_custom_word() -> None:
    assert joinor([1, 2, 3], "; ", "and") == "1; 2; and 3"
