"""Pure parsers for the raw lines the player types.

Every parser either returns a clean value or raises ``InvalidInputError``; the
retry loop that re-prompts lives with the caller.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from .board import Marker, Square

YES_NO = ("y", "n")
FIRST_MOVER_CHOICES = ("1", "2", "3")


class InvalidInputError(ValueError):
    """Raised when a line of input cannot be accepted."""


def parse_square(text: str, unmarked: Sequence[int]) -> int:
    try:
        key = int(text.strip())
    except ValueError:
        raise InvalidInputError(f"{text.strip()!r} is not a square number") from None
    if key not in unmarked:
        raise InvalidInputError(f"square {key} is not available")
    return key


def parse_choice(text: str, choices: Sequence[str]) -> str:
    answer = text.strip().lower()
    if answer not in choices:
        raise InvalidInputError(f"expected one of {', '.join(choices)}")
    return answer


def parse_yes_no(text: str) -> bool:
    return parse_choice(text, YES_NO) == "y"


def parse_marker(text: str, taken: Iterable[Marker] = ()) -> Marker:
    marker = text.strip()
    if len(marker) != 1 or marker == Square.INITIAL_MARKER:
        raise InvalidInputError("a marker must be exactly one visible character")
    if marker.lower() in {other.lower() for other in taken}:
        raise InvalidInputError(f"marker {marker!r} is already in use")
    return marker


def parse_name(text: str) -> str:
    name = text.strip()
    if not name:
        raise InvalidInputError("name cannot be empty")
    return name


def joinor(items: Sequence[object], delimiter: str = ", ", word: str = "or") -> str:
    """Join items for a prompt: ``1``, ``1 or 2``, ``1, 2, or 3``."""

    words = [str(item) for item in items]
    if len(words) <= 1:
        return "".join(words)
    if len(words) == 2:
        return f"{words[0]} {word} {words[1]}"
    return delimiter.join(words[:-1]) + f"{delimiter}{word} {words[-1]}"
