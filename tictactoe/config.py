"""Game settings loaded from YAML."""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .ai import DIFFICULTIES

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"

FIRST_MOVERS = ("human", "computer", "random", "choose")


class ConfigError(ValueError):
    """Raised for unreadable or inconsistent game settings."""


@dataclass(frozen=True)
class GameConfig:
    win_target: int = 3
    first_mover: str = "choose"
    difficulty: str = "hard"
    human_marker: str = "X"
    computer_marker: str = "O"
    choose_marker: bool = False
    computer_names: List[str] = field(
        default_factory=lambda: ["R2D2", "Hal", "Chappie", "Sonny", "Number 5"]
    )
    clear_screen: bool = True
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.win_target, bool) or not isinstance(self.win_target, int):
            raise ConfigError("win_target must be an integer")
        if self.win_target < 1:
            raise ConfigError("win_target must be at least 1")
        if self.first_mover not in FIRST_MOVERS:
            raise ConfigError(f"first_mover must be one of {', '.join(FIRST_MOVERS)}")
        if self.difficulty not in DIFFICULTIES:
            raise ConfigError(f"difficulty must be one of {', '.join(DIFFICULTIES)}")
        for name in ("human_marker", "computer_marker"):
            marker = getattr(self, name)
            if not isinstance(marker, str) or len(marker) != 1 or marker.isspace():
                raise ConfigError(f"{name} must be a single visible character")
        if self.human_marker.lower() == self.computer_marker.lower():
            raise ConfigError("human_marker and computer_marker must differ")
        if not self.computer_names or not all(
            isinstance(name, str) and name.strip() for name in self.computer_names
        ):
            raise ConfigError("computer_names must be a non-empty list of names")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError("seed must be an integer or null")
        if self.seed is not None and self.seed < 0:
            raise ConfigError("seed must not be negative")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        values: Dict[str, Any] = dict(data)
        if "computer_names" in values:
            names = values["computer_names"]
            if not isinstance(names, list):
                raise ConfigError("computer_names must be a list")
            values["computer_names"] = list(names)
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "GameConfig":
        """Return a copy with every override that is not ``None`` applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def load_config(path: Optional[Path] = None) -> GameConfig:
    config_path = DEFAULT_CONFIG_PATH if path is None else Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"cannot read config {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {config_path}: {exc}") from exc

    if data is None:
        return GameConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping of settings")
    return GameConfig.from_dict(data)
