"""
Run configuration with environment-first defaults.

APPROX_GAME, APPROX_GAMES and APPROX_SEED seed the CLI defaults and
APPROX_RUNS_DIR (via paths.runs_dir) the tracking directory; explicit
flags always win.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .paths import runs_dir

DEFAULT_GAME = "tictactoe"
DEFAULT_GAMES = 100_000


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def default_game() -> str:
    return os.getenv("APPROX_GAME") or DEFAULT_GAME


def default_games() -> int:
    n = _env_int("APPROX_GAMES")
    return DEFAULT_GAMES if n is None else n


def default_seed() -> Optional[int]:
    return _env_int("APPROX_SEED")


@dataclass
class SimulationConfig:
    game: str = DEFAULT_GAME
    games: int = DEFAULT_GAMES
    seed: Optional[int] = None
    tracking: str = "none"  # or "mlflow"
    log_dir: Path = field(default_factory=runs_dir)
    out: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        return cls(game=default_game(), games=default_games(), seed=default_seed())
