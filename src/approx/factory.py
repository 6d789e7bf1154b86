"""Name-based lookup of game variants."""
from __future__ import annotations

from typing import Dict, List, Optional, Type

import numpy as np

from .errors import UnknownGameVariant
from .games import Game, Gomoku, Tictactoe

VARIANTS: Dict[str, Type[Game]] = {
    Tictactoe.name: Tictactoe,
    Gomoku.name: Gomoku,
}


def available_games() -> List[str]:
    return sorted(VARIANTS)


def create_game(name: str, rng: Optional[np.random.Generator] = None) -> Optional[Game]:
    """Fresh game for ``name`` (case-insensitive), or None if unknown."""
    cls = VARIANTS.get(name.strip().lower())
    if cls is None:
        return None
    return cls(rng)


def require_game(name: str, rng: Optional[np.random.Generator] = None) -> Game:
    game = create_game(name, rng)
    if game is None:
        raise UnknownGameVariant(
            f"Unknown game {name!r}; expected one of: {', '.join(available_games())}"
        )
    return game
