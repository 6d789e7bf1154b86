"""
Uniform random move selection.

Generators are passed explicitly rather than kept as process-wide state, so a
run is reproducible from its seed and workers can each own a stream.
"""
from __future__ import annotations

import time
from typing import List, Optional, Sequence

import numpy as np

from .errors import NoLegalMoves


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a generator seeded from ``seed``, or from the clock when None."""
    if seed is None:
        seed = time.time_ns()
    return np.random.default_rng(seed)


def spawn_rngs(seed: Optional[int], n: int) -> List[np.random.Generator]:
    """Independent generators derived from a single seed."""
    if seed is None:
        seed = time.time_ns()
    children = np.random.SeedSequence(seed).spawn(n)
    return [np.random.default_rng(s) for s in children]


def choose_move(candidates: Sequence[int], rng: np.random.Generator) -> int:
    if len(candidates) == 0:
        raise NoLegalMoves("No empty cells left to choose from")
    return int(candidates[int(rng.integers(len(candidates)))])
