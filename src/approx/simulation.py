"""
Simulation controller: play many random games and tally the outcomes.

Every game is a fresh instance; only the random generator is carried from one
game to the next, so a run is reproducible from its seed.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from .factory import require_game
from .games import Game
from .selector import make_rng


def play_out(game: Game) -> str:
    """Play ``game`` to the end and return its winner label."""
    while not game.check_termination():
        game.play()
    return game.winner()


class Simulation:
    """Repeated playthroughs of one variant with a running tally."""

    def __init__(self, game_name: str, rng: Optional[np.random.Generator] = None) -> None:
        self._rng = rng if rng is not None else make_rng()
        # fail on a bad name before any game is played
        probe = require_game(game_name, self._rng)
        self.game_name = probe.name
        self._dimension = probe.dimension()
        self._counts: Dict[str, int] = {}
        self.games_played = 0
        self.last_game: Optional[Game] = None

    def dimension(self) -> int:
        return self._dimension

    def play(self) -> str:
        game = require_game(self.game_name, self._rng)
        label = play_out(game)
        self._counts[label] = self._counts.get(label, 0) + 1
        self.games_played += 1
        self.last_game = game
        return label

    def result(self) -> Dict[str, int]:
        return dict(self._counts)


@dataclass
class SimulationResult:
    game: str
    games: int
    seed: int
    counts: Dict[str, int] = field(default_factory=dict)
    elapsed_s: float = 0.0

    def total(self) -> int:
        return sum(self.counts.values())

    def frequencies(self) -> Dict[str, float]:
        if self.games == 0:
            return {k: 0.0 for k in self.counts}
        return {k: v / self.games for k, v in self.counts.items()}

    def games_per_second(self) -> float:
        return self.games / self.elapsed_s if self.elapsed_s > 0 else float("nan")


def simulate(game_name: str, games: int, seed: Optional[int] = None) -> SimulationResult:
    if games < 0:
        raise ValueError(f"Number of games must be non-negative: {games}")
    if seed is None:
        seed = time.time_ns()
    sim = Simulation(game_name, make_rng(seed))
    logging.info("Simulating %d %s games (seed=%d)", games, sim.game_name, seed)
    t0 = time.perf_counter()
    for _ in range(games):
        sim.play()
    elapsed = time.perf_counter() - t0
    if sim.last_game is not None:
        logging.debug("Final board of last game (%s):\n%s",
                      sim.last_game.winner(), sim.last_game.board.render())
    result = SimulationResult(
        game=sim.game_name,
        games=games,
        seed=seed,
        counts=sim.result(),
        elapsed_s=elapsed,
    )
    logging.info("Finished %d games in %.3fs", games, elapsed)
    return result
