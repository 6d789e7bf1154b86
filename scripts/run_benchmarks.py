#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import statistics as stats
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from approx.factory import available_games
from approx.paths import runs_dir
from approx.selector import spawn_rngs
from approx.simulation import Simulation
from approx.tracking import log_metrics, log_params, maybe_mlflow_run


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    half = 1.96 * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    seeds: int = 5
    games: int = 10_000
    seed: Optional[int] = 0
    tracking: str = "none"  # or "mlflow"
    log_dir: Path = field(default_factory=runs_dir)


def games_per_second(name: str, games: int, rng) -> float:
    sim = Simulation(name, rng)
    t0 = time.perf_counter()
    for _ in range(games):
        sim.play()
    elapsed = time.perf_counter() - t0
    return games / elapsed if elapsed > 0 else float("nan")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Games-per-second for each variant, over several seeds")
    ap.add_argument("--seeds", type=int, default=Config.seeds, help="Independent streams per variant")
    ap.add_argument("--games", type=int, default=Config.games)
    ap.add_argument("--seed", type=int, default=Config.seed, help="Root seed the streams are spawned from")
    ap.add_argument("--tracking", choices=["none", "mlflow"], default="none")
    ns = ap.parse_args(argv)
    cfg = Config(seeds=ns.seeds, games=ns.games, seed=ns.seed, tracking=ns.tracking)

    with maybe_mlflow_run(cfg.tracking == "mlflow", run_name="benchmarks",
                          log_dir=cfg.log_dir) as tracking:
        if tracking:
            log_params({"seeds": cfg.seeds, "games": cfg.games, "seed": cfg.seed})
        for name in available_games():
            # one independently seeded generator per measured worker
            rates = [games_per_second(name, cfg.games, rng) for rng in spawn_rngs(cfg.seed, cfg.seeds)]
            m, h = ci95(rates)
            print(f"{name}: {m:,.0f} ± {h:,.0f} games/s (95% CI, N={cfg.seeds}, {cfg.games} games each)")
            if tracking:
                log_metrics({f"{name}_games_per_s_mean": m, f"{name}_games_per_s_ci95_half": h})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
