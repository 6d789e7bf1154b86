from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import SimulationConfig
from .errors import UnknownGameVariant
from .factory import VARIANTS, available_games, require_game
from .report import format_tally, write_summary
from .simulation import simulate
from .tracking import log_artifact, log_metrics, log_params, maybe_mlflow_run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="approx", description="Random-play board game simulator")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the random generator (default: APPROX_SEED, else clock-derived)",
    )

    p_sim = sub.add_parser("simulate", help="Play many random games and tally the winners")
    p_sim.add_argument(
        "--game", default=None,
        help="Game variant, case-insensitive (default: APPROX_GAME or tictactoe)",
    )
    p_sim.add_argument(
        "--games", "-n", type=int, default=None,
        help="Number of games to play (default: APPROX_GAMES or 100000)",
    )
    p_sim.add_argument(
        "--out", type=Path, default=None, help="Write summary.json into this directory"
    )
    p_sim.add_argument(
        "--tracking",
        choices=["none", "mlflow"],
        default="none",
        help="Experiment tracking backend",
    )
    p_sim.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for tracking logs/artifacts (default: APPROX_RUNS_DIR, else <repo>/runs)",
    )

    sub.add_parser("games", help="List available game variants")

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy", "mlflow"]:
        if importlib.util.find_spec(pkg) is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            print(f"{pkg}={getattr(mod, '__version__', '?')}")


def _run_simulate(cfg: SimulationConfig, argv: list[str] | None) -> int:
    if cfg.games < 0:
        logging.error("Number of games must be non-negative: %d", cfg.games)
        return 2
    try:
        require_game(cfg.game)
    except UnknownGameVariant as e:
        logging.error("%s", e)
        return 2
    with maybe_mlflow_run(cfg.tracking == "mlflow", run_name=f"simulate_{cfg.game}",
                          log_dir=cfg.log_dir) as tracking:
        result = simulate(cfg.game, cfg.games, seed=cfg.seed)
        for line in format_tally(result.counts):
            print(line)
        summary = write_summary(cfg.out, result, cli_argv=argv) if cfg.out is not None else None
        if tracking:
            log_params({"game": result.game, "games": result.games, "seed": result.seed})
            metrics = {f"freq_{k.lower()}": v for k, v in result.frequencies().items()}
            metrics["games_per_s"] = result.games_per_second()
            log_metrics(metrics)
            if summary is not None:
                log_artifact(summary)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            from importlib.metadata import PackageNotFoundError, version as _ver

            print(_ver("approx"))
        except PackageNotFoundError:
            print("unknown")
        return 0
    if ns.info:
        _print_info()
        return 0

    if ns.cmd == "games":
        for name in available_games():
            cls = VARIANTS[name]
            print(f"{name}: {cls.width}x{cls.height} ({cls.width * cls.height} cells), "
                  f"connect {cls.connect}")
        return 0

    if ns.cmd == "simulate":
        try:
            cfg = SimulationConfig.from_env()
        except ValueError as e:
            logging.error("%s", e)
            return 2
        if ns.game is not None:
            cfg.game = ns.game
        if ns.games is not None:
            cfg.games = ns.games
        if ns.seed is not None:
            cfg.seed = ns.seed
        cfg.tracking = ns.tracking
        if ns.log_dir is not None:
            cfg.log_dir = ns.log_dir
        cfg.out = ns.out
        logging.debug("config=%s", cfg)
        return _run_simulate(cfg, list(argv) if argv is not None else None)

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
