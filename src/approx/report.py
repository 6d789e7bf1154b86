"""
Result reporting: console tally lines and an optional JSON run summary.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from .paths import get_git_commit, get_git_is_dirty
from .simulation import SimulationResult

SUMMARY_VERSION = "1.0.0"


def format_tally(counts: Dict[str, int]) -> List[str]:
    """One ``LABEL: COUNT`` line per label, in first-encountered order."""
    return [f"{label}: {count}" for label, count in counts.items()]


def summary_dict(result: SimulationResult, cli_argv: Optional[List[str]] = None) -> Dict[str, Any]:
    return {
        "summary_version": SUMMARY_VERSION,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "game": result.game,
        "games": result.games,
        "seed": result.seed,
        "counts": dict(result.counts),
        "frequencies": result.frequencies(),
        "elapsed_s": result.elapsed_s,
        "git_commit": get_git_commit(),
        "git_is_dirty": get_git_is_dirty(),
        "python": {
            "python_version": sys.version.split(" ")[0],
            "packages": {"numpy": np.__version__},
        },
        "cli_argv": cli_argv,
    }


def write_summary(out_dir: Path, result: SimulationResult,
                  cli_argv: Optional[List[str]] = None) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / "summary.json"
    path.write_text(json.dumps(summary_dict(result, cli_argv), indent=2))
    logging.info("Wrote %s", path)
    return path
