"""Run-directory and provenance helpers.

Environment first, then the nearest git checkout, then the working directory.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path


def _find_git_root(start: Path) -> Path | None:
    for cur in [start, *start.parents][:6]:
        if (cur / ".git").exists():
            return cur
    return None


def repo_root() -> Path:
    """Order: env var APPROX_REPO_ROOT -> nearest parent with .git -> CWD."""
    env = os.getenv("APPROX_REPO_ROOT")
    if env:
        return Path(env)
    git_root = _find_git_root(Path(__file__).resolve())
    return git_root if git_root is not None else Path.cwd()


def runs_dir() -> Path:
    p = os.getenv("APPROX_RUNS_DIR")
    return Path(p) if p else repo_root() / "runs"


def _git(*args: str) -> str | None:
    try:
        out = subprocess.check_output(
            ["git", "-C", str(repo_root()), *args],
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=2.0,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return out.strip()


def get_git_commit() -> str | None:
    """Current commit hash, or None outside a git checkout."""
    return _git("rev-parse", "HEAD") or None


def get_git_is_dirty() -> bool | None:
    """True with uncommitted changes, False if clean, None if unknown."""
    out = _git("status", "--porcelain")
    if out is None:
        return None
    return len(out) > 0
