"""
store.py

Reads and writes PlayerStats as one line of integers: the win count for
each attempt number, then the loss count.

    0 3 17 21 6 8 2
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

import numpy as np

from yorkle.config import MAX_ATTEMPTS
from yorkle.errors import StatsStoreError
from yorkle.stats import PlayerStats

logger = logging.getLogger(__name__)


def load_stats(path: str, max_attempts: int = MAX_ATTEMPTS) -> PlayerStats:
    """
    Load stats from `path`. A missing file yields empty stats.

    A malformed file (wrong field count, non-integer or negative values,
    extra lines) is not partially trusted: stats reset to zero and a
    warning is logged.
    """
    p = Path(path)
    if not p.exists():
        logger.debug("No stats file at %s, starting from zero", path)
        return PlayerStats.empty(max_attempts)

    try:
        lines = [ln for ln in p.read_text(encoding="utf-8").splitlines() if ln.strip()]
        # one record per file; loadtxt would flatten one-value-per-line input
        values = np.loadtxt(lines, dtype=np.int64, ndmin=1) if len(lines) == 1 else None
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.warning("Stats file %s is unreadable (%s); resetting stats to zero", path, e)
        return PlayerStats.empty(max_attempts)

    if values is None or values.ndim != 1 or values.size != max_attempts + 1 or (values < 0).any():
        logger.warning(
            "Stats file %s is malformed (expected %d non-negative integers on one line); "
            "resetting stats to zero",
            path,
            max_attempts + 1,
        )
        return PlayerStats.empty(max_attempts)

    counts = [int(v) for v in values]
    return PlayerStats(wins=tuple(counts[:-1]), losses=counts[-1])


def save_stats(path: str, stats: PlayerStats) -> None:
    """
    Write `stats` to `path`, replacing the previous file atomically.
    Raises StatsStoreError if the file cannot be written.
    """
    row = np.asarray([*stats.wins, stats.losses], dtype=np.int64).reshape(1, -1)
    target = Path(path)

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
        ) as fh:
            tmp_name = fh.name
            np.savetxt(fh, row, fmt="%d", delimiter=" ", newline="\n")
        os.chmod(tmp_name, _file_mode(target))
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise StatsStoreError(f"cannot save stats to {path}: {e}") from e

    logger.debug("Saved stats to %s", path)


def _file_mode(target: Path) -> int:
    """Permissions for the replacement file: the existing file's, else the umask default."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
