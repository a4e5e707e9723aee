"""
stats.py

Cumulative player statistics: a histogram of wins by number of attempts
used, plus the number of games lost.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from yorkle.config import MAX_ATTEMPTS


@dataclass(frozen=True)
class PlayerStats:
    wins: Tuple[int, ...] = field(default_factory=lambda: (0,) * MAX_ATTEMPTS)
    losses: int = 0

    def __post_init__(self) -> None:
        wins = tuple(self.wins)
        if not wins:
            raise ValueError("wins must have at least one slot")
        if any((not isinstance(w, int)) or w < 0 for w in wins):
            raise ValueError("win counts must be non-negative integers")
        if not isinstance(self.losses, int) or self.losses < 0:
            raise ValueError("losses must be a non-negative integer")
        object.__setattr__(self, "wins", wins)

    @classmethod
    def empty(cls, max_attempts: int = MAX_ATTEMPTS) -> "PlayerStats":
        return cls(wins=(0,) * max_attempts, losses=0)

    @property
    def max_attempts(self) -> int:
        return len(self.wins)

    @property
    def total_wins(self) -> int:
        return sum(self.wins)

    @property
    def played(self) -> int:
        return self.total_wins + self.losses


@dataclass(frozen=True)
class DistributionRow:
    attempts: int
    wins: int
    bar: int


@dataclass(frozen=True)
class StatsSummary:
    played: int
    win_rate: float
    distribution: Tuple[DistributionRow, ...]


def record_outcome(stats: PlayerStats, attempts_used: Optional[int]) -> PlayerStats:
    """
    Return `stats` updated with one finished game.

    `attempts_used` is the attempt number that found the word. None, or a
    number beyond the attempt limit, records a loss.
    """
    if attempts_used is None or attempts_used > stats.max_attempts:
        return PlayerStats(wins=stats.wins, losses=stats.losses + 1)
    if attempts_used < 1:
        raise ValueError(f"attempts_used must be >= 1, got {attempts_used}")

    wins = list(stats.wins)
    wins[attempts_used - 1] += 1
    return PlayerStats(wins=tuple(wins), losses=stats.losses)


def summarize(stats: PlayerStats, max_width: Optional[int] = None) -> StatsSummary:
    """
    Played count, win percentage and guess distribution for display.

    Bars are one mark per win. With `max_width`, bars are scaled so the
    largest is `max_width` marks; any non-zero count keeps at least one.
    """
    if max_width is not None and max_width <= 0:
        raise ValueError("max_width must be positive")

    played = stats.played
    win_rate = 100.0 * stats.total_wins / played if played else 0.0

    peak = max(stats.wins)
    rows = []
    for i, w in enumerate(stats.wins):
        bar = w
        if max_width is not None and peak > max_width and w > 0:
            bar = max(1, round(w * max_width / peak))
        rows.append(DistributionRow(attempts=i + 1, wins=w, bar=bar))

    return StatsSummary(played=played, win_rate=win_rate, distribution=tuple(rows))
