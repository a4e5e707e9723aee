from __future__ import annotations

from typing import List

from colorama import Back, Fore, Style

from yorkle.feedback import FeedbackResult, Verdict
from yorkle.stats import StatsSummary

_COLORS = {
    Verdict.CORRECT: Back.GREEN + Fore.BLACK,
    Verdict.PRESENT: Back.BLACK + Fore.YELLOW,
    Verdict.ABSENT: Back.BLACK + Fore.WHITE,
}

# Plain markers for terminals without color
_MARKERS = {
    Verdict.CORRECT: "[{}]",
    Verdict.PRESENT: "({})",
    Verdict.ABSENT: " {} ",
}


def format_letter(letter: str, verdict: Verdict, color: bool = True) -> str:
    if color:
        return f"{_COLORS[verdict]}{letter}{Style.RESET_ALL}"
    return _MARKERS[verdict].format(letter)


def render_result(result: FeedbackResult, color: bool = True) -> str:
    """Single line with each letter of the guess styled by its verdict."""
    letters = "".join(format_letter(ch, v, color) for ch, v in zip(result.guess, result.verdicts))
    return f"Result: {letters}"


def render_stats(summary: StatsSummary) -> str:
    """
    Stats report, e.g.

        Played: 57
        Win %: 96.5%

        Guess distribution:
        1: 0
        2: *** 3
    """
    lines: List[str] = [
        f"Played: {summary.played}",
        f"Win %: {summary.win_rate:.1f}%",
        "",
        "Guess distribution:",
    ]
    for row in summary.distribution:
        bar = "*" * row.bar + " " if row.bar else ""
        lines.append(f"{row.attempts}: {bar}{row.wins}")
    return "\n".join(lines)
