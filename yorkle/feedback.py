"""
Feedback utilities for Yorkle.

Scores a guess against the secret word, one verdict per letter position.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class Verdict(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


@dataclass(frozen=True)
class FeedbackResult:
    guess: str
    verdicts: Tuple[Verdict, ...]

    @property
    def fully_correct(self) -> bool:
        return all(v is Verdict.CORRECT for v in self.verdicts)

    def __len__(self) -> int:
        return len(self.verdicts)

    def __iter__(self):
        return iter(self.verdicts)

    def __getitem__(self, idx: int) -> Verdict:
        return self.verdicts[idx]


def compare(secret: str, guess: str) -> FeedbackResult:
    """
    Compute the per-position feedback for `guess` against `secret`.

    Returns
    -------
    FeedbackResult
        One verdict per position:
        - CORRECT: the letter matches the secret at that position
        - PRESENT: the letter is in the secret, at a position not yet matched
        - ABSENT:  the letter is not in the secret, or every occurrence of it
                   has already been matched by an earlier verdict

    Duplicate handling (two passes)
    -------------------------------
    1) Exact matches are marked CORRECT and their secret positions consumed.
    2) Every other position takes the leftmost unconsumed secret position
       holding the same letter (PRESENT, consuming it) or becomes ABSENT.

    Both words must have the same length; callers validate guesses first
    (see `yorkle.validator.validate`). A mismatch raises ValueError.
    """
    if not isinstance(secret, str) or not isinstance(guess, str):
        raise TypeError("secret and guess must be strings")
    if len(secret) != len(guess):
        raise ValueError(
            f"secret and guess must have the same length ({len(secret)} != {len(guess)})"
        )

    verdicts = [Verdict.ABSENT] * len(guess)
    consumed = [False] * len(secret)

    # Pass 1: exact matches
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            verdicts[i] = Verdict.CORRECT
            consumed[i] = True

    # Pass 2: misplaced letters, leftmost free position first
    for i, g in enumerate(guess):
        if verdicts[i] is Verdict.CORRECT:
            continue
        for j, s in enumerate(secret):
            if not consumed[j] and s == g:
                verdicts[i] = Verdict.PRESENT
                consumed[j] = True
                break

    return FeedbackResult(guess=guess, verdicts=tuple(verdicts))


if __name__ == "__main__":
    P, C, A = Verdict.PRESENT, Verdict.CORRECT, Verdict.ABSENT
    assert list(compare("bread", "erase")) == [P, C, P, A, A]
    assert list(compare("blood", "boron")) == [C, P, A, C, A]
    assert compare("crane", "crane").fully_correct
    print("feedback.py sanity checks passed.")
