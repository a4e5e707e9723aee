"""
session.py

One game of Yorkle: a secret word, the accepted guesses, and the attempts
played so far.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from yorkle.config import MAX_ATTEMPTS
from yorkle.errors import GameOverError
from yorkle.feedback import FeedbackResult, compare
from yorkle.validator import validate
from yorkle.vocab import WordSet


@dataclass(frozen=True)
class AttemptRecord:
    index: int
    guess: str
    result: FeedbackResult


class GameSession:
    """
    Game state for a single secret word.

    API
    ---
    play(attempt: str) -> AttemptRecord
        Validates and scores one attempt. A rejected attempt raises
        ValidationError and does not use up an attempt.

    attempts_used -> Optional[int]
        The attempt number that found the word, or None if the game was
        lost or is still in progress. This is what gets recorded in stats.
    """

    def __init__(
        self,
        secret: str,
        words: WordSet,
        *,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        if not isinstance(words, WordSet):
            raise TypeError("words must be a WordSet")
        if not isinstance(secret, str) or not secret:
            raise ValueError("secret must be a non-empty string")
        if max_attempts <= 0:
            raise ValueError("max_attempts must be positive")

        self._secret = secret.lower()
        self.words = words
        self.max_attempts = int(max_attempts)
        self._history: List[AttemptRecord] = []
        self._won = False

    @property
    def word_size(self) -> int:
        return len(self._secret)

    def play(self, attempt: str) -> AttemptRecord:
        if self.done:
            raise GameOverError("game is over; start a new session")

        guess = validate(self.words, attempt, self.word_size)
        result = compare(self._secret, guess)

        record = AttemptRecord(index=len(self._history) + 1, guess=guess, result=result)
        self._history.append(record)
        if result.fully_correct:
            self._won = True
        return record

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def history(self) -> List[AttemptRecord]:
        return list(self._history)

    @property
    def won(self) -> bool:
        return self._won

    @property
    def done(self) -> bool:
        return self._won or len(self._history) >= self.max_attempts

    @property
    def remaining(self) -> int:
        return 0 if self._won else self.max_attempts - len(self._history)

    @property
    def next_attempt(self) -> int:
        return len(self._history) + 1

    @property
    def attempts_used(self) -> Optional[int]:
        return len(self._history) if self._won else None

    @property
    def secret(self) -> Optional[str]:
        """The secret word, revealed once the game is over."""
        return self._secret if self.done else None
