"""
config.py

Game defaults and the resolved configuration for one CLI session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

WORD_SIZE = 5
MAX_ATTEMPTS = 6

WORD_LIST_FILENAME = "words.txt"
ANSWER_FILENAME = "answer.txt"
STATS_FILENAME = "stats.txt"


@dataclass(frozen=True)
class GameConfig:
    words_path: str = WORD_LIST_FILENAME
    answer_path: str = ANSWER_FILENAME
    stats_path: str = STATS_FILENAME
    word_size: int = WORD_SIZE
    max_attempts: int = MAX_ATTEMPTS
    random_answer: bool = False
    seed: Optional[int] = None
    color: bool = True
    verbose: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.word_size, int) or self.word_size <= 0:
            raise ValueError("word_size must be a positive integer")
        if not isinstance(self.max_attempts, int) or self.max_attempts <= 0:
            raise ValueError("max_attempts must be a positive integer")
