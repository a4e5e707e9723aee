"""
sampler.py

Draws a secret word from the accepted words, for games started with --random.
"""

from __future__ import annotations

import random
from typing import List

from yorkle.vocab import WordSet


class WordSampler:
    """
    Picks secrets from a WordSet in its load order, so the same word file and
    seed always yield the same sequence of secrets.
    """

    def __init__(self, words: WordSet, seed: int | None = None) -> None:
        if not isinstance(words, WordSet):
            raise TypeError("words must be a WordSet")
        self._pool: List[str] = words.words()
        if not self._pool:
            raise ValueError("cannot draw a secret from an empty word set")
        self._rng = random.Random(seed)

    def __len__(self) -> int:
        return len(self._pool)

    def choice_word(self) -> str:
        return self._rng.choice(self._pool)
