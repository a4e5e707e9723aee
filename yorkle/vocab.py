from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

import pandas as pd

from yorkle.config import WORD_SIZE
from yorkle.errors import WordSourceError

logger = logging.getLogger(__name__)


class WordSet:
    """Read-only set of accepted guess words, used for membership tests."""

    def __init__(self, words: Iterable[str]) -> None:
        if isinstance(words, str):
            raise TypeError("`words` must be an iterable of strings, not a single string")
        ordered: List[str] = []
        seen = set()
        for w in words:
            if not isinstance(w, str):
                raise TypeError("all items in `words` must be str")
            w = w.lower()
            # Duplicates are harmless; keep the first occurrence
            if w in seen:
                continue
            seen.add(w)
            ordered.append(w)

        self._words: tuple[str, ...] = tuple(ordered)
        self._members = frozenset(ordered)

    # ---------- Construction helpers ----------

    @classmethod
    def from_file(
        cls,
        path: str,
        column: str = "word",
        *,
        word_size: int = WORD_SIZE,
        alpha_only: bool = True,
    ) -> "WordSet":
        """
        Load words from a text file (whitespace separated) or a CSV with a `column` column.

        Parameters
        ----------
        path : str
            Path to the word file. Files ending in ``.csv`` are read as CSV with a header.
        column : str
            Column name containing words (CSV only).
        word_size : int, default=5
            Required word length; other entries are dropped.
        alpha_only : bool, default=True
            If True, keep only ASCII alphabetic words.

        Raises
        ------
        WordSourceError
            If the file cannot be read or no valid word remains after filtering.
        """
        try:
            if str(path).endswith(".csv"):
                df = pd.read_csv(path, dtype=str, keep_default_na=False)
                if column not in df.columns:
                    raise WordSourceError(f"column '{column}' not found in {path}")
                raw = df[column]
            else:
                # whitespace-delimited tokens; commas and quotes are just characters
                tokens = Path(path).read_text(encoding="utf-8").split()
                raw = pd.Series(tokens, dtype=object, name=column)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise WordSourceError(f"cannot read word list {path}: {e}") from e

        clean: List[str] = []
        for val in raw.tolist():
            w = str(val).strip().lower()
            if len(w) != word_size:
                continue
            if alpha_only and not (w.isascii() and w.isalpha()):
                continue
            clean.append(w)

        if not clean:
            raise WordSourceError(f"no valid {word_size}-letter words in {path}")

        words = cls(clean)
        logger.info("Loaded %s words from %s", len(words), path)
        return words

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of distinct words."""
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def contains(self, word: str) -> bool:
        """Return True iff `word` (lowercased) is an accepted guess."""
        return word.lower() in self._members

    def words(self) -> List[str]:
        """Return a copy of the words in load order."""
        return list(self._words)

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]
