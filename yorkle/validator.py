"""
validator.py

Gatekeeper run on every raw attempt before it reaches the feedback engine.
"""

from yorkle.config import WORD_SIZE
from yorkle.errors import NotInWordList, WrongLength
from yorkle.vocab import WordSet


def validate(words: WordSet, attempt: str, word_size: int = WORD_SIZE) -> str:
    """
    Check `attempt` against the length and word-list rules, in that order.

    Returns the attempt lowercased. Raises WrongLength if it is not exactly
    `word_size` characters, then NotInWordList if `words` does not contain it.
    Both carry the offending attempt; formatting the message is up to the caller.
    """
    if not isinstance(attempt, str):
        raise TypeError("attempt must be a string")
    if len(attempt) != word_size:
        raise WrongLength(attempt, word_size)

    word = attempt.lower()
    if word not in words:
        raise NotInWordList(attempt)
    return word
