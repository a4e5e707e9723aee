from pathlib import Path

from yorkle.config import WORD_SIZE
from yorkle.errors import WordSourceError
from yorkle.vocab import WordSet


def load_word_set(path: str, word_size: int = WORD_SIZE) -> WordSet:
    """
    Load the accepted guesses from `path`.
    Wrong-length and non-alphabetic entries are skipped; an empty result is an error.
    """
    return WordSet.from_file(path, word_size=word_size)


def load_answer(path: str, word_size: int = WORD_SIZE) -> str:
    """
    Read today's answer: the first whitespace-delimited token of `path`, lowercased.
    Raises WordSourceError if the file is missing or the token is not a valid word.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordSourceError(f"cannot read answer file {path}: {e}") from e

    tokens = text.split()
    if not tokens:
        raise WordSourceError(f"answer file {path} is empty")
    answer = tokens[0].lower()
    if len(answer) != word_size or not (answer.isascii() and answer.isalpha()):
        raise WordSourceError(f"answer '{answer}' is not a {word_size}-letter word")
    return answer
