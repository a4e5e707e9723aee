class YorkleError(Exception):
    """Base class for every error raised by the yorkle package."""


class WordSourceError(YorkleError):
    """The word list or the answer could not be loaded."""


class StatsStoreError(YorkleError):
    """Player stats could not be written."""


class GameOverError(YorkleError):
    """An attempt was played on a finished game."""


class ValidationError(YorkleError, ValueError):
    """A guess was rejected before scoring. Carries the offending attempt."""

    def __init__(self, attempt: str, message: str) -> None:
        super().__init__(message)
        self.attempt = attempt


class WrongLength(ValidationError):
    def __init__(self, attempt: str, word_size: int) -> None:
        super().__init__(attempt, f"'{attempt}' has {len(attempt)} letters, expected {word_size}")
        self.word_size = word_size


class NotInWordList(ValidationError):
    def __init__(self, attempt: str) -> None:
        super().__init__(attempt, f"'{attempt}' is not in the word list")
