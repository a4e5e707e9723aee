"""
play/play_cli.py

Play one game of Yorkle in the terminal:
- Today's answer is read from answer.txt (or drawn from the word list with --random).
- You get 6 attempts by default (--max-attempts); each is checked against words.txt and scored letter by letter.
- When the game ends, your stats in stats.txt are updated and printed.

Run:
  python -m play.play_cli --words words.txt --answer answer.txt --stats stats.txt

End of input (Ctrl-D) leaves the game unfinished and stats untouched.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

import colorama

from yorkle.config import (
    ANSWER_FILENAME,
    MAX_ATTEMPTS,
    STATS_FILENAME,
    WORD_LIST_FILENAME,
    WORD_SIZE,
    GameConfig,
)
from yorkle.data_utils import load_answer, load_word_set
from yorkle.errors import StatsStoreError, ValidationError, WordSourceError
from yorkle.render import render_result, render_stats
from yorkle.sampler import WordSampler
from yorkle.session import GameSession
from yorkle.stats import record_outcome, summarize
from yorkle.store import load_stats, save_stats

logger = logging.getLogger(__name__)


def read_attempt(num_attempt: int, stream: Optional[TextIO] = None, word_size: int = WORD_SIZE) -> Optional[str]:
    """Prompt with 'Attempt #N: ' and return the next token, lowercased and cut to
    `word_size` characters. Blank lines are skipped. Returns None at end of input."""
    stream = stream if stream is not None else sys.stdin
    print(f"Attempt #{num_attempt}: ", end="", flush=True)
    while True:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read attempt: %s", e)
            return None
        if not line:
            return None
        tokens = line.split()
        if tokens:
            return tokens[0][:word_size].lower()


def parse_args(argv: Optional[List[str]] = None) -> GameConfig:
    ap = argparse.ArgumentParser(description="Guess the secret word, scored letter by letter")
    ap.add_argument("--words", default=WORD_LIST_FILENAME, help="Path to the accepted word list")
    ap.add_argument("--answer", default=ANSWER_FILENAME, help="Path to the file holding today's answer")
    ap.add_argument("--stats", default=STATS_FILENAME, help="Path to the stats file")
    ap.add_argument("--random", action="store_true", help="Draw the answer from the word list instead")
    ap.add_argument("--seed", type=int, default=None, help="Seed for --random")
    ap.add_argument("--word-size", type=int, default=WORD_SIZE, help="Letters per word")
    ap.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS, help="Attempts per game")
    ap.add_argument("--no-color", action="store_true", help="Use plain markers instead of colors")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = ap.parse_args(argv)

    try:
        return GameConfig(
            words_path=args.words,
            answer_path=args.answer,
            stats_path=args.stats,
            word_size=args.word_size,
            max_attempts=args.max_attempts,
            random_answer=args.random,
            seed=args.seed,
            color=not args.no_color,
            verbose=args.verbose,
        )
    except ValueError as e:
        ap.error(str(e))


def run(config: GameConfig, stream: Optional[TextIO] = None) -> int:
    """Play one game. Returns the process exit status."""
    try:
        words = load_word_set(config.words_path, config.word_size)
        if config.random_answer:
            answer = WordSampler(words, seed=config.seed).choice_word()
        else:
            answer = load_answer(config.answer_path, config.word_size)
    except WordSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    stats = load_stats(config.stats_path, config.max_attempts)
    session = GameSession(answer, words, max_attempts=config.max_attempts)

    while not session.done:
        attempt = read_attempt(session.next_attempt, stream, config.word_size)
        if attempt is None:
            print()
            logger.info("Input ended before the game finished; stats not updated")
            return 0
        try:
            record = session.play(attempt)
        except ValidationError as e:
            print(f"'{e.attempt}' is not a valid word.", file=sys.stderr)
            continue
        print(render_result(record.result, color=config.color))

    if session.won:
        print(f"\nYou got it in {session.attempts_used}!")
    else:
        print(f"\nOut of attempts. The word was '{session.secret}'.")

    status = 0
    stats = record_outcome(stats, session.attempts_used)
    try:
        save_stats(config.stats_path, stats)
    except StatsStoreError as e:
        print(f"Error: stats were not saved: {e}", file=sys.stderr)
        status = 2

    print()
    print(render_stats(summarize(stats)))
    return status


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if config.color:
        colorama.just_fix_windows_console()
    try:
        return run(config)
    except KeyboardInterrupt:
        print("\nbye!")
        return 130


if __name__ == "__main__":
    sys.exit(main())
