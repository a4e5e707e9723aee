from collections import Counter

import numpy as np
import pytest

from yorkle.feedback import Verdict, compare

C, P, A = Verdict.CORRECT, Verdict.PRESENT, Verdict.ABSENT


def test_bread_erase():
    # 'e' at 4 has no free 'e' left once index 0 took the only one
    assert list(compare("bread", "erase")) == [P, C, P, A, A]


def test_blood_boron():
    assert list(compare("blood", "boron")) == [C, P, A, C, A]


@pytest.mark.parametrize("secret", ["crane", "blood", "aaaaa", "zzyzx"])
def test_exact_guess_is_fully_correct(secret):
    result = compare(secret, secret)
    assert list(result) == [C] * 5
    assert result.fully_correct is True


def test_no_overlap_is_all_absent():
    result = compare("crane", "sloth")
    assert list(result) == [A] * 5
    assert result.fully_correct is False


def test_extra_repeats_in_guess_resolve_absent():
    # one 'b' in the secret, matched in place, so the other 'b' is absent
    assert list(compare("cabin", "abbey")) == [P, A, C, A, A]
    assert list(compare("total", "allot")) == [P, P, A, P, P]
    assert list(compare("spree", "press")) == [P, P, P, P, A]


def test_correct_takes_precedence_over_earlier_present():
    # the 'l' at guess index 0 must not steal the 'l' that index 3 matches exactly
    assert list(compare("hello", "lxxlx")) == [P, A, A, C, A]


def test_result_keeps_guess():
    result = compare("bread", "erase")
    assert result.guess == "erase"
    assert len(result) == 5


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        compare("bread", "brea")


def test_non_string_raises():
    with pytest.raises(TypeError):
        compare("bread", None)


def test_inputs_are_not_mutated():
    secret, guess = "blood", "boron"
    compare(secret, guess)
    assert (secret, guess) == ("blood", "boron")


def test_random_pairs_respect_letter_counts():
    rng = np.random.default_rng(0)
    alphabet = list("abcd")  # small alphabet forces duplicates
    for _ in range(500):
        secret = "".join(rng.choice(alphabet, size=5))
        guess = "".join(rng.choice(alphabet, size=5))
        result = compare(secret, guess)

        assert len(result) == 5
        hits = [g for g, v in zip(guess, result) if v in (C, P)]
        assert len(hits) <= 5
        secret_counts = Counter(secret)
        for letter, n in Counter(hits).items():
            assert n <= secret_counts[letter]
        # exact matches are always CORRECT
        for i, (g, s) in enumerate(zip(guess, secret)):
            assert (result[i] is C) == (g == s)
        assert result.fully_correct == (guess == secret)
