from collections import Counter
from itertools import product

import pytest

from hostcheat.config import WORD_LIST
from hostcheat.models.game import LetterStatus
from hostcheat.services.evaluator import count_statuses, evaluate_guess, is_valid_hard_mode_guess

H, P, M = LetterStatus.HIT, LetterStatus.PRESENT, LetterStatus.MISS


@pytest.mark.parametrize("target,guess,expected", [
    ("PANIC", "CRAZY", [P, M, P, M, M]),
    ("PANIC", "QUITE", [M, M, P, M, M]),
    ("PANIC", "FANCY", [M, H, H, P, M]),
    ("WORLD", "HELLO", [M, M, M, H, P]),
    ("WORLD", "SCARE", [M, M, M, P, M]),
    ("LEVEL", "BELLE", [M, H, P, P, P]),
    ("SCOOP", "COOLS", [P, P, H, M, P]),
    ("CRANE", "RAISE", [P, P, M, M, H]),
    ("WORLD", "LLAMA", [P, M, M, M, M]),
    ("WORLD", "WORDS", [H, H, H, P, M]),
])
def test_evaluate_guess(target, guess, expected):
    assert evaluate_guess(target, guess) == expected


def test_matching_guess_is_all_hits():
    for word in WORD_LIST:
        assert evaluate_guess(word, word) == [H] * 5


def test_letter_credit_never_exceeds_target_multiplicity():
    words = WORD_LIST[:25]
    for target, guess in product(words, words):
        result = evaluate_guess(target, guess)
        assert len(result) == len(guess)

        credited = Counter(letter for letter, status in zip(guess, result) if status != M)
        target_counts = Counter(target)
        for letter, count in credited.items():
            assert count <= target_counts[letter]


def test_count_statuses():
    assert count_statuses([H, P, M, M, H]) == (2, 1, 2)


class TestHardMode:

    def test_hits_must_stay_in_place(self):
        last = [H, M, P, M, M]
        assert is_valid_hard_mode_guess("CHAOS", "CRANE", last)
        assert not is_valid_hard_mode_guess("SCALD", "CRANE", last)

    def test_present_letters_must_be_reused(self):
        assert not is_valid_hard_mode_guess("CLOTH", "CRANE", [H, M, P, M, M])
        assert is_valid_hard_mode_guess("PIANO", "CRAZY", [M, M, P, M, M])

    def test_all_miss_allows_anything(self):
        assert is_valid_hard_mode_guess("QUIET", "HELLO", [M] * 5)

    def test_validation_is_repeatable(self):
        args = ("SCALD", "CRANE", [H, M, P, M, M])
        assert is_valid_hard_mode_guess(*args) == is_valid_hard_mode_guess(*args)
