"""
Guess Evaluation

Scores a guess against a target word and checks hard-mode legality.
"""

from typing import List, Optional

from ..models.game import Feedback, LetterStatus


def evaluate_guess(target: str, guess: str) -> Feedback:
    """
    Implements the authentic Wordle letter evaluation algorithm.

    Exact matches are resolved first so that a repeated guess letter is only
    marked PRESENT while unmatched occurrences remain in the target.
    """
    result: List[Optional[LetterStatus]] = []

    # Working copy to track letter consumption
    target_chars: List[Optional[str]] = list(target)

    # First pass: Mark all exact position matches (HIT)
    for i, letter in enumerate(guess):
        if i < len(target_chars) and letter == target_chars[i]:
            result.append(LetterStatus.HIT)
            target_chars[i] = None
        else:
            result.append(None)  # Placeholder for second pass

    # Second pass: Mark present letters (PRESENT) and misses (MISS)
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in target_chars:
            result[i] = LetterStatus.PRESENT
            # Remove first occurrence to prevent double-counting
            target_chars[target_chars.index(letter)] = None
        else:
            result[i] = LetterStatus.MISS

    return [status for status in result if status is not None]


def count_statuses(feedback: Feedback) -> tuple:
    """Returns (hits, presents, misses) for a guess result."""
    return (
        feedback.count(LetterStatus.HIT),
        feedback.count(LetterStatus.PRESENT),
        feedback.count(LetterStatus.MISS),
    )


def is_valid_hard_mode_guess(guess: str, last_guess: str, last_feedback: Feedback) -> bool:
    """
    Hard mode: every HIT of the previous guess must stay in place and every
    PRESENT letter of the previous guess must be reused somewhere.
    """
    for i, status in enumerate(last_feedback):
        if status == LetterStatus.HIT and (i >= len(guess) or guess[i] != last_guess[i]):
            return False

    present_letters = [last_guess[i] for i, status in enumerate(last_feedback) if status == LetterStatus.PRESENT]
    return all(letter in guess for letter in present_letters)
