"""
Host-Cheat Resolver

Decides which feedback the host returns for each guess. While the host is
ADVERSARIAL it answers "all miss" for as long as some candidate still makes
that truthful, and when it can no longer do so it commits to the candidate
that gives away the least. Once COMMITTED every guess is scored honestly
against the committed word.
"""

from enum import Enum
from typing import Iterable

from ..models.game import Feedback, LetterStatus
from .candidate_pool import CandidatePool
from .evaluator import evaluate_guess


class ResolverState(Enum):
    ADVERSARIAL = "adversarial"
    COMMITTED = "committed"


class HostCheatResolver:
    """Answer selection for one game."""

    def __init__(self, words: Iterable[str]):
        self.pool = CandidatePool(words)
        # A single word leaves nothing to cheat with
        self.state = ResolverState.COMMITTED if len(self.pool) == 1 else ResolverState.ADVERSARIAL

    @property
    def committed(self) -> bool:
        return self.state is ResolverState.COMMITTED

    @property
    def answer(self) -> str:
        """The word the host currently claims; fixed once committed."""
        return self.pool.front.word

    def resolve(self, guess: str) -> Feedback:
        """Returns the feedback for an already validated guess."""
        if self.committed:
            return evaluate_guess(self.answer, guess)

        self.pool.update(guess)

        tied = self.pool.tied_candidates()
        if tied:
            self.pool.promote(tied)
            return self._commit(guess)

        if len(self.pool) > 1 and self.pool.has_revealed():
            return [LetterStatus.MISS] * len(guess)

        return self._commit(guess)

    def _commit(self, guess: str) -> Feedback:
        self.state = ResolverState.COMMITTED
        return evaluate_guess(self.answer, guess)
