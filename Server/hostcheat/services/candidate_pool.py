"""
Candidate Pool

Tracks every word the host may still claim as the answer, together with how
much each one would have revealed against the guesses made so far.
"""

from typing import Iterable, Iterator, List

from ..models.game import Candidate
from .evaluator import count_statuses, evaluate_guess


class CandidatePool:
    """
    Ordered collection of candidates.

    Ordering matters: once the host commits, the word at the front of the
    pool is the answer.
    """

    def __init__(self, words: Iterable[str]):
        self.candidates: List[Candidate] = [Candidate(word=word) for word in words]
        if not self.candidates:
            raise ValueError("Candidate pool cannot be empty")

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    @property
    def front(self) -> Candidate:
        return self.candidates[0]

    def update(self, guess: str) -> None:
        """
        Scores the guess against every candidate that has only ever looked
        like a total miss, then sorts the pool by score (lowest first).
        """
        for candidate in self.candidates:
            # Frozen candidates stay tie contenders for a single round only
            if candidate.needs_tie_check and not candidate.needs_update:
                candidate.needs_tie_check = False

            if candidate.needs_update:
                hits, presents, _ = count_statuses(evaluate_guess(candidate.word, guess))
                candidate.hit = hits
                candidate.present = presents
                candidate.score = hits + presents

                if candidate.score > 0:
                    candidate.needs_update = False
                    candidate.needs_tie_check = True

        # list.sort is stable, equal scores keep their previous relative order
        self.candidates.sort(key=lambda c: c.score)

    def has_zero_score(self) -> bool:
        return any(c.score == 0 for c in self.candidates)

    def has_revealed(self) -> bool:
        """True when at least one candidate would have produced a non-miss letter."""
        return any(c.score > 0 or c.hit > 0 or c.present > 0 for c in self.candidates)

    def tied_candidates(self) -> List[Candidate]:
        """
        Candidates the host may commit to now.

        Empty while any candidate is still a perfect miss. Otherwise the tie
        contenders revealing the fewest hits, then the fewest presents.
        """
        contenders = [c for c in self.candidates if c.needs_tie_check]
        if not contenders or self.has_zero_score():
            return []

        if len(contenders) == 1:
            return contenders

        least = min((c.hit, c.present) for c in contenders)
        return [c for c in contenders if (c.hit, c.present) == least]

    def promote(self, tied: List[Candidate]) -> None:
        """Moves the tied candidates to the front, keeping relative order."""
        tied_ids = {id(c) for c in tied}
        self.candidates.sort(key=lambda c: id(c) not in tied_ids)
