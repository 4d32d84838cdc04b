"""Capability interface for ranking strategies.

A ranking strategy orders a candidate set. Strategies are pure functions of
their input: they must not mutate it and must return a permutation of it.
The evaluation code depends only on this contract, never on which concrete
strategy is installed.
"""

from typing import List, Protocol, Sequence, runtime_checkable

from core.types import Candidate


@runtime_checkable
class RankingStrategy(Protocol):
    """Anything with a ``name`` and a pure ``rank`` method.

    Attributes:
        name: Identifier used in logs and reports.
    """

    name: str

    def rank(self, candidates: Sequence[Candidate]) -> List[Candidate]:
        """Return every candidate exactly once, best first."""
        ...
