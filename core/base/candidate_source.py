"""Capability interface for candidate retrieval.

Candidate sources sit outside the evaluation core. They may fail; the
evaluation service treats any failure as "no candidates".
"""

from typing import Protocol, Sequence, runtime_checkable

from core.types import Candidate, FilterParams


@runtime_checkable
class CandidateSource(Protocol):
    """Anything that can fetch candidates for a filter request."""

    def fetch(self, filters: FilterParams) -> Sequence[Candidate]:
        """Fetch candidates for a request.

        Sources may pre-filter using ``filters``; the service applies the
        substring filters again, so returning the full pool is valid.

        Args:
            filters: Active filter criteria.

        Returns:
            Candidates with unique ids.

        Raises:
            Exception: Any retrieval failure.
        """
        ...
