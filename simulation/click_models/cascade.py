"""Cascade Click Model.

Models user as scanning top-down and clicking the first sufficiently
relevant posting. User stops after the first click (or at max_depth).
"""

from typing import List, Sequence
import numpy as np

from core.base import ClickSimulator


class CascadeModel(ClickSimulator):
    """Cascade model: user clicks first relevant posting, then stops."""

    def __init__(self, relevance_threshold: int = 3, max_depth: int = 10):
        self.relevance_threshold = relevance_threshold
        self.max_depth = max_depth

    def simulate(
        self,
        relevance: Sequence[int],
        rng: np.random.Generator,
    ) -> List[int]:
        """Return the first position at or above the threshold, or nothing.

        The rng is unused; cascade clicks are deterministic.
        """
        for pos, rel_grade in enumerate(relevance):
            if pos >= self.max_depth:
                break
            if int(rel_grade) >= self.relevance_threshold:
                return [pos]

        return []

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"CascadeModel(threshold={self.relevance_threshold}, "
            f"max_depth={self.max_depth})"
        )
