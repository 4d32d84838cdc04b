"""Ranking strategies defined by a sort key.

Each strategy is a data-free closure over a scoring function: the
candidates are ordered by descending key, with ties kept in input order.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence
import numpy as np

from core.types import Candidate


def descending_order(values: Sequence[float]) -> np.ndarray:
    """Indices that sort ``values`` descending, ties broken by original index."""
    values = np.asarray(values, dtype=np.float64)
    indices = np.arange(len(values))
    return indices[np.lexsort((indices, -values))]


@dataclass(frozen=True)
class SortKeyStrategy:
    """Rank candidates by a per-candidate key, highest first.

    Attributes:
        name: Identifier used in logs and reports.
        key: Maps a candidate to its ranking value.
    """
    name: str
    key: Callable[[Candidate], float]

    def rank(self, candidates: Sequence[Candidate]) -> List[Candidate]:
        if not candidates:
            return []
        order = descending_order([self.key(c) for c in candidates])
        return [candidates[i] for i in order]


def score_strategy(name: str = "score") -> SortKeyStrategy:
    """Descending by raw score."""
    return SortKeyStrategy(name=name, key=lambda c: c.score)


def blended_strategy(
    name: str = "blended",
    score_weight: float = 0.8,
    title_weight: float = 0.2,
) -> SortKeyStrategy:
    """Descending by a weighted blend of score and title length.

    Args:
        name: Identifier for this strategy.
        score_weight: Weight on the raw score.
        title_weight: Weight on the title length in characters.

    Returns:
        Strategy ranking by ``score_weight * score + title_weight * len(title)``.
    """
    def blend(c: Candidate) -> float:
        return score_weight * c.score + title_weight * len(c.title)

    return SortKeyStrategy(name=name, key=blend)
