"""Synthetic posting pool for demos and simulations."""

from typing import List

import numpy as np

from core.types import Candidate, FilterParams


class MockCandidateSource:
    """Generate ``n`` postings with uniformly random scores.

    Every fetch draws fresh scores from the source's generator, so a seeded
    source yields a reproducible sequence of pools rather than one fixed pool.
    Five consecutive postings share a company.
    """

    def __init__(self, n: int = 100, seed: int = None):
        self.n = n
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def fetch(self, filters: FilterParams) -> List[Candidate]:
        scores = self.rng.random(self.n) * 100
        return [
            Candidate(
                id=i + 1,
                title=f"Posting {i + 1}",
                company=f"Company {i // 5 + 1}",
                score=float(scores[i]),
            )
            for i in range(self.n)
        ]
