"""Balanced Interleaving for two rankers.

Merges the old and new rankers' orderings into one presented list by
alternating turns between them, starting from a randomly chosen side:
    Step 1: old -> Step 2: new -> Step 3: old -> ...   (favor_old = True)
    Step 1: new -> Step 2: old -> Step 3: new -> ...   (favor_old = False)

Items already placed by the other side are skipped, so every candidate
appears exactly once and is credited to the side that contributed it first.
"""

import threading
from typing import Dict, List, Optional, Sequence

import numpy as np

from core.base import RankingStrategy
from core.types import SOURCE_NEW, SOURCE_OLD, Candidate, InterleavingResult


def balanced_interleave(
    old_ranked: Sequence[Candidate],
    new_ranked: Sequence[Candidate],
    rng: np.random.Generator = None,
) -> InterleavingResult:
    """Merge two rankings into one source-tagged, de-duplicated sequence.

    Args:
        old_ranked: Old ranker's ordering.
        new_ranked: New ranker's ordering.
        rng: Source of the starting coin flip. Anything with a ``random()``
            method returning a float in [0, 1) works; ``< 0.5`` favors old.

    Returns:
        InterleavingResult with empty clicks.
    """
    if rng is None:
        rng = np.random.default_rng()

    rankings = {SOURCE_OLD: old_ranked, SOURCE_NEW: new_ranked}
    pointers = {SOURCE_OLD: 0, SOURCE_NEW: 0}
    max_lens = {SOURCE_OLD: len(old_ranked), SOURCE_NEW: len(new_ranked)}

    sequence: List[Candidate] = []
    attribution: List[str] = []
    placed_ids = set()

    favor_old = rng.random() < 0.5

    while pointers[SOURCE_OLD] < max_lens[SOURCE_OLD] or pointers[SOURCE_NEW] < max_lens[SOURCE_NEW]:
        favored, other = (SOURCE_OLD, SOURCE_NEW) if favor_old else (SOURCE_NEW, SOURCE_OLD)
        # An exhausted side hands its turn to the other
        side = favored if pointers[favored] < max_lens[favored] else other

        ranking = rankings[side]
        current_ptr = pointers[side]

        while current_ptr < max_lens[side]:
            candidate = ranking[current_ptr]
            current_ptr += 1

            if candidate.id not in placed_ids:
                sequence.append(candidate)
                attribution.append(side)
                placed_ids.add(candidate.id)
                break

        pointers[side] = current_ptr

        # Flip regardless of which side contributed
        favor_old = not favor_old

    return InterleavingResult(sequence=sequence, attribution=attribution, clicks={})


class Interleaver:
    """Runs both rankers and memoizes the merged result per context key.

    Structure:
        results[context_key] = InterleavingResult

    The most recently requested result is ``current``; pagination and click
    recording operate on it.
    """

    def __init__(
        self,
        old_strategy: RankingStrategy,
        new_strategy: RankingStrategy,
        rng: np.random.Generator = None,
        verbose: bool = False,
    ):
        """Initialize with the two competing strategies.

        Args:
            old_strategy: Baseline ranker, credited as "old".
            new_strategy: Challenger ranker, credited as "new".
            rng: Source of the per-interleave starting coin flip.
            verbose: Print cache activity.
        """
        self.old_strategy = old_strategy
        self.new_strategy = new_strategy
        self.rng = rng if rng is not None else np.random.default_rng()
        self.verbose = verbose

        self._results: Dict[str, InterleavingResult] = {}
        self._current: Optional[InterleavingResult] = None
        self._lock = threading.RLock()

    @property
    def current(self) -> Optional[InterleavingResult]:
        """Most recently interleaved result, or None before the first call."""
        return self._current

    @property
    def cached_keys(self) -> List[str]:
        """Context keys with a memoized result."""
        with self._lock:
            return list(self._results.keys())

    def interleave(
        self,
        candidates: Sequence[Candidate],
        context_key: str = "",
        cache: bool = True,
    ) -> InterleavingResult:
        """Interleave both rankings of ``candidates``.

        A memoized result for ``context_key`` is returned unchanged, clicks
        included. Callers must pass the same key whenever the same logical
        request recurs.

        Args:
            candidates: Candidate set both strategies rank.
            context_key: Canonical filter signature of the request.
            cache: Memoize the new result under ``context_key``. When False
                the result still becomes current but is not reused.

        Returns:
            The current InterleavingResult.
        """
        with self._lock:
            cached = self._results.get(context_key) if cache else None
            if cached is not None:
                self._current = cached
                return cached

            old_ranked = self.old_strategy.rank(candidates)
            new_ranked = self.new_strategy.rank(candidates)
            result = balanced_interleave(old_ranked, new_ranked, rng=self.rng)

            if cache:
                self._results[context_key] = result
            self._current = result

            if self.verbose:
                print(f"[Interleave] {context_key or '<no filters>'}: {result!r}")

            return result

    def clear_cache(self) -> None:
        """Drop every memoized result and the current result with its clicks."""
        with self._lock:
            self._results = {}
            self._current = None
            if self.verbose:
                print("[Interleave] Cache cleared")
