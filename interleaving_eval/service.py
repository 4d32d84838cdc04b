"""Evaluation service: the public surface of the interleaving evaluation.

Flow for one request:
1. Fetch candidates for the filters (memoized by filter signature)
2. Rank them with both strategies and interleave (memoized by the same key)
3. Slice the requested page
Later, clicks on presented postings are recorded and tallied.
"""

import threading
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from config import EvaluationConfig
from core.base import CandidateSource, RankingStrategy
from core.types import Candidate, EvaluationSummary, FilterParams, PaginationResult
from .attribution import ClickLedger
from .candidates import MockCandidateSource
from .interleaving import Interleaver
from .pagination import paginate
from .strategies import create_strategy


class EvaluationService:
    """Orchestrates candidate retrieval, interleaving, pagination and clicks.

    Owns two caches keyed by the filter signature:
        candidates[key] = filtered candidate tuple
        interleaver.results[key] = InterleavingResult

    Both are instance-scoped, so independent evaluations can coexist.
    Safe to share across threads: at most one fetch per key is in flight.
    """

    def __init__(
        self,
        source: CandidateSource,
        old_strategy: RankingStrategy,
        new_strategy: RankingStrategy,
        rng: np.random.Generator = None,
        per_page: int = 20,
        verbose: bool = False,
    ):
        """Initialize the service.

        Args:
            source: External candidate source.
            old_strategy: Baseline ranker.
            new_strategy: Challenger ranker.
            rng: Source of the interleaving coin flip.
            per_page: Default page size for get_page.
            verbose: Print cache activity.
        """
        self.source = source
        self.per_page = per_page
        self.verbose = verbose
        self.interleaver = Interleaver(old_strategy, new_strategy, rng=rng, verbose=verbose)
        self.ledger = ClickLedger(self.interleaver)

        # Stored as tuples: a fetched candidate set never changes
        self._candidates: Dict[str, Tuple[Candidate, ...]] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(
        cls,
        config: EvaluationConfig,
        source: Optional[CandidateSource] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "EvaluationService":
        """Build a service from configuration.

        Args:
            config: Evaluation configuration.
            source: Candidate source; defaults to a seeded MockCandidateSource.
            rng: Coin-flip generator; defaults to one seeded with config.random_seed.

        Returns:
            Configured EvaluationService.
        """
        if source is None:
            source = MockCandidateSource(n=config.n_candidates, seed=config.candidate_seed)
        if rng is None:
            rng = np.random.default_rng(config.random_seed)
        return cls(
            source=source,
            old_strategy=create_strategy(config.old_strategy),
            new_strategy=create_strategy(config.new_strategy),
            rng=rng,
            per_page=config.per_page,
            verbose=config.verbose,
        )

    def _lock_for(self, key: str) -> threading.Lock:
        with self._lock:
            if key not in self._key_locks:
                self._key_locks[key] = threading.Lock()
            return self._key_locks[key]

    def _fetch(self, filters: FilterParams) -> Optional[Tuple[Candidate, ...]]:
        """Fetch and filter candidates; None if the source failed."""
        key = filters.cache_key()

        cached = self._candidates.get(key)
        if cached is not None:
            return cached

        with self._lock_for(key):
            # Another thread may have populated the key while we waited
            cached = self._candidates.get(key)
            if cached is not None:
                return cached

            try:
                fetched = self.source.fetch(filters)
            except Exception as e:
                print(f"[Fetch] Candidate fetch failed for {key}: {e!r}")
                return None

            candidates = tuple(c for c in fetched if filters.matches(c))
            with self._lock:
                self._candidates[key] = candidates

            if self.verbose:
                print(f"[Cache] Stored {len(candidates)} candidates for {key}")

            return candidates

    def fetch_candidates(self, filters: Optional[FilterParams] = None) -> List[Candidate]:
        """Return the filtered candidate set for a request.

        Source failures are logged and degrade to an empty list, which is
        indistinguishable from "no matches" at this layer. Failures are not
        cached.

        Args:
            filters: Active filters (None means no filters).

        Returns:
            Filtered candidates, as a new list the caller may modify.
        """
        candidates = self._fetch(filters or FilterParams())
        return list(candidates) if candidates is not None else []

    def get_page(
        self,
        page: int = 1,
        per_page: Optional[int] = None,
        filters: Optional[FilterParams] = None,
    ) -> PaginationResult:
        """Fetch, interleave and paginate.

        Args:
            page: Requested page (clamped into range).
            per_page: Items per page (None means the service default).
            filters: Active filters (None means no filters).

        Returns:
            PaginationResult for the served page.

        Raises:
            ValueError: If ``per_page`` is not a positive integer.
        """
        if per_page is None:
            per_page = self.per_page
        filters = filters or FilterParams()
        key = filters.cache_key()

        candidates = self._fetch(filters)
        if candidates is None:
            result = self.interleaver.interleave([], key, cache=False)
        else:
            result = self.interleaver.interleave(candidates, key)

        return paginate(result, page, per_page)

    def record_click(self, candidate_id: int) -> bool:
        """Record a click on a presented posting. See ClickLedger.record_click."""
        return self.ledger.record_click(candidate_id)

    def summarize(self) -> EvaluationSummary:
        """Current click tally and winner. See ClickLedger.summarize."""
        return self.ledger.summarize()

    def get_evaluation_results(self) -> EvaluationSummary:
        return self.summarize()

    def clear_cache(self) -> None:
        """Drop cached candidates, interleavings and their clicks."""
        with self._lock:
            self._candidates = {}
            self._key_locks = {}
        self.interleaver.clear_cache()
        if self.verbose:
            print("[Cache] Candidate cache cleared")

    def get_statistics(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with cache sizes and the current result's size and clicks.
        """
        current = self.interleaver.current
        with self._lock:
            n_candidate_keys = len(self._candidates)
            n_fetch_locks = len(self._key_locks)
        return {
            "candidate_cache_keys": n_candidate_keys,
            "fetch_locks": n_fetch_locks,
            "interleaving_cache_keys": len(self.interleaver.cached_keys),
            "current_items": len(current) if current is not None else None,
            "current_clicks": len(current.clicks) if current is not None else None,
        }
