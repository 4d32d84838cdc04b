"""Shared data types used across the codebase.

This module contains dataclasses that are used by multiple packages:
- Candidate: A single posting that both rankers order
- FilterParams: Active filter criteria and their canonical cache key
- InterleavingResult: Merged sequence with per-position source tags and clicks
- PaginationResult: One page of an interleaved sequence
- EvaluationSummary: Click tally and verdict for the current result
"""

import json
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional


SOURCE_OLD = "old"
SOURCE_NEW = "new"
SOURCES = (SOURCE_OLD, SOURCE_NEW)

WINNER_TIE = "tie"


@dataclass(frozen=True)
class Candidate:
    """A single posting produced by the candidate source.

    Attributes:
        id: Unique identifier within a candidate set.
        title: Posting title.
        company: Name of the hiring company.
        score: Base relevance score used by the rankers.
    """
    id: int
    title: str
    company: str
    score: float


@dataclass(frozen=True)
class FilterParams:
    """Filter criteria for a candidate request.

    Both fields are substring filters. Empty strings are treated the same as
    "no filter", so ``FilterParams(company="")`` and ``FilterParams()`` share
    one cache key.

    Attributes:
        company: Substring that must appear in ``Candidate.company``.
        title: Substring that must appear in ``Candidate.title``.
    """
    company: Optional[str] = None
    title: Optional[str] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Filter '{f.name}' must be a string, got {type(value).__name__}")
            if value == "":
                object.__setattr__(self, f.name, None)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> "FilterParams":
        """Build filters from a plain mapping.

        Args:
            data: Mapping with optional ``company`` and ``title`` keys.

        Returns:
            FilterParams instance.

        Raises:
            ValueError: If the mapping has keys other than the known filters,
                or a value that is neither None nor a string.
        """
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown filter keys: {unknown}. Available: {sorted(known)}")
        return cls(**data)

    def cache_key(self) -> str:
        """Canonical serialization shared by the candidate and interleaving caches."""
        return json.dumps(asdict(self), sort_keys=True, ensure_ascii=False)

    def matches(self, candidate: Candidate) -> bool:
        """Check whether a candidate passes every active filter."""
        if self.company is not None and self.company not in candidate.company:
            return False
        if self.title is not None and self.title not in candidate.title:
            return False
        return True


@dataclass
class InterleavingResult:
    """Interleaved sequence with provenance and recorded clicks.

    Attributes:
        sequence: Candidates in display order, no duplicate ids.
        attribution: Source tag ("old" or "new") for each position of ``sequence``.
        clicks: Maps clicked candidate id -> source tag at click time.
    """
    sequence: List[Candidate] = field(default_factory=list)
    attribution: List[str] = field(default_factory=list)
    clicks: Dict[int, str] = field(default_factory=dict)

    def __post_init__(self):
        if len(self.sequence) != len(self.attribution):
            raise ValueError(
                f"attribution length {len(self.attribution)} does not match "
                f"sequence length {len(self.sequence)}"
            )
        # O(1) id -> position lookup for click attribution
        self._positions = {c.id: i for i, c in enumerate(self.sequence)}

    def __len__(self) -> int:
        return len(self.sequence)

    def __repr__(self) -> str:
        """Concise representation for debugging (avoids printing full lists)."""
        return (
            f"InterleavingResult(n_items={len(self.sequence)}, "
            f"n_old={self.attribution.count(SOURCE_OLD)}, "
            f"n_new={self.attribution.count(SOURCE_NEW)}, "
            f"n_clicks={len(self.clicks)})"
        )

    def position_of(self, candidate_id: int) -> Optional[int]:
        """Return the display position of a candidate, or None if absent."""
        return self._positions.get(candidate_id)

    def source_of(self, candidate_id: int) -> Optional[str]:
        """Return the source tag that contributed a candidate, or None if absent."""
        pos = self._positions.get(candidate_id)
        if pos is None:
            return None
        return self.attribution[pos]


@dataclass(frozen=True)
class PaginationResult:
    """One page of an interleaved sequence.

    Attributes:
        items: Candidates on this page.
        source_tags: Source tag for each item on this page.
        total_pages: ceil(total_items / per_page).
        current_page: The page actually served, after clamping.
        per_page: Page size used for slicing.
        total_items: Length of the full interleaved sequence.
    """
    items: List[Candidate]
    source_tags: List[str]
    total_pages: int
    current_page: int
    per_page: int
    total_items: int


@dataclass(frozen=True)
class EvaluationSummary:
    """Click tally for the current interleaving result.

    Attributes:
        old_clicks: Clicks on postings contributed by the old ranker.
        new_clicks: Clicks on postings contributed by the new ranker.
        winner: "old", "new" or "tie".
        total_clicks: old_clicks + new_clicks.
    """
    old_clicks: int = 0
    new_clicks: int = 0
    winner: str = WINNER_TIE
    total_clicks: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
