"""Interleaving evaluation of an old ranker against a new one.

This module provides the evaluation components:
- strategies: Ranking strategies (score, blended)
- interleaving: Balanced interleaving and the per-context result cache
- pagination: Page slicing with clamping
- attribution: Click ledger and win/loss/tie summary
- candidates: Candidate sources
- service: EvaluationService orchestrating all of the above

For simulated users, see the simulation package.
For shared types and interfaces, see the core package.
"""

from .strategies import (
    SortKeyStrategy,
    score_strategy,
    blended_strategy,
    create_strategy,
)
from .interleaving import Interleaver, balanced_interleave
from .pagination import paginate
from .attribution import ClickLedger
from .candidates import MockCandidateSource, DataFrameCandidateSource
from .service import EvaluationService

__all__ = [
    # Strategies
    "SortKeyStrategy",
    "score_strategy",
    "blended_strategy",
    "create_strategy",
    # Interleaving
    "Interleaver",
    "balanced_interleave",
    "paginate",
    # Attribution
    "ClickLedger",
    # Candidates
    "MockCandidateSource",
    "DataFrameCandidateSource",
    # Service
    "EvaluationService",
]
