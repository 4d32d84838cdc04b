"""Core module: Shared interfaces, types, and errors.

This module provides foundational components used across the codebase:
- Interfaces (RankingStrategy, CandidateSource, ClickSimulator)
- Shared types (Candidate, FilterParams, InterleavingResult, ...)
- Errors (NotReadyError, FetchFailure)

Example usage:
    from core.base import RankingStrategy, CandidateSource
    from core.types import Candidate, FilterParams
    from core.errors import NotReadyError
"""

# Base interfaces
from core.base import (
    RankingStrategy,
    CandidateSource,
    ClickSimulator,
)

# Types
from core.types import (
    SOURCE_OLD,
    SOURCE_NEW,
    WINNER_TIE,
    Candidate,
    FilterParams,
    InterleavingResult,
    PaginationResult,
    EvaluationSummary,
)

# Errors
from core.errors import NotReadyError, FetchFailure

__all__ = [
    # Base interfaces
    "RankingStrategy",
    "CandidateSource",
    "ClickSimulator",
    # Types
    "SOURCE_OLD",
    "SOURCE_NEW",
    "WINNER_TIE",
    "Candidate",
    "FilterParams",
    "InterleavingResult",
    "PaginationResult",
    "EvaluationSummary",
    # Errors
    "NotReadyError",
    "FetchFailure",
]
