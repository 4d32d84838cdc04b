"""Base interfaces for the interleaving evaluation framework.

This module provides the interfaces that define the seams between
the evaluation core and its collaborators.
"""

from core.base.strategy import RankingStrategy
from core.base.candidate_source import CandidateSource
from core.base.click_model import ClickSimulator

__all__ = [
    "RankingStrategy",
    "CandidateSource",
    "ClickSimulator",
]
