"""Ranking strategies competing in the interleaving evaluation.

Strategies are stateless and interchangeable:
- score: descending by raw score
- blended: descending by 0.8 * score + 0.2 * title length
"""

from .sort_key import SortKeyStrategy, blended_strategy, descending_order, score_strategy
from .factory import STRATEGY_REGISTRY, create_strategy, list_available_strategies

__all__ = [
    "SortKeyStrategy",
    "score_strategy",
    "blended_strategy",
    "descending_order",
    "STRATEGY_REGISTRY",
    "create_strategy",
    "list_available_strategies",
]
