from typing import Callable, Dict

from core.base import RankingStrategy
from .sort_key import blended_strategy, score_strategy


STRATEGY_REGISTRY: Dict[str, Callable[..., RankingStrategy]] = {
    "score": score_strategy,
    "blended": blended_strategy,
}


def create_strategy(strategy_type: str, **kwargs) -> RankingStrategy:
    if strategy_type not in STRATEGY_REGISTRY:
        raise ValueError(
            f"Unknown ranking strategy: {strategy_type}. "
            f"Available: {list_available_strategies()}"
        )
    params = {"name": strategy_type}
    params.update(kwargs)
    return STRATEGY_REGISTRY[strategy_type](**params)


def list_available_strategies() -> list:
    return list(STRATEGY_REGISTRY.keys())
