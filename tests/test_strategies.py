import pytest

from core.base import RankingStrategy
from core.types import Candidate
from interleaving_eval.strategies import (
    SortKeyStrategy,
    blended_strategy,
    create_strategy,
    descending_order,
    score_strategy,
)


def test_score_strategy_sorts_descending(make_candidates):
    candidates = make_candidates(20)
    ranked = score_strategy().rank(candidates)

    scores = [c.score for c in ranked]
    assert scores == sorted(scores, reverse=True)
    assert sorted(c.id for c in ranked) == [c.id for c in candidates]


def test_blended_strategy_weights_title_length():
    short = Candidate(id=1, title="A", company="x", score=50.0)
    long = Candidate(id=2, title="A" * 30, company="x", score=48.0)

    # 0.8*50 + 0.2*1 = 40.2 vs 0.8*48 + 0.2*30 = 44.4
    assert [c.id for c in blended_strategy().rank([short, long])] == [2, 1]
    assert [c.id for c in score_strategy().rank([short, long])] == [1, 2]


def test_rank_does_not_mutate_input(make_candidates):
    candidates = make_candidates(10)
    snapshot = list(candidates)
    blended_strategy().rank(candidates)
    assert candidates == snapshot


def test_ties_keep_input_order():
    tied = [Candidate(id=i, title="t", company="c", score=1.0) for i in (5, 2, 9)]
    assert [c.id for c in score_strategy().rank(tied)] == [5, 2, 9]
    assert descending_order([1.0, 3.0, 1.0, 3.0]).tolist() == [1, 3, 0, 2]


def test_empty_input():
    assert score_strategy().rank([]) == []


def test_strategies_satisfy_protocol():
    assert isinstance(score_strategy(), RankingStrategy)
    assert isinstance(SortKeyStrategy(name="neg", key=lambda c: -c.score), RankingStrategy)


def test_create_strategy_from_registry():
    assert create_strategy("score").name == "score"
    custom = create_strategy("blended", name="challenger", title_weight=0.0)
    assert custom.name == "challenger"

    with pytest.raises(ValueError, match="Available"):
        create_strategy("unknown")
