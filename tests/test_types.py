import json

import pytest

from core.types import Candidate, FilterParams, InterleavingResult, EvaluationSummary


def test_empty_filter_strings_share_cache_key_with_no_filters():
    assert FilterParams(company="", title="").cache_key() == FilterParams().cache_key()
    assert FilterParams(company="Acme").cache_key() == FilterParams.from_dict({"company": "Acme"}).cache_key()


def test_cache_key_is_canonical_json():
    key = FilterParams(title="Engineer", company="Acme").cache_key()
    assert json.loads(key) == {"company": "Acme", "title": "Engineer"}
    assert key != FilterParams(company="Engineer", title="Acme").cache_key()


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="salary"):
        FilterParams.from_dict({"company": "Acme", "salary": 100})


def test_matches_is_substring_on_both_fields():
    c = Candidate(id=1, title="Backend Engineer", company="Acme Corp", score=10.0)

    assert FilterParams().matches(c)
    assert FilterParams(company="Acme").matches(c)
    assert FilterParams(company="Acme", title="Engineer").matches(c)
    assert not FilterParams(company="Acme", title="Designer").matches(c)
    assert not FilterParams(company="acme").matches(c)


def test_interleaving_result_lookups():
    a = Candidate(id=7, title="a", company="x", score=1.0)
    b = Candidate(id=3, title="b", company="y", score=2.0)
    result = InterleavingResult(sequence=[a, b], attribution=["new", "old"])

    assert len(result) == 2
    assert result.position_of(3) == 1
    assert result.source_of(7) == "new"
    assert result.source_of(99) is None
    assert result.clicks == {}


def test_interleaving_result_rejects_mismatched_attribution():
    a = Candidate(id=1, title="a", company="x", score=1.0)
    with pytest.raises(ValueError):
        InterleavingResult(sequence=[a], attribution=[])


def test_summary_to_dict():
    summary = EvaluationSummary(old_clicks=2, new_clicks=1, winner="old", total_clicks=3)
    assert summary.to_dict() == {"old_clicks": 2, "new_clicks": 1, "winner": "old", "total_clicks": 3}


@pytest.mark.parametrize("data", [{"company": 5}, {"title": ["Engineer"]}, {"company": b"Acme"}])
def test_from_dict_rejects_non_string_values(data):
    with pytest.raises(ValueError):
        FilterParams.from_dict(data)


def test_constructor_rejects_non_string_values():
    with pytest.raises(ValueError):
        FilterParams(title=3)
