import numpy as np
import pytest

from core.errors import NotReadyError
from core.types import InterleavingResult
from interleaving_eval.pagination import paginate


def _result(make_candidates, n):
    cands = make_candidates(n)
    return InterleavingResult(sequence=cands, attribution=["old" if i % 2 else "new" for i in range(n)])


def test_not_ready_without_result():
    with pytest.raises(NotReadyError):
        paginate(None, 1, 10)


@pytest.mark.parametrize("per_page", [0, -3, 2.5, True])
def test_rejects_invalid_per_page(make_candidates, per_page):
    with pytest.raises(ValueError):
        paginate(_result(make_candidates, 5), 1, per_page)


def test_hundred_items_ten_per_page(make_candidates):
    result = _result(make_candidates, 100)

    first = paginate(result, 1, 10)
    assert len(first.items) == 10
    assert first.total_pages == 10
    assert first.total_items == 100
    assert first.current_page == 1
    assert first.per_page == 10

    clamped = paginate(result, 15, 10)
    assert clamped.current_page == 10
    assert clamped.items == result.sequence[90:100]
    assert clamped.source_tags == result.attribution[90:100]


def test_out_of_range_pages_are_clamped(make_candidates):
    result = _result(make_candidates, 35)

    assert paginate(result, 0, 10).current_page == 1
    assert paginate(result, -4, 10).current_page == 1
    assert paginate(result, 9999, 10).current_page == 4


def test_partial_last_page(make_candidates):
    result = _result(make_candidates, 25)
    page = paginate(result, 3, 10)

    assert page.total_pages == 3
    assert [c.id for c in page.items] == [21, 22, 23, 24, 25]
    assert len(page.source_tags) == 5


def test_empty_result_has_zero_pages():
    page = paginate(InterleavingResult(), 3, 10)

    assert page.items == []
    assert page.source_tags == []
    assert page.total_pages == 0
    assert page.total_items == 0
    assert page.current_page == 1


def test_accepts_numpy_integers(make_candidates):
    page = paginate(_result(make_candidates, 30), 2, np.int64(10))
    assert page.per_page == 10
    assert [c.id for c in page.items][0] == 11
