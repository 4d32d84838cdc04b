import pytest

from core.errors import NotReadyError
from interleaving_eval.attribution import ClickLedger
from interleaving_eval.interleaving import Interleaver


@pytest.fixture
def candidates(make_candidates):
    return make_candidates(3)


@pytest.fixture
def interleaver(coin, fixed_order):
    # Favor old: sequence [1, 3, 2], attribution [old, new, old]
    return Interleaver(fixed_order("old", [1, 2, 3]), fixed_order("new", [3, 1, 2]), rng=coin(0.0))


def test_not_ready_before_interleave(interleaver):
    ledger = ClickLedger(interleaver)

    with pytest.raises(NotReadyError):
        ledger.record_click(1)
    with pytest.raises(NotReadyError):
        ledger.summarize()


def test_click_round_trip(interleaver, candidates):
    result = interleaver.interleave(candidates, "k")
    ledger = ClickLedger(interleaver)

    assert ledger.summarize().total_clicks == 0

    assert ledger.record_click(3) is True
    summary = ledger.summarize()
    assert summary.new_clicks == 1
    assert summary.old_clicks == 0
    assert summary.winner == "new"
    assert result.clicks == {3: "new"}


def test_repeated_click_counts_once(interleaver, candidates):
    interleaver.interleave(candidates, "k")
    ledger = ClickLedger(interleaver)

    ledger.record_click(1)
    ledger.record_click(1)

    summary = ledger.summarize()
    assert summary.old_clicks == 1
    assert summary.total_clicks == 1


def test_unknown_id_is_ignored(interleaver, candidates):
    result = interleaver.interleave(candidates, "k")
    ledger = ClickLedger(interleaver)

    assert ledger.record_click(404) is False
    assert result.clicks == {}


def test_winner_and_tie(interleaver, candidates):
    interleaver.interleave(candidates, "k")
    ledger = ClickLedger(interleaver)

    assert ledger.summarize().winner == "tie"

    ledger.record_click(1)
    ledger.record_click(3)
    summary = ledger.summarize()
    assert (summary.old_clicks, summary.new_clicks, summary.winner) == (1, 1, "tie")

    ledger.record_click(2)
    summary = ledger.summarize()
    assert summary.winner == "old"
    assert summary.total_clicks == 3


def test_clicks_follow_the_current_result(interleaver, candidates):
    first = interleaver.interleave(candidates, "a")
    ledger = ClickLedger(interleaver)
    ledger.record_click(1)

    interleaver.interleave(candidates[1:], "b")
    assert ledger.summarize().total_clicks == 0
    assert ledger.record_click(1) is False

    interleaver.interleave(candidates, "a")
    assert ledger.summarize().old_clicks == 1
    assert first.clicks == {1: "old"}
