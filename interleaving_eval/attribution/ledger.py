"""Click attribution for balanced interleaving.

Each click is credited to the ranker that contributed the clicked posting
to the interleaved sequence. Clicks live inside the current
InterleavingResult, so they disappear with it when the cache is cleared.
"""

import threading

from core.errors import NotReadyError
from core.types import SOURCE_NEW, SOURCE_OLD, WINNER_TIE, EvaluationSummary, InterleavingResult


def summarize_clicks(result: InterleavingResult) -> EvaluationSummary:
    """Tally a result's clicks by source and pick the winner (0/0 is a tie)."""
    tags = list(result.clicks.values())
    old_clicks = tags.count(SOURCE_OLD)
    new_clicks = tags.count(SOURCE_NEW)

    if old_clicks > new_clicks:
        winner = SOURCE_OLD
    elif new_clicks > old_clicks:
        winner = SOURCE_NEW
    else:
        winner = WINNER_TIE

    return EvaluationSummary(
        old_clicks=old_clicks,
        new_clicks=new_clicks,
        winner=winner,
        total_clicks=old_clicks + new_clicks,
    )


class ClickLedger:
    """Records clicks against the interleaver's current result.

    Recording and summarizing are serialized by a lock. A click is applied
    to whichever result is current when the lock is taken; if that result
    is later replaced or cleared, the click goes with it.
    """

    def __init__(self, interleaver):
        """Initialize ledger.

        Args:
            interleaver: Interleaver whose ``current`` result receives clicks.
        """
        self.interleaver = interleaver
        self._lock = threading.Lock()

    def _require_current(self, operation: str) -> InterleavingResult:
        result = self.interleaver.current
        if result is None:
            raise NotReadyError(operation)
        return result

    def record_click(self, candidate_id: int) -> bool:
        """Credit a click to the source that contributed ``candidate_id``.

        Ids not in the current sequence (stale UI state) are ignored.
        Repeated clicks overwrite with the same tag, so they count once.

        Args:
            candidate_id: Id of the clicked posting.

        Returns:
            True if the click was recorded, False if the id was not presented.

        Raises:
            NotReadyError: If nothing has been interleaved yet.
        """
        with self._lock:
            result = self._require_current("record click")
            source = result.source_of(candidate_id)
            if source is None:
                return False
            result.clicks[candidate_id] = source
            return True

    def summarize(self) -> EvaluationSummary:
        """Tally clicks on the current result.

        Raises:
            NotReadyError: If nothing has been interleaved yet.
        """
        with self._lock:
            result = self._require_current("summarize")
            return summarize_clicks(result)
