"""Click attribution and win/loss/tie scoring."""

from .ledger import ClickLedger, summarize_clicks

__all__ = [
    "ClickLedger",
    "summarize_clicks",
]
