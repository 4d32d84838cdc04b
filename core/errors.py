"""Exceptions shared across the evaluation packages."""


class NotReadyError(RuntimeError):
    """Raised when pagination, click recording or summarizing runs before any interleave."""

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation}: no interleaving result exists yet. Call interleave first.")
        self.operation = operation


class FetchFailure(RuntimeError):
    """Raised by candidate sources when retrieval fails.

    The evaluation service catches this (and any other source error) and
    degrades to an empty candidate list.
    """
