"""Pagination over an interleaved sequence."""

import math
import numbers
from typing import Optional

from core.errors import NotReadyError
from core.types import InterleavingResult, PaginationResult


def paginate(
    result: Optional[InterleavingResult],
    page: int = 1,
    per_page: int = 20,
) -> PaginationResult:
    """Slice one page out of an interleaved sequence.

    Out-of-range pages are clamped into [1, max(1, total_pages)] rather than
    rejected; the served page is returned as ``current_page``.

    Args:
        result: Current interleaving result, or None if none exists yet.
        page: Requested page number (1-indexed).
        per_page: Items per page, must be a positive integer.

    Returns:
        PaginationResult for the clamped page.

    Raises:
        NotReadyError: If ``result`` is None.
        ValueError: If ``per_page`` is not a positive integer.
    """
    if result is None:
        raise NotReadyError("paginate")
    if isinstance(per_page, bool) or not isinstance(per_page, numbers.Integral) or per_page < 1:
        raise ValueError(f"per_page must be a positive integer, got {per_page!r}")
    per_page = int(per_page)

    total_items = len(result.sequence)
    total_pages = math.ceil(total_items / per_page)
    current_page = max(1, min(int(page), total_pages))

    start = (current_page - 1) * per_page
    end = min(start + per_page, total_items)

    return PaginationResult(
        items=result.sequence[start:end],
        source_tags=result.attribution[start:end],
        total_pages=total_pages,
        current_page=current_page,
        per_page=per_page,
        total_items=total_items,
    )
