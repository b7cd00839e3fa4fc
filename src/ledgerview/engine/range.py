"""Page number -> ledger sequence window arithmetic.

The ledger is consumed most-recent-first: page 1 is the newest ``page_size``
transactions and each following page walks backward through older sequence
numbers. Pages tile with no gap or overlap: page ``p + 1`` ends where page
``p`` starts.
"""

import math

from ledgerview.domain.models.paging import SequenceRange


def _check_args(total_count: int, page_size: int) -> None:
    if total_count < 0:
        raise ValueError(f"total_count must be >= 0, got {total_count}")
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")


def compute_range(total_count: int, page_size: int, page_number: int | None = None) -> SequenceRange:
    """Map a 1-based page number to the half-open window ``[start, end)``.

    An absent or non-positive page number means page 1. Pages past the
    oldest transaction produce a negative ``end`` (``is_valid`` is False);
    clamping to the last page is the caller's policy, not done here.
    """
    _check_args(total_count, page_size)
    offset = page_number - 1 if page_number and page_number > 0 else 0
    end = total_count - page_size * offset
    start = max(end - page_size, 0)
    return SequenceRange(start=start, end=end)


def max_page(total_count: int, page_size: int) -> int:
    """Number of pages needed to show ``total_count`` transactions (0 for an empty ledger)."""
    _check_args(total_count, page_size)
    return math.ceil(total_count / page_size)


def clamp_page(page_number: int | None, total_count: int, page_size: int) -> int:
    """Clamp into ``[1, max_page]``. An empty ledger still has page 1."""
    last = max(max_page(total_count, page_size), 1)
    if not page_number or page_number < 1:
        return 1
    return min(page_number, last)


def parse_page_param(raw: str | int | None) -> int:
    """Restore a page number persisted as a query parameter; anything unusable is page 1."""
    if raw is None:
        return 1
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 1
    return page if page >= 1 else 1
