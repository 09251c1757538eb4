from __future__ import annotations

import logging
from collections.abc import Iterable

from playdown.markers import Kind, Range, TaggedRange


def minimize(ranges: Iterable[TaggedRange]) -> list[TaggedRange]:
    """Reduce possibly-overlapping ranges to a non-overlapping subset.

    Ranges are ordered by ascending start, and by descending length when two
    start at the same offset, so the longer one wins. A sweep then keeps a
    range only if it starts at or after the end of the last kept range.

    Args:
        ranges: Tagged ranges in any order.

    Returns:
        The kept ranges in document order.
    """
    ordered = sorted(ranges, key=lambda item: (item.start, -item.length))
    kept: list[TaggedRange] = []
    last_end = 0
    for item in ordered:
        if kept and item.start < last_end:
            continue
        kept.append(item)
        last_end = item.end
    dropped = len(ordered) - len(kept)
    if dropped:
        logging.debug("Dropped %d overlapping annotation ranges", dropped)
    return kept


def complement(full_range: Range, minimized: list[TaggedRange]) -> list[TaggedRange]:
    """Return the code ranges not covered by ``minimized``.

    Args:
        full_range: The span of the whole document.
        minimized: Sorted, non-overlapping ranges, as returned by ``minimize``.

    Returns:
        Gaps before the first range, between consecutive ranges and after the
        last range, tagged as code. Zero-length gaps are skipped.
    """
    gaps: list[TaggedRange] = []
    cursor = full_range.start
    for item in minimized:
        if item.start > cursor:
            gaps.append(_code_range(cursor, item.start))
        cursor = max(cursor, item.end)
    if full_range.end > cursor:
        gaps.append(_code_range(cursor, full_range.end))
    return gaps


def _code_range(start: int, end: int) -> TaggedRange:
    return TaggedRange(range=Range(start, end - start), kind=Kind.CODE)
