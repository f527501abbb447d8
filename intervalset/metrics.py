"""Aggregate measures over interval sets.

Lengths are computed as ``end - begin``, so these helpers need a domain
whose values support subtraction (numbers, datetimes, ...). Lengths are
plain values compared in their natural order; on a set with a custom
``cmp`` (for example a descending domain) they can come out negative.
"""

import operator as op
from collections.abc import Iterable
from functools import reduce
from typing import Any

from intervalset.core import IntervalSet
from intervalset.interval import Interval


def _lengths(intervals: Iterable[Interval[Any]]) -> list[Any]:
    return [interval.end - interval.begin for interval in intervals]


def _sum(lengths: list[Any]) -> Any:
    # reduce rather than sum() so timedelta lengths work without a start value
    return reduce(op.add, lengths) if lengths else 0


def total_length(spans: IntervalSet[Any]) -> Any:
    """Sum of the lengths of all maintained intervals (0 for an empty set)."""
    return _sum(_lengths(spans))


def count_intervals(spans: IntervalSet[Any]) -> int:
    return len(spans)


def max_length(spans: IntervalSet[Any]) -> Any:
    """Largest ``end - begin`` in natural order, or None when the set is empty."""
    lengths = _lengths(spans)
    return max(lengths) if lengths else None


def min_length(spans: IntervalSet[Any]) -> Any:
    """Smallest ``end - begin`` in natural order, or None when the set is empty."""
    lengths = _lengths(spans)
    return min(lengths) if lengths else None


def coverage_ratio(spans: IntervalSet[Any], start: Any, end: Any) -> float:
    """Fraction of ``[start, end)`` covered by the set.

    The window is read in the set's own ordering, like ``spans[start:end]``.

    Raises:
        ValueError: If the window is degenerate in the set's ordering
    """
    if not spans.order.lt(start, end):
        raise ValueError(
            f"coverage_ratio() requires start before end in the set's ordering, "
            f"got start={start}, end={end}.\n"
            f"Example: coverage_ratio(spans, 0, 100)"
        )
    covered = _lengths(spans.fetch(start, end))
    if not covered:
        return 0.0
    return _sum(covered) / (end - start)
