from .core import IntervalSet, intersection, union
from .interval import Interval
from .metrics import (
    count_intervals,
    coverage_ratio,
    max_length,
    min_length,
    total_length,
)
from .ordering import Ordering

__all__ = [
    "Interval",
    "IntervalSet",
    "Ordering",
    "union",
    "intersection",
    "total_length",
    "count_intervals",
    "max_length",
    "min_length",
    "coverage_ratio",
]
