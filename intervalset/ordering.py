"""Total orders over interval set domains.

Boundaries are compared with Python's natural ordering unless a
three-way comparison function is supplied. The comparator is turned
into a sort key with ``functools.cmp_to_key`` so that ``bisect`` can
search the boundary list directly.
"""

import bisect
from collections.abc import Callable, Sequence
from functools import cmp_to_key
from typing import Any, Generic

from intervalset.interval import T

Comparator = Callable[[Any, Any], int]


class Ordering(Generic[T]):
    """Comparison capability shared by a set and everything derived from it."""

    def __init__(self, cmp: Comparator | None = None):
        self.cmp: Comparator | None = cmp
        self.key: Callable[[T], Any] | None = (
            None if cmp is None else cmp_to_key(cmp)
        )

    def lt(self, a: T, b: T) -> bool:
        if self.cmp is None:
            return a < b  # pyright: ignore[reportOperatorIssue]
        return self.cmp(a, b) < 0

    def same(self, a: T, b: T) -> bool:
        return not self.lt(a, b) and not self.lt(b, a)

    def min(self, a: T, b: T) -> T:
        return b if self.lt(b, a) else a

    def max(self, a: T, b: T) -> T:
        return b if self.lt(a, b) else a

    def bisect_left(self, seq: Sequence[T], value: T, lo: int = 0) -> int:
        if self.key is None:
            return bisect.bisect_left(seq, value, lo)
        return bisect.bisect_left(seq, self.key(value), lo, key=self.key)

    def bisect_right(self, seq: Sequence[T], value: T, lo: int = 0) -> int:
        if self.key is None:
            return bisect.bisect_right(seq, value, lo)
        return bisect.bisect_right(seq, self.key(value), lo, key=self.key)

    def __repr__(self) -> str:
        if self.cmp is None:
            return "Ordering()"
        return f"Ordering(cmp={self.cmp!r})"


NATURAL: Ordering[Any] = Ordering()
