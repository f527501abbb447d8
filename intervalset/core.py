import logging
from collections.abc import Iterable, Iterator
from functools import reduce
from typing import Any, Generic

from typing_extensions import override

from intervalset.interval import Interval, T
from intervalset.ordering import NATURAL, Comparator, Ordering

logger = logging.getLogger(__name__)


class IntervalSet(Generic[T]):
    """A set of points stored as disjoint, non-adjacent half-open intervals.

    The set keeps a single sorted list of boundaries ``b[0] < b[1] < ...``
    of even length. Each pair ``[b[2i], b[2i+1])`` is one maintained
    interval. A binary search position that is odd lies inside an interval,
    an even one lies in a gap. Every mutation splices only the boundaries
    it touches, so the list stays canonical: two sets holding the same
    points always hold identical boundary lists.

    Example:
        >>> spans = IntervalSet([(0, 10), (20, 30)])
        >>> spans.add(Interval(begin=10, end=15))
        >>> str(spans)
        '[[0 15] [20 30]]'
    """

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __init__(
        self,
        intervals: "Iterable[Interval[T] | tuple[T, T]]" = (),
        *,
        cmp: Comparator | None = None,
    ):
        """
        Args:
            intervals: Optional initial intervals, merged in order
            cmp: Three-way comparison for the domain (negative, zero or
                positive). Defaults to the natural ``<`` ordering.
        """
        self._order: Ordering[T] = NATURAL if cmp is None else Ordering(cmp)
        self._bounds: list[T] = []
        for interval in intervals:
            self.add(interval)

    def _spawn(self, bounds: list[T] | None = None) -> "IntervalSet[T]":
        """Create a set sharing this set's ordering, owning ``bounds``."""
        result = type(self).__new__(type(self))
        result._order = self._order
        result._bounds = [] if bounds is None else bounds
        return result

    @staticmethod
    def _coerce(item: Any) -> tuple[Any, Any]:
        if isinstance(item, Interval):
            return item.begin, item.end
        if isinstance(item, tuple) and len(item) == 2:
            return item[0], item[1]
        raise TypeError(
            f"Expected an Interval or a (begin, end) tuple.\n"
            f"Got {type(item).__name__!r}: {item!r}\n"
            f"Examples:\n"
            f"  spans.add(Interval(begin=0, end=10))\n"
            f"  spans.add((0, 10))"
        )

    def _locate(self, value: T, lo: int = 0) -> tuple[int, bool]:
        """Return the insertion point of ``value`` and whether it is a boundary."""
        pos = self._order.bisect_left(self._bounds, value, lo)
        exact = pos < len(self._bounds) and not self._order.lt(
            value, self._bounds[pos]
        )
        return pos, exact

    def _positions(self, begin: T, end: T) -> tuple[int, int]:
        # A boundary equal to ``end`` is consumed so that whatever starts
        # there merges with (or is cut from) the new span.
        left, _ = self._locate(begin)
        right, exact = self._locate(end, left)
        if exact:
            right += 1
        return left, right

    def add(self, interval: "Interval[T] | tuple[T, T]") -> None:
        """Cover ``[begin, end)``, merging with touching or overlapping intervals."""
        begin, end = self._coerce(interval)
        if not self._order.lt(begin, end):
            return
        left, right = self._positions(begin, end)
        del self._bounds[left:right]
        if left % 2 == 0 and right % 2 == 0:
            self._bounds[left:left] = [begin, end]
        elif left % 2 == 0:
            self._bounds.insert(left, begin)
        elif right % 2 == 0:
            self._bounds.insert(left, end)

    def remove(self, interval: "Interval[T] | tuple[T, T]") -> None:
        """Uncover ``[begin, end)``, trimming or splitting intervals it overlaps."""
        begin, end = self._coerce(interval)
        if not self._order.lt(begin, end):
            return
        left, right = self._positions(begin, end)
        del self._bounds[left:right]
        if left % 2 == 1 and right % 2 == 1:
            self._bounds[left:left] = [begin, end]
        elif left % 2 == 1:
            self._bounds.insert(left, begin)
        elif right % 2 == 1:
            self._bounds.insert(left, end)

    def _query(self, begin: T, end: T) -> tuple[int, int]:
        left, exact = self._locate(begin)
        right, _ = self._locate(end, left)
        if exact:
            left += 1
        return left, right

    def contains_all(self, interval: "Interval[T] | tuple[T, T]") -> bool:
        """True if every point of the interval is covered (always, if degenerate)."""
        begin, end = self._coerce(interval)
        if not self._order.lt(begin, end):
            return True
        left, right = self._query(begin, end)
        return left == right and left % 2 == 1

    def contains_any(self, interval: "Interval[T] | tuple[T, T]") -> bool:
        """True if some point of the interval is covered (never, if degenerate)."""
        begin, end = self._coerce(interval)
        if not self._order.lt(begin, end):
            return False
        left, right = self._query(begin, end)
        return left < right or left % 2 == 1

    def equal(self, other: "IntervalSet[T]") -> bool:
        if len(self._bounds) != len(other._bounds):
            return False
        return all(
            self._order.same(mine, theirs)
            for mine, theirs in zip(self._bounds, other._bounds)
        )

    def is_empty(self) -> bool:
        return not self._bounds

    def clear(self) -> None:
        self._bounds.clear()

    def clone(self) -> "IntervalSet[T]":
        return self._spawn(list(self._bounds))

    def intervals(self) -> list[Interval[T]]:
        """Decode the boundaries into ascending intervals."""
        return [
            Interval(begin=begin, end=end)
            for begin, end in zip(self._bounds[::2], self._bounds[1::2])
        ]

    @property
    def order(self) -> Ordering[T]:
        """Ordering used to compare this set's boundaries."""
        return self._order

    @property
    def bounds(self) -> tuple[T, ...]:
        """Snapshot of the boundary list."""
        return tuple(self._bounds)

    def span(self) -> Interval[T] | None:
        """Smallest interval covering the whole set, or None when empty."""
        if not self._bounds:
            return None
        return Interval(begin=self._bounds[0], end=self._bounds[-1])

    def fetch(self, start: T | None, end: T | None) -> Iterator[Interval[T]]:
        """Yield intervals overlapping ``[start, end)``, clipped to it.

        Either bound may be None for an unbounded side. The first
        candidate is found by binary search. Mutating the set while
        consuming the iterator is not supported.
        """
        order = self._order
        bounds = self._bounds
        first = 0
        if start is not None:
            pos = order.bisect_right(bounds, start)
            first = pos - pos % 2

        for i in range(first, len(bounds), 2):
            begin, stop = bounds[i], bounds[i + 1]
            if end is not None and not order.lt(begin, end):
                break
            if start is not None:
                begin = order.max(begin, start)
            if end is not None:
                stop = order.min(stop, end)
            if order.lt(begin, stop):
                yield Interval(begin=begin, end=stop)

    def __getitem__(self, item: slice) -> Iterator[Interval[T]]:
        if not isinstance(item, slice):
            raise TypeError(
                f"IntervalSet supports slicing only, got {type(item).__name__!r}.\n"
                f"Hint: Use spans[start:end] to fetch clipped intervals,\n"
                f"      or value in spans to test a single point."
            )
        if item.step is not None:
            raise ValueError(
                f"IntervalSet slices do not take a step, got {item.step!r}.\n"
                f"Example: list(spans[10:20])"
            )
        return self.fetch(item.start, item.stop)

    def union(self, other: "IntervalSet[T]") -> "IntervalSet[T]":
        result = self.clone()
        for interval in other:
            result.add(interval)
        logger.debug(
            "union of %d and %d intervals -> %d", len(self), len(other), len(result)
        )
        return result

    def difference(self, other: "IntervalSet[T]") -> "IntervalSet[T]":
        result = self.clone()
        for interval in other:
            result.remove(interval)
        logger.debug(
            "difference of %d and %d intervals -> %d",
            len(self),
            len(other),
            len(result),
        )
        return result

    def intersect(self, other: "IntervalSet[T]") -> "IntervalSet[T]":
        """Intersect by sweeping both interval lists in lockstep.

        Both lists are sorted and disjoint, so the interval that ends first
        cannot overlap anything later in the other list and its cursor can
        advance.
        """
        order = self._order
        result = self._spawn()
        mine, theirs = self.intervals(), other.intervals()
        i = j = 0
        while i < len(mine) and j < len(theirs):
            a, b = mine[i], theirs[j]
            overlap_begin = order.max(a.begin, b.begin)
            overlap_end = order.min(a.end, b.end)
            if order.lt(overlap_begin, overlap_end):
                result.add(Interval(begin=overlap_begin, end=overlap_end))

            if order.lt(a.end, b.end):
                i += 1
            else:
                j += 1

        logger.debug(
            "intersection of %d and %d intervals -> %d",
            len(mine),
            len(theirs),
            len(result),
        )
        return result

    def complement(self, start: T | None, end: T | None) -> "IntervalSet[T]":
        """Return the gaps of this set within the window ``[start, end)``."""
        if start is None or end is None:
            raise ValueError(
                f"complement() requires finite bounds, got start={start}, end={end}.\n"
                f"Complement inverts a set, which requires a bounded universe.\n"
                f"Example: spans.complement(0, 100)"
            )
        window = self._spawn()
        window.add((start, end))
        window -= self
        logger.debug("complement of %d intervals -> %d", len(self), len(window))
        return window

    def __or__(self, other: object) -> "IntervalSet[T]":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> "IntervalSet[T]":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other: object) -> "IntervalSet[T]":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self.difference(other)

    def __ior__(self, other: object) -> "IntervalSet[T]":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        for interval in other.intervals():
            self.add(interval)
        return self

    def __isub__(self, other: object) -> "IntervalSet[T]":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        for interval in other.intervals():
            self.remove(interval)
        return self

    def __iand__(self, other: object) -> "IntervalSet[T]":
        if not isinstance(other, IntervalSet):
            return NotImplemented
        self._bounds = self.intersect(other)._bounds
        return self

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self.equal(other)

    def __contains__(self, value: T) -> bool:
        return self._order.bisect_right(self._bounds, value) % 2 == 1

    def __iter__(self) -> Iterator[Interval[T]]:
        return iter(self.intervals())

    def __len__(self) -> int:
        return len(self._bounds) // 2

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __copy__(self) -> "IntervalSet[T]":
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> "IntervalSet[T]":
        return self.clone()

    @override
    def __str__(self) -> str:
        return "[" + " ".join(str(interval) for interval in self.intervals()) + "]"

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


def union(*sets: IntervalSet[T]) -> IntervalSet[T]:
    """Union any number of sets (equivalent to chaining ``|``)."""

    if not sets:
        raise ValueError(
            f"union() requires at least one IntervalSet argument.\n"
            f"Example: union(spans_a, spans_b, spans_c)"
        )

    def reducer(acc: IntervalSet[T], nxt: IntervalSet[T]) -> IntervalSet[T]:
        acc |= nxt
        return acc

    return reduce(reducer, sets[1:], sets[0].clone())


def intersection(*sets: IntervalSet[T]) -> IntervalSet[T]:
    """Intersect any number of sets (equivalent to chaining ``&``)."""

    if not sets:
        raise ValueError(
            f"intersection() requires at least one IntervalSet argument.\n"
            f"Example: intersection(spans_a, spans_b, spans_c)"
        )

    def reducer(acc: IntervalSet[T], nxt: IntervalSet[T]) -> IntervalSet[T]:
        return acc & nxt

    return reduce(reducer, sets[1:], sets[0].clone())
