from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from intervalset import Interval, IntervalSet


def test_interval_string() -> None:
    assert str(Interval(begin=0, end=10)) == "[0 10]"


def test_interval_string_uses_natural_text_form() -> None:
    assert str(Interval(begin=1.5, end=2.25)) == "[1.5 2.25]"
    assert str(Interval(begin="a", end="b")) == "[a b]"


def test_degenerate_intervals_are_accepted() -> None:
    """begin >= end is not rejected, it just covers nothing."""
    assert Interval(begin=5, end=5).is_empty
    assert Interval(begin=7, end=3).is_empty
    assert not Interval(begin=3, end=7).is_empty


def test_interval_is_a_frozen_value() -> None:
    interval = Interval(begin=0, end=10)

    with pytest.raises(FrozenInstanceError):
        interval.begin = 3  # type: ignore[misc]

    assert interval == Interval(begin=0, end=10)
    assert hash(interval) == hash(Interval(begin=0, end=10))
    assert interval != Interval(begin=0, end=11)


def test_interval_requires_keywords() -> None:
    with pytest.raises(TypeError):
        Interval(0, 10)  # type: ignore[misc]


def test_interval_over_datetimes() -> None:
    start = datetime(2025, 1, 1, tzinfo=timezone.utc)
    end = datetime(2025, 1, 2, tzinfo=timezone.utc)

    assert not Interval(begin=start, end=end).is_empty
    assert Interval(begin=end, end=start).is_empty


def test_is_empty_ignores_set_ordering() -> None:
    """A descending set keeps (10, 0), which naturally reads as empty."""
    spans = IntervalSet([(10, 0)], cmp=lambda a, b: (b > a) - (b < a))

    assert not spans.is_empty()
    assert [interval.is_empty for interval in spans] == [True]
