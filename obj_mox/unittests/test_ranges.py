"""Unit tests for :mod:`obj_mox.ranges`."""

from __future__ import annotations

import pytest

from obj_mox.ranges import (
    AT_LEAST_ONCE,
    AT_MOST_ONCE,
    MAX,
    NEVER,
    ONCE,
    ZERO_OR_MORE,
    Range,
)


def test_zero_range_contains_only_zero() -> None:
    """``Range(0, 0)`` accepts no invocation at all."""
    never = Range(0, 0)
    assert never.contains(0)
    assert not never.contains(1)


def test_single_argument_is_a_fixed_count() -> None:
    """``Range(n)`` spans exactly ``n``."""
    three = Range(3)
    assert three.minimum == three.maximum == 3
    assert three.has_fixed_count()
    assert not three.has_open_count()


@pytest.mark.parametrize(
    ("range_", "expected"),
    [
        (ONCE, "once"),
        (NEVER, "never"),
        (Range(3), "3 times"),
        (ZERO_OR_MORE, "any times"),
        (AT_LEAST_ONCE, "at least once"),
        (Range(2, MAX), "at least 2 times"),
        (AT_MOST_ONCE, "between 0 and 1 times"),
        (Range(1, 3), "between 1 and 3 times"),
    ],
)
def test_range_rendering(range_: Range, expected: str) -> None:
    """Ranges render as the phrases used in diagnostics."""
    assert str(range_) == expected


@pytest.mark.parametrize(("minimum", "maximum"), [(-1, None), (3, 1)])
def test_invalid_bounds_are_rejected(minimum: int, maximum: int | None) -> None:
    """Negative minimums and inverted bounds raise ``ValueError``."""
    with pytest.raises(ValueError, match="minimum must be"):
        Range(minimum, maximum)


def test_membership_operator() -> None:
    """``in`` works for integers and rejects anything else."""
    assert 2 in Range(1, 3)
    assert 4 not in Range(1, 3)
    assert "2" not in Range(1, 3)


def test_accessors_and_open_ranges() -> None:
    """Open ranges use :data:`MAX` as their upper bound."""
    assert AT_LEAST_ONCE.has_open_count()
    assert AT_LEAST_ONCE.get_minimum() == 1
    assert AT_LEAST_ONCE.get_maximum() == MAX
    assert AT_LEAST_ONCE.contains(10_000)


def test_ranges_compare_by_value() -> None:
    """Ranges are frozen value objects."""
    assert Range(1) == ONCE
    assert Range(0, MAX) == ZERO_OR_MORE
    with pytest.raises(AttributeError):
        ONCE.minimum = 2  # type: ignore[misc]
