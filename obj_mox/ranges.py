"""Inclusive call-count intervals used by quantifiers."""

from __future__ import annotations

import dataclasses as dc
import sys

MAX = sys.maxsize
"""Upper bound standing in for "unbounded"."""


@dc.dataclass(frozen=True, slots=True, init=False)
class Range:
    """Inclusive interval ``[minimum, maximum]`` of allowed invocations.

    ``Range(n)`` is the fixed count ``n``; ``Range(a, b)`` spans ``a`` to
    ``b``. Use :data:`MAX` as the maximum for open-ended intervals.
    """

    minimum: int
    maximum: int

    def __init__(self, minimum: int, maximum: int | None = None) -> None:
        upper = minimum if maximum is None else maximum
        if minimum < 0:
            msg = "minimum must be >= 0"
            raise ValueError(msg)
        if upper < minimum:
            msg = "minimum must be <= maximum"
            raise ValueError(msg)
        object.__setattr__(self, "minimum", minimum)
        object.__setattr__(self, "maximum", upper)

    def contains(self, count: int) -> bool:
        """Return ``True`` when *count* lies within the interval."""
        return self.minimum <= count <= self.maximum

    def __contains__(self, count: object) -> bool:
        """Support ``count in range_`` as an alias for :meth:`contains`."""
        return isinstance(count, int) and self.contains(count)

    def has_fixed_count(self) -> bool:
        """Return ``True`` when exactly one count is allowed."""
        return self.minimum == self.maximum

    def has_open_count(self) -> bool:
        """Return ``True`` when the interval has no upper bound."""
        return self.maximum == MAX

    def get_minimum(self) -> int:
        """Return the lower bound."""
        return self.minimum

    def get_maximum(self) -> int:
        """Return the upper bound."""
        return self.maximum

    def __str__(self) -> str:
        """Render the interval for humans, e.g. ``"at least once"``."""
        if self.has_fixed_count():
            return _times(self.minimum)
        if self.has_open_count():
            if self.minimum == 0:
                return "any times"
            return f"at least {_times(self.minimum)}"
        return f"between {self.minimum} and {self.maximum} times"


def _times(count: int) -> str:
    if count == 0:
        return "never"
    if count == 1:
        return "once"
    return f"{count} times"


ONCE = Range(1)
AT_LEAST_ONCE = Range(1, MAX)
AT_MOST_ONCE = Range(0, 1)
ZERO_OR_MORE = Range(0, MAX)
NEVER = Range(0)

__all__ = [
    "AT_LEAST_ONCE",
    "AT_MOST_ONCE",
    "MAX",
    "NEVER",
    "ONCE",
    "ZERO_OR_MORE",
    "Range",
]
