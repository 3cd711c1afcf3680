"""Memoization of chained mocks.

The cache only exists to give automatic chaining its idempotence: declaring
``m.a.b`` twice must yield the same node for ``m.a``. Keys are compared with
matcher equality, so ``m.f(greater_than(3))`` and ``m.f(greater_than(3))``
share a child while ``m.f(anything())`` and ``m.f(5)`` do not. It is a linear
list and not a general purpose cache.
"""

from __future__ import annotations

import typing as t

from .matchers import equivalent

K = t.TypeVar("K")
V = t.TypeVar("V")


class ChainingCache(t.Generic[K, V]):
    """Ordered ``(key, value)`` pairs looked up by equivalence."""

    def __init__(self) -> None:
        self._entries: list[tuple[K, V]] = []

    def get_or_else(self, key: K, if_absent: t.Callable[[], V]) -> V:
        """Return the value cached for *key*, creating it with *if_absent*."""
        for cached_key, value in self._entries:
            if equivalent(cached_key, key):
                return value
        value = if_absent()
        self._entries.append((key, value))
        return value

    def get_all(self) -> list[V]:
        """Return the cached values in insertion order."""
        return [value for _, value in self._entries]

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of cached entries."""
        return len(self._entries)


__all__ = ["ChainingCache"]
