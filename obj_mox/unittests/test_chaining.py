"""Unit tests for :mod:`obj_mox.chaining`."""

from __future__ import annotations

from obj_mox.chaining import ChainingCache
from obj_mox.matchers import anything, greater_than


def test_equivalent_keys_share_a_value() -> None:
    """The factory runs once per distinct key."""
    cache: ChainingCache[tuple[object, ...], object] = ChainingCache()
    created: list[object] = []

    def factory() -> object:
        value = object()
        created.append(value)
        return value

    first = cache.get_or_else(("call", (greater_than(3),), {}), factory)
    again = cache.get_or_else(("call", (greater_than(3),), {}), factory)

    assert first is again
    assert created == [first]


def test_matchers_are_not_confused_with_values() -> None:
    """``anything()`` and ``5`` describe different positions."""
    cache: ChainingCache[tuple[object, ...], str] = ChainingCache()
    cache.get_or_else(("call", (anything(),), {}), lambda: "any")
    cache.get_or_else(("call", (5,), {}), lambda: "five")

    assert cache.get_all() == ["any", "five"]
    assert len(cache) == 2


def test_clear_forgets_entries() -> None:
    """A cleared cache creates fresh values."""
    cache: ChainingCache[tuple[object, ...], int] = ChainingCache()
    cache.get_or_else(("getter", "a"), lambda: 1)
    cache.clear()
    assert cache.get_or_else(("getter", "a"), lambda: 2) == 2
