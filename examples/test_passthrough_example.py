"""Example tests demonstrating mocks backed by real objects."""

from __future__ import annotations

import types
import typing as t

from examples._utils import Shelter
from obj_mox import any_string, instance, when

pytest_plugins = ("obj_mox.pytest_plugin",)

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from obj_mox.controller import ObjMox


class _RealShop:
    def buy(self, food: str, *, amount: int) -> str:
        return f"bought {amount} {food}"


def test_partial_backing_answers_the_rest(obj_mox: ObjMox) -> None:
    """Only the declared member is replaced; others come from the backing."""
    cat = types.SimpleNamespace(food="oreos", age=2)
    registry = obj_mox.mock("registry")
    when(registry.get_cat(1)).returns(cat)
    shop = obj_mox.mock(_RealShop, _RealShop())
    when(shop.buy(any_string(), amount=1)).call_through().once()

    shelter = Shelter(instance(registry), instance(shop))

    assert shelter.feed(1) == "bought 1 oreos"
    assert isinstance(instance(shop), _RealShop)
