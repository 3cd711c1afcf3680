"""Shared code under test for the runnable examples."""

from __future__ import annotations

import typing as t


class Shelter:
    """Talks to a shelter registry client and a pet food shop."""

    def __init__(self, registry: t.Any, shop: t.Any) -> None:  # noqa: ANN401
        self.registry = registry
        self.shop = shop

    def chip_of(self, cat_id: int) -> str:
        """Return the chip identifier of the tag worn by *cat_id*."""
        return self.registry.get_cat(cat_id).tag.chip.id

    def feed(self, cat_id: int) -> str:
        """Buy food matching the cat's preference."""
        cat = self.registry.get_cat(cat_id)
        portions = 2 if cat.age > 10 else 1
        return self.shop.buy(cat.food, amount=portions)

    async def adopt(self, cat_id: int) -> str:
        """Reserve *cat_id* and return the confirmation number."""
        confirmation = await self.registry.reserve(cat_id)
        return f"adopted #{confirmation}"
