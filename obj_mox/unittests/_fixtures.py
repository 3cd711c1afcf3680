"""Small domain classes used as mocking targets across the unit tests."""

from __future__ import annotations


class Tag:
    """Collar tag carrying a chip."""

    def __init__(self, number: int) -> None:
        self.number = number

    def describe(self) -> str:
        return f"tag #{self.number}"


class Cat:
    """Class with a little state and a few methods to mock."""

    def __init__(self, name: str = "Olinka") -> None:
        self.name = name
        self.color = "gray"

    def purr(self) -> str:
        return "rrr"

    def get_tag(self, number: int) -> Tag:
        return Tag(number)

    def eat(self, food: str, *, amount: int = 1) -> str:
        return f"{self.name} ate {amount} {food}"
