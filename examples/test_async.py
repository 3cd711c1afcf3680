"""Example tests demonstrating awaitable answers."""

from __future__ import annotations

import asyncio
import typing as t

import pytest

from examples._utils import Shelter
from obj_mox import instance, when

pytest_plugins = ("obj_mox.pytest_plugin",)

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from obj_mox.controller import ObjMox


def test_resolves_returns_an_awaitable(obj_mox: ObjMox) -> None:
    """``resolves`` answers with a coroutine producing the value."""
    registry = obj_mox.mock("registry")
    when(registry.reserve(5)).resolves(1234).once()

    shelter = Shelter(instance(registry), obj_mox.mock_instance("shop"))

    assert asyncio.run(shelter.adopt(5)) == "adopted #1234"


def test_rejects_raises_when_awaited(obj_mox: ObjMox) -> None:
    """``rejects`` answers with a coroutine raising the error."""
    registry = obj_mox.mock("registry")
    when(registry.reserve(5)).rejects(PermissionError("already adopted"))

    shelter = Shelter(instance(registry), obj_mox.mock_instance("shop"))

    with pytest.raises(PermissionError, match="already adopted"):
        asyncio.run(shelter.adopt(5))
