"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from obj_mox.reporters import set_custom_fail

pytest_plugins = ("obj_mox.pytest_plugin",)


@pytest.fixture(autouse=True)
def reset_custom_fail() -> t.Generator[None, None, None]:
    """Ensure no custom failure callback leaks between tests."""
    set_custom_fail(None)
    yield
    set_custom_fail(None)
