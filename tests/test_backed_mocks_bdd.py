"""Behavioural tests for backed and virtual mocks using pytest-bdd."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenario

from tests.steps.mock_assertions import *  # noqa: F403
from tests.steps.mock_setup import *  # noqa: F403
from tests.steps.mock_usage import *  # noqa: F403

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"


@scenario(
    str(FEATURES_DIR / "backed_mocks.feature"),
    "using the actual value of a backed member",
)
def test_use_actual_value() -> None:
    """``use_actual`` reads the backing object."""


@scenario(
    str(FEATURES_DIR / "backed_mocks.feature"),
    "undeclared members fall through to the backing",
)
def test_backed_fallthrough() -> None:
    """Backed mocks answer undeclared members from the backing."""


@scenario(
    str(FEATURES_DIR / "backed_mocks.feature"),
    "virtual mocks reject undeclared members",
)
def test_virtual_rejects_undeclared() -> None:
    """Virtual mocks have nothing to fall back on."""
