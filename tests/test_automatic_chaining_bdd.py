"""Behavioural tests for automatic chaining using pytest-bdd."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenario

from tests.steps.mock_assertions import *  # noqa: F403
from tests.steps.mock_setup import *  # noqa: F403
from tests.steps.mock_usage import *  # noqa: F403

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"


@scenario(
    str(FEATURES_DIR / "automatic_chaining.feature"),
    "two chains share their common prefix",
)
def test_chains_share_prefix() -> None:
    """Intermediate positions are registered once."""


@scenario(str(FEATURES_DIR / "automatic_chaining.feature"), "item index mocking")
def test_item_index_mocking() -> None:
    """Subscripts are declared like members."""
