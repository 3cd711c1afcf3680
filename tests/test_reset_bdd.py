"""Behavioural tests for resetting mocks using pytest-bdd."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenario

from tests.steps.mock_assertions import *  # noqa: F403
from tests.steps.mock_setup import *  # noqa: F403
from tests.steps.mock_usage import *  # noqa: F403

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"


@scenario(
    str(FEATURES_DIR / "reset.feature"), "resetting one member keeps the others"
)
def test_reset_keeps_siblings() -> None:
    """Reset does not cascade to sibling members."""
