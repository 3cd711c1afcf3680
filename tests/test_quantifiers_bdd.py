"""Behavioural tests for quantifiers and matching order using pytest-bdd."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenario

from tests.steps.mock_assertions import *  # noqa: F403
from tests.steps.mock_setup import *  # noqa: F403
from tests.steps.mock_usage import *  # noqa: F403

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"


@scenario(str(FEATURES_DIR / "quantifiers.feature"), "a behavior expected once")
def test_behavior_expected_once() -> None:
    """Verification and invocation both enforce ``once()``."""


@scenario(str(FEATURES_DIR / "quantifiers.feature"), "the first declared behavior wins")
def test_first_declared_behavior_wins() -> None:
    """Overlapping matchers resolve in declaration order."""
