# ruff: noqa: S101
"""pytest-bdd assertions about mock outcomes and verification."""

from __future__ import annotations

import typing as t

import pytest
from pytest_bdd import parsers, then

from obj_mox import UnfulfilledExpectationError, verify
from obj_mox.nodes import node_of

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from obj_mox import Recording
    from tests.helpers.recordings import Outcome


@then(parsers.cfparse('the result is "{text}"'))
def check_text_result(outcome: Outcome, text: str) -> None:
    """The code under test received *text*."""
    assert outcome.error is None, str(outcome.error)
    assert outcome.value == text


@then(parsers.cfparse("the result is {number:d}"))
def check_number_result(outcome: Outcome, number: int) -> None:
    """The code under test received *number*."""
    assert outcome.error is None, str(outcome.error)
    assert outcome.value == number


@then("an unexpected access error is raised")
def check_unexpected_access(outcome: Outcome) -> None:
    """The instance rejected the access."""
    assert outcome.error is not None, f"access returned {outcome.value!r}"


@then("verification succeeds")
def check_verification_succeeds(recording: Recording) -> None:
    """Every behavior is within its range."""
    verify(recording)


@then("verification fails")
def check_verification_fails(recording: Recording) -> None:
    """Some behavior is outside its range."""
    with pytest.raises(UnfulfilledExpectationError):
        verify(recording)


@then(parsers.cfparse('the member "{member}" holds {count:d} behavior'))
def check_member_registry_size(recording: Recording, member: str, count: int) -> None:
    """The root holds *count* behaviors for *member*."""
    node = node_of(recording)
    assert node is not None
    assert node.member_registry(member).size == count
