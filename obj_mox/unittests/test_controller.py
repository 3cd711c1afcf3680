"""Unit tests for :mod:`obj_mox.controller`."""

from __future__ import annotations

import pytest

from obj_mox import when
from obj_mox.controller import ObjMox
from obj_mox.errors import UnfulfilledExpectationError


def test_controller_tracks_mocks() -> None:
    """Mocks created through the controller are listed."""
    mox = ObjMox()
    cat = mox.mock("cat")
    inst = mox.mock_instance("dog", {"name": "Rex"})
    assert mox.mocks[0] is cat
    assert len(mox.mocks) == 2
    assert inst.name == "Rex"
    assert mox.verify_on_exit


def test_verify_aggregates_all_mocks() -> None:
    """One error lists the unsatisfied behaviors of every mock."""
    mox = ObjMox()
    cat = mox.mock("cat")
    dog = mox.mock("dog")
    when(cat.purr()).returns("rrr").once()
    when(dog.bark()).returns("woof").at_least_once()

    assert len(mox.unsatisfied()) == 2
    with pytest.raises(UnfulfilledExpectationError) as excinfo:
        mox.verify()
    assert str(excinfo.value) == (
        "There are 2 unsatisfied expectations:\n"
        "1. <cat>.purr() : expected once, received 0\n"
        "2. <dog>.bark() : expected at least once, received 0"
    )


def test_context_manager_verifies_on_clean_exit() -> None:
    """Leaving the block verifies the tracked mocks."""
    with pytest.raises(UnfulfilledExpectationError):  # noqa: PT012
        with ObjMox() as mox:
            cat = mox.mock("cat")
            when(cat.purr()).returns("rrr").once()


def test_context_manager_keeps_the_original_error() -> None:
    """Verification is skipped when the block raised."""
    with pytest.raises(KeyError):  # noqa: PT012
        with ObjMox() as mox:
            cat = mox.mock("cat")
            when(cat.purr()).returns("rrr").once()
            raise KeyError("boom")


def test_verify_on_exit_can_be_disabled() -> None:
    """Callers may verify explicitly instead."""
    with ObjMox(verify_on_exit=False) as mox:
        cat = mox.mock("cat")
        when(cat.purr()).returns("rrr").once()
    assert not mox.verify_on_exit
    assert len(mox.unsatisfied()) == 1


def test_reset_and_debug_cover_every_mock() -> None:
    """``reset`` and ``debug`` apply to all tracked mocks."""
    mox = ObjMox()
    cat = mox.mock("cat")
    dog = mox.mock("dog")
    when(cat.purr()).returns("rrr").once()
    when(dog.bark()).returns("woof")

    assert mox.debug() == (
        "<cat>.purr : expected any times, received 0\n"
        "<cat>.purr() : expected once, received 0\n"
        "<dog>.bark : expected any times, received 0\n"
        "<dog>.bark() : expected any times, received 0"
    )

    mox.reset()
    mox.verify()
    assert mox.debug() == ""
