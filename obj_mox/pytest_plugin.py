"""Pytest plugin providing the ``obj_mox`` fixture.

The fixture verifies every mock it created once the test finishes. Whether it
does so is decided per test, in this order: the ``obj_mox`` marker, the fixture
param, the command-line flags, then the ``obj_mox_auto_verify`` ini setting.

The plugin ships without a ``pytest11`` entry point. Enable it with
``pytest_plugins = ("obj_mox.pytest_plugin",)`` in a ``conftest.py``.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as t
from collections import abc

import pytest

from .controller import ObjMox

logger = logging.getLogger(__name__)

AUTO_VERIFY = "obj_mox_auto_verify"

_FLAGS = (
    ("--obj-mox-auto-verify", "store_true", "Verify"),
    ("--no-obj-mox-auto-verify", "store_false", "Do not verify"),
)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the auto-verify flags and ini setting."""
    group = parser.getgroup("obj_mox", "obj_mox test doubles")
    for flag, action, verb in _FLAGS:
        group.addoption(
            flag,
            action=action,
            dest=AUTO_VERIFY,
            default=None,
            help=(
                f"{verb} the mocks of the obj_mox fixture at teardown. "
                f"Overrides the {AUTO_VERIFY} ini setting."
            ),
        )
    parser.addini(
        AUTO_VERIFY,
        "Verify the mocks of the obj_mox fixture at teardown (default: true).",
        type="bool",
        default=True,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the ``obj_mox`` marker."""
    config.addinivalue_line(
        "markers",
        "obj_mox(auto_verify=True): verify this test's obj_mox mocks at teardown.",
    )


def _auto_verify_enabled(request: pytest.FixtureRequest) -> bool:
    """Return whether the fixture verifies its mocks at teardown."""
    override = _per_test_auto_verify(request)
    if override is not None:
        return override
    config = request.config
    cli_value = config.getoption(AUTO_VERIFY)
    return bool(config.getini(AUTO_VERIFY) if cli_value is None else cli_value)


def _per_test_auto_verify(request: pytest.FixtureRequest) -> bool | None:
    """Return the ``auto_verify`` given by the marker, else by the fixture param."""
    marker = request.node.get_closest_marker("obj_mox")
    if marker is not None and "auto_verify" in marker.kwargs:
        return bool(marker.kwargs["auto_verify"])
    param = getattr(request, "param", None)
    if param is None or isinstance(param, bool):
        return param
    if isinstance(param, abc.Mapping) and "auto_verify" in param:
        return bool(param["auto_verify"])
    msg = (
        "obj_mox fixture param must be a bool or a mapping with an "
        f"'auto_verify' key, got {param!r}"
    )
    raise TypeError(msg)


@dc.dataclass(slots=True)
class _VerifyState:
    """Per-test teardown state of the ``obj_mox`` fixture."""

    auto_verify: bool
    deferred_error: Exception | None = None


_STATE = pytest.StashKey[_VerifyState]()


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item, call: pytest.CallInfo[t.Any]
) -> t.Generator[None, pytest.TestReport, pytest.TestReport]:
    """Keep each phase's report on the item for the teardown decision.

    A verification error raised while the test body had already failed is
    shown as an extra section of the teardown report.
    """
    del call
    rep = yield
    setattr(item, f"rep_{rep.when}", rep)
    state = item.stash.get(_STATE, None)
    if rep.when == "teardown" and state is not None and state.deferred_error:
        err = state.deferred_error
        state.deferred_error = None
        rep.sections.append(("obj_mox verification", f"{type(err).__name__}: {err}"))
    return rep


@pytest.fixture
def obj_mox(request: pytest.FixtureRequest) -> t.Generator[ObjMox, None, None]:
    """Provide an :class:`ObjMox` whose mocks are verified at teardown."""
    state = _VerifyState(auto_verify=_auto_verify_enabled(request))
    request.node.stash[_STATE] = state
    mox = ObjMox(verify_on_exit=False)
    try:
        yield mox
    except Exception:
        logger.exception("Error during obj_mox fixture setup or test execution")
        raise
    finally:
        _verify_at_teardown(request.node, mox, state)


def _verify_at_teardown(item: pytest.Item, mox: ObjMox, state: _VerifyState) -> None:
    """Verify the fixture's mocks unless auto verification is disabled.

    The failure fails the teardown, except when the test body already failed:
    then it is deferred to the teardown report so the original failure stays
    the headline.
    """
    if not state.auto_verify:
        return
    try:
        mox.verify()
    except Exception as err:
        logger.exception("Error during obj_mox verification")
        if not _call_stage_failed(item):
            pytest.fail(f"{type(err).__name__}: {err}")
        state.deferred_error = err


def _call_stage_failed(item: pytest.Item) -> bool:
    """Return ``True`` when the test body has already failed."""
    rep_call = getattr(item, "rep_call", None)
    return bool(rep_call and rep_call.failed)


__all__ = ["obj_mox"]
