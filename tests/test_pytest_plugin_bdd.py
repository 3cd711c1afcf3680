"""Behavioural test of the obj_mox pytest plug-in, expressed with pytest-bdd."""

from __future__ import annotations

import textwrap
import typing as t
from pathlib import Path

from pytest_bdd import given, scenario, then, when

if t.TYPE_CHECKING:  # pragma: no cover - used for type checking only
    from _pytest.pytester import Pytester, RunResult

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"

pytest_plugins = ("pytester",)


@scenario(str(FEATURES_DIR / "pytest_plugin.feature"), "obj_mox fixture basic usage")
def test_obj_mox_plugin() -> None:
    """Bind scenario steps for the pytest plugin."""


@scenario(
    str(FEATURES_DIR / "pytest_plugin.feature"),
    "unsatisfied behaviors fail the test at teardown",
)
def test_obj_mox_plugin_teardown_failure() -> None:
    """Bind scenario steps for teardown verification."""


TEST_CODE = textwrap.dedent(
    """
    from obj_mox import instance, when

    pytest_plugins = ("obj_mox.pytest_plugin",)

    def test_example(obj_mox):
        cat = obj_mox.mock("cat")
        when(cat.purr()).returns("rrr").once()
        assert instance(cat).purr() == "rrr"
    """
)

UNSATISFIED_CODE = textwrap.dedent(
    """
    from obj_mox import when

    pytest_plugins = ("obj_mox.pytest_plugin",)

    def test_example(obj_mox):
        cat = obj_mox.mock("cat")
        when(cat.purr()).returns("rrr").once()
    """
)


@given("a temporary test file using the obj_mox fixture", target_fixture="test_file")
def create_test_file(pytester: Pytester) -> Path:
    """Write the example test file."""
    return pytester.makepyfile(TEST_CODE)


@given(
    "a temporary test file leaving a behavior unsatisfied",
    target_fixture="test_file",
)
def create_unsatisfied_test_file(pytester: Pytester) -> Path:
    """Write a test declaring a behavior it never uses."""
    return pytester.makepyfile(UNSATISFIED_CODE)


@when("I run pytest on the file", target_fixture="result")
def run_pytest(pytester: Pytester, test_file: Path) -> RunResult:
    """Run the inner pytest instance."""
    return pytester.runpytest(str(test_file))


@then("the run should pass")
def assert_success(result: RunResult) -> None:
    """Assert that the test passed."""
    result.assert_outcomes(passed=1)


@then("the run should report a teardown error")
def assert_teardown_error(result: RunResult) -> None:
    """Assert that verification failed after the test body passed."""
    result.assert_outcomes(passed=1, errors=1)
    result.stdout.fnmatch_lines(["*UnfulfilledExpectationError*"])
