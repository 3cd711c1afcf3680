"""Unit tests for the pytest plugin."""

from __future__ import annotations

import dataclasses as dc
import textwrap
import typing as t

import pytest

from obj_mox import instance, when

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from obj_mox.controller import ObjMox


pytest_plugins = ("obj_mox.pytest_plugin", "pytester")


@dc.dataclass(slots=True, frozen=True)
class AutoVerifyTestCase:
    """Test case data for auto-verify configuration scenarios."""

    ini_setting: str | None
    cli_args: tuple[str, ...]
    test_decorator: str
    should_fail: bool


UNSATISFIED_TEST = textwrap.dedent(
    """
    import pytest
    from obj_mox import when

    pytest_plugins = ("obj_mox.pytest_plugin",)

    {decorator}
    def test_unsatisfied(obj_mox):
        cat = obj_mox.mock("cat")
        when(cat.purr()).returns("rrr").once()
    """
)


def test_fixture_basic(obj_mox: ObjMox) -> None:
    """Fixture yields an ObjMox whose mocks are verified afterwards."""
    cat = obj_mox.mock("cat")
    when(cat.purr()).returns("rrr").once()
    assert instance(cat).purr() == "rrr"
    assert not obj_mox.verify_on_exit


def test_missing_invocation_fails_during_teardown(pytester: pytest.Pytester) -> None:
    """Verification failures should fail the test even without explicit calls."""
    test_file = pytester.makepyfile(UNSATISFIED_TEST.format(decorator=""))

    result = pytester.runpytest(str(test_file))
    result.assert_outcomes(passed=1, errors=1)
    result.stdout.fnmatch_lines(["*UnfulfilledExpectationError*"])
    result.stdout.fnmatch_lines(["*<cat>.purr() : expected once, received 0*"])


def test_verification_error_suppressed_on_test_failure(
    pytester: pytest.Pytester,
) -> None:
    """Primary test failures should mask verification errors."""
    test_file = pytester.makepyfile(
        """
        from obj_mox import when

        pytest_plugins = ("obj_mox.pytest_plugin",)

        def test_failure(obj_mox):
            cat = obj_mox.mock("cat")
            when(cat.purr()).returns("rrr").once()
            assert False
        """
    )

    result = pytester.runpytest(str(test_file))
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*assert False*"])


def test_unexpected_access_fails_the_test(pytester: pytest.Pytester) -> None:
    """Unexpected accesses raise inside the test body."""
    test_file = pytester.makepyfile(
        """
        from obj_mox import instance

        pytest_plugins = ("obj_mox.pytest_plugin",)

        def test_unexpected(obj_mox):
            cat = obj_mox.mock("cat")
            instance(cat).purr()
        """
    )

    result = pytester.runpytest(str(test_file))
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*Unexpected property access: <cat>.purr*"])


@pytest.mark.parametrize(
    "test_case",
    [
        pytest.param(
            AutoVerifyTestCase(
                ini_setting="obj_mox_auto_verify = false",
                cli_args=(),
                test_decorator="",
                should_fail=False,
            ),
            id="ini-disables",
        ),
        pytest.param(
            AutoVerifyTestCase(
                ini_setting=None,
                cli_args=("--no-obj-mox-auto-verify",),
                test_decorator="",
                should_fail=False,
            ),
            id="cli-disables",
        ),
        pytest.param(
            AutoVerifyTestCase(
                ini_setting="obj_mox_auto_verify = false",
                cli_args=("--obj-mox-auto-verify",),
                test_decorator="",
                should_fail=True,
            ),
            id="cli-overrides-ini",
        ),
        pytest.param(
            AutoVerifyTestCase(
                ini_setting=None,
                cli_args=(),
                test_decorator="@pytest.mark.obj_mox(auto_verify=False)",
                should_fail=False,
            ),
            id="marker-disables",
        ),
        pytest.param(
            AutoVerifyTestCase(
                ini_setting=None,
                cli_args=("--no-obj-mox-auto-verify",),
                test_decorator="@pytest.mark.obj_mox(auto_verify=True)",
                should_fail=True,
            ),
            id="marker-overrides-cli",
        ),
    ],
)
def test_auto_verify_configuration(
    pytester: pytest.Pytester, test_case: AutoVerifyTestCase
) -> None:
    """Marker beats CLI option, which beats the ini setting."""
    if test_case.ini_setting is not None:
        pytester.makeini(f"[pytest]\n{test_case.ini_setting}\n")
    test_file = pytester.makepyfile(
        UNSATISFIED_TEST.format(decorator=test_case.test_decorator)
    )

    # Command-line options only parse once the plugin is registered up front.
    plugins: tuple[str, ...] = ("obj_mox.pytest_plugin",) if test_case.cli_args else ()
    result = pytester.runpytest(*test_case.cli_args, str(test_file), plugins=plugins)

    if test_case.should_fail:
        result.assert_outcomes(passed=1, errors=1)
        result.stdout.fnmatch_lines(["*UnfulfilledExpectationError*"])
    else:
        result.assert_outcomes(passed=1)


@pytest.mark.parametrize(
    ("param", "should_fail"),
    [(False, False), ({"auto_verify": False}, False), ({"auto_verify": True}, True)],
)
def test_fixture_param_overrides_configuration(
    pytester: pytest.Pytester,
    param: object,
    should_fail: bool,  # noqa: FBT001
) -> None:
    """Indirect parametrization of the fixture controls verification."""
    test_file = pytester.makepyfile(
        f"""
        import pytest
        from obj_mox import when

        pytest_plugins = ("obj_mox.pytest_plugin",)

        @pytest.mark.parametrize("obj_mox", [{param!r}], indirect=True)
        def test_param(obj_mox):
            cat = obj_mox.mock("cat")
            when(cat.purr()).returns("rrr").once()
        """
    )

    result = pytester.runpytest(str(test_file))

    if should_fail:
        result.assert_outcomes(passed=1, errors=1)
    else:
        result.assert_outcomes(passed=1)


def test_invalid_fixture_param_is_rejected(pytester: pytest.Pytester) -> None:
    """Unsupported params fail fixture setup with a ``TypeError``."""
    test_file = pytester.makepyfile(
        """
        import pytest

        pytest_plugins = ("obj_mox.pytest_plugin",)

        @pytest.mark.parametrize("obj_mox", [{"verify": False}], indirect=True)
        def test_param(obj_mox):
            pass
        """
    )

    result = pytester.runpytest(str(test_file))
    result.assert_outcomes(errors=1)
    result.stdout.fnmatch_lines(["*mapping with an 'auto_verify' key*"])
