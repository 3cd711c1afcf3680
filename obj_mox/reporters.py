"""Diagnostics for unexpected use of mock instances."""

from __future__ import annotations

import logging
import typing as t

from .errors import UnexpectedAccessError, UnfulfilledExpectationError
from .formatting import fmt, format_property_access, indent, numbered
from .ranges import Range

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .behavior import Behavior, BehaviorMatchResult

logger = logging.getLogger(__name__)

FailFunction = t.Callable[[str], t.Any]

NOT_BACKED = "This mock is not backed"

_custom_fail: FailFunction | None = None


def set_custom_fail(fail: FailFunction | None) -> None:
    """Route unexpected access reports through *fail*.

    *fail* receives the full diagnostic and is expected to raise, for example
    ``pytest.fail``. If it returns, :class:`UnexpectedAccessError` is raised as
    usual. Passing ``None`` restores the default behaviour.
    """
    global _custom_fail  # noqa: PLW0603 - process wide failure hook
    _custom_fail = fail


def fail(message: str) -> t.NoReturn:
    """Raise the diagnostic *message* through the configured failure function."""
    logger.debug("Unexpected access reported:\n%s", message)
    if _custom_fail is not None:
        _custom_fail(message)
    raise UnexpectedAccessError(message)


def _describe_matched(match: BehaviorMatchResult) -> list[str]:
    matched = match.matched
    if matched is None:
        return []
    lines = [
        "",
        (
            "The following behavior matched, but that behavior was expected "
            f"{matched.expected_calls} and was received "
            f"{Range(len(matched.actual_calls))}."
        ),
        matched.get_signature(),
    ]
    if matched.actual_calls:
        lines.extend(["", "Previous matching calls were:"])
        lines.append(numbered([call.signature for call in matched.actual_calls]))
    return lines


def _describe_unmatched(match: BehaviorMatchResult, *, kind: str) -> list[str]:
    if not match.unmatched:
        if match.matched is None:
            return [f"No {kind} behavior was defined on this symbol."]
        return []
    lines = ["", "The following behaviors were tested but they did not match:"]
    for unmatched in match.unmatched:
        lines.extend(
            [
                "",
                f"- {unmatched.behavior}",
                f"  reason: {indent(unmatched.reason)}",
            ]
        )
    return lines


def _describe_remaining(match: BehaviorMatchResult) -> list[str]:
    if not match.remaining:
        return []
    lines = [
        "",
        (
            "These behaviors were not tested because the matching behavior "
            "was defined first and therefore had precedence."
        ),
    ]
    lines.extend(f"- {behavior.get_signature()}" for behavior in match.remaining)
    return lines


def report_function_call_error(
    call_signature: str,
    match: BehaviorMatchResult,
    *,
    backing_note: str | None,
) -> t.NoReturn:
    """Fail with the breakdown of an unexpected call.

    The report lists the behavior that matched but was exhausted, the
    behaviors that were tried and why they failed, and those shadowed by the
    match. *backing_note* explains why the backing object could not answer.
    """
    lines = [f"Unexpected call: {call_signature}"]
    lines.extend(_describe_matched(match))
    lines.extend(_describe_unmatched(match, kind="call"))
    lines.extend(_describe_remaining(match))
    if backing_note is not None:
        lines.extend(["", "", backing_note])
    fail("\n".join(lines))


def report_item_access_error(
    signature: str,
    match: BehaviorMatchResult,
    *,
    backing_note: str | None,
) -> t.NoReturn:
    """Fail with the breakdown of an unexpected subscript."""
    lines = [f"Unexpected item access: {signature}"]
    lines.extend(_describe_matched(match))
    lines.extend(_describe_unmatched(match, kind="item"))
    lines.extend(_describe_remaining(match))
    if backing_note is not None:
        lines.extend(["", "", backing_note])
    fail("\n".join(lines))


def report_member_access_error(
    signature: str,
    members_with_behavior: t.Sequence[str],
    match: BehaviorMatchResult | None,
    backing_members: t.Sequence[str] | None,
) -> t.NoReturn:
    """Fail after an attribute read nothing accounts for.

    *backing_members* is ``None`` for virtual mocks.
    """
    lines = [f"Unexpected property access: {signature}"]
    if match is not None and match.matched is not None:
        matched = match.matched
        lines.extend(
            [
                "",
                (
                    "The following behavior matched, but that behavior was "
                    f"expected {matched.expected_calls} and was received "
                    f"{len(matched.actual_calls)}."
                ),
            ]
        )
    if members_with_behavior:
        lines.extend(["", "Behaviors were defined for the following members:"])
        lines.extend(f"- {format_property_access(m)}" for m in members_with_behavior)
    if backing_members is None:
        lines.extend(["", NOT_BACKED])
    else:
        lines.extend(
            ["", "The backing instance has the following properties defined:"]
        )
        lines.extend(f"- {format_property_access(m)}" for m in backing_members)
    fail("\n".join(lines))


def report_unexpected_write(target: str, value: object) -> t.NoReturn:
    """Fail after a write on a mock without backing."""
    fail(f"Unexpected write: {target} = {fmt(value)}\n\n{NOT_BACKED}")


def report_unexpected_delete(target: str) -> t.NoReturn:
    """Fail after a deletion on a mock without backing."""
    fail(f"Unexpected: delete {target}\n\n{NOT_BACKED}")


def unsatisfied_error(
    behaviors: t.Sequence[Behavior],
) -> UnfulfilledExpectationError:
    """Build the aggregate error raised by ``verify()``."""
    msg = f"There are {len(behaviors)} unsatisfied expectations:\n" + numbered(
        [str(behavior) for behavior in behaviors]
    )
    return UnfulfilledExpectationError(msg)


__all__ = [
    "NOT_BACKED",
    "FailFunction",
    "fail",
    "report_function_call_error",
    "report_item_access_error",
    "report_member_access_error",
    "report_unexpected_delete",
    "report_unexpected_write",
    "set_custom_fail",
    "unsatisfied_error",
]
