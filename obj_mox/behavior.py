"""Behaviors and the ordered registries that hold them."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from .errors import UsageError
from .formatting import RecordingType, format_signature
from .matchers import (
    MatchResult,
    equivalent,
    function_arguments,
    keyword_arguments,
)
from .ranges import ZERO_OR_MORE, Range

Handler = t.Callable[["RuntimeContext"], t.Any]


@dc.dataclass(frozen=True, slots=True)
class CallArgs:
    """Positional and keyword arguments of one call (or one declaration)."""

    args: tuple[t.Any, ...] = ()
    kwargs: t.Mapping[str, t.Any] = dc.field(default_factory=dict)

    def match(self, actual: CallArgs) -> MatchResult:
        """Match *actual* arguments against these, which may contain matchers."""
        result = function_arguments(self.args).match(actual.args)
        if result is not True:
            return result
        return keyword_arguments(self.kwargs).match(actual.kwargs)


@dc.dataclass(slots=True)
class RuntimeContext:
    """What a handler gets to see about the invocation it answers.

    Attributes
    ----------
    args:
        Arguments of the invocation, or ``None`` for attribute reads.
    context:
        The instance the invocation happened on.
    get_original_target:
        Resolves the backing member (or the result of calling the backing)
        matching this invocation, or :data:`~obj_mox.instance.MISSING` when the
        backing lacks it. ``None`` when the mock is virtual.
    """

    args: CallArgs | None
    context: object = None
    get_original_target: t.Callable[[], t.Any] | None = None


@dc.dataclass(frozen=True, slots=True)
class ObservedCall:
    """Record of one invocation handled by a behavior."""

    signature: str


@dc.dataclass(frozen=True, slots=True)
class HandlingSuccess:
    """The behavior produced *result*."""

    result: t.Any


@dc.dataclass(frozen=True, slots=True)
class HandlingFailure:
    """The behavior matched but its call range was already exhausted."""

    behavior: Behavior


HandlingResult = HandlingSuccess | HandlingFailure


@dc.dataclass(eq=False, slots=True)
class Behavior:
    """One declared reaction to an invocation, with its call accounting."""

    path: str
    args: CallArgs | None
    expected_calls: Range
    handler: Handler
    kind: RecordingType = RecordingType.CALL
    actual_calls: list[ObservedCall] = dc.field(default_factory=list)

    def match(self, context: RuntimeContext) -> MatchResult:
        """Return ``True`` if *context* is addressed by this behavior."""
        if self.args is None:
            return True
        if context.args is None:
            return "expected a call but got a property access"
        return self.args.match(context.args)

    def handle(self, context: RuntimeContext) -> HandlingResult:
        """Record the invocation and run the handler unless the range is exhausted."""
        self.actual_calls.append(
            ObservedCall(format_signature(self.path, context.args, self.kind))
        )
        if self.expected_calls.maximum < len(self.actual_calls):
            return HandlingFailure(self)
        return HandlingSuccess(self.handler(context))

    def get_signature(self) -> str:
        """Return the declaration, e.g. ``<cat>.purr(12)``."""
        return format_signature(self.path, self.args, self.kind)

    def is_satisfied(self) -> bool:
        """Return ``True`` when the observed count lies within the range."""
        return self.expected_calls.contains(len(self.actual_calls))

    def is_expecting(self) -> bool:
        """Return ``True`` when the behavior also asserts it is used."""
        return self.expected_calls.has_fixed_count() or self.expected_calls.minimum > 0

    def __str__(self) -> str:
        """Return ``signature : expected <range>, received <n>``."""
        return (
            f"{self.get_signature()} : expected {self.expected_calls}, "
            f"received {len(self.actual_calls)}"
        )


@dc.dataclass(frozen=True, slots=True)
class UnmatchedBehavior:
    """A behavior that was tried against an invocation and why it failed."""

    behavior: Behavior
    reason: str


@dc.dataclass(slots=True)
class BehaviorMatchResult:
    """Outcome of matching an invocation against a registry.

    ``unmatched`` holds the behaviors tried before ``matched`` and
    ``remaining`` those that were shadowed by it.
    """

    matched: Behavior | None = None
    unmatched: list[UnmatchedBehavior] = dc.field(default_factory=list)
    remaining: list[Behavior] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class UnmatchedInvocation:
    """No behavior addressed the invocation."""

    match: BehaviorMatchResult


class BehaviorRegistry:
    """Ordered behaviors declared for one path; the first match wins."""

    def __init__(self, path: str, kind: RecordingType = RecordingType.CALL) -> None:
        self.path = path
        self.kind = kind
        self._behaviors: list[Behavior] = []

    @property
    def size(self) -> int:
        """Number of behaviors currently registered."""
        return len(self._behaviors)

    def __len__(self) -> int:
        """Return :attr:`size`."""
        return len(self._behaviors)

    def __iter__(self) -> t.Iterator[Behavior]:
        """Iterate over the behaviors in declaration order."""
        return iter(list(self._behaviors))

    def __contains__(self, behavior: object) -> bool:
        """Return ``True`` when this exact behavior is registered."""
        return any(item is behavior for item in self._behaviors)

    def add_expectation(self, args: CallArgs | None, handler: Handler) -> Behavior:
        """Append a behavior accepting any number of calls and return it."""
        behavior = Behavior(self.path, args, ZERO_OR_MORE, handler, self.kind)
        self._behaviors.append(behavior)
        return behavior

    def set_last_expectation_range(self, expected: Range) -> None:
        """Set the call range of the most recently added behavior."""
        if not self._behaviors:
            msg = (
                "No behavior defined. You need to first define a behavior with "
                "for instance .returns() or .use_value(), then specify how many "
                "times that call was expected."
            )
            raise UsageError(msg)
        self._behaviors[-1].expected_calls = expected

    def match(self, context: RuntimeContext) -> BehaviorMatchResult:
        """Find the first behavior addressing *context*."""
        result = BehaviorMatchResult()
        for index, behavior in enumerate(self._behaviors):
            outcome = behavior.match(context)
            if outcome is True:
                result.matched = behavior
                result.remaining = self._behaviors[index + 1 :]
                break
            result.unmatched.append(UnmatchedBehavior(behavior, outcome))
        return result

    def handle(
        self, context: RuntimeContext
    ) -> HandlingSuccess | HandlingFailure | UnmatchedInvocation:
        """Dispatch *context* to the first matching behavior."""
        result = self.match(context)
        if result.matched is None:
            return UnmatchedInvocation(result)
        return result.matched.handle(context)

    def get_all_unsatisfied(self) -> list[Behavior]:
        """Return behaviors whose observed count lies outside their range."""
        return [behavior for behavior in self._behaviors if not behavior.is_satisfied()]

    def has_expecting(self) -> bool:
        """Return ``True`` if any behavior asserts it must be used."""
        return any(behavior.is_expecting() for behavior in self._behaviors)

    def discard(self, args: CallArgs | None) -> None:
        """Remove every behavior declared for arguments equivalent to *args*."""
        def same_args(behavior: Behavior) -> bool:
            if args is None or behavior.args is None:
                return args is behavior.args
            return equivalent(
                (behavior.args.args, dict(behavior.args.kwargs)),
                (args.args, dict(args.kwargs)),
            )

        self._behaviors = [b for b in self._behaviors if not same_args(b)]

    def reset(self) -> None:
        """Remove every behavior."""
        self._behaviors.clear()

    def __str__(self) -> str:
        """Return one line per behavior."""
        return "\n".join(str(behavior) for behavior in self._behaviors)


__all__ = [
    "Behavior",
    "BehaviorMatchResult",
    "BehaviorRegistry",
    "CallArgs",
    "Handler",
    "HandlingFailure",
    "HandlingResult",
    "HandlingSuccess",
    "ObservedCall",
    "RuntimeContext",
    "UnmatchedBehavior",
    "UnmatchedInvocation",
]
