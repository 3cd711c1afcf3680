"""Composable argument matchers.

A matcher is an instance of :class:`Matcher`. It has a human readable
:attr:`~Matcher.name`, a :meth:`~Matcher.match` method returning ``True`` or a
string explaining the mismatch, and an equality relation
(:meth:`~Matcher.equals`) used to deduplicate declarations. Plain values are
promoted to matchers by :func:`match`, so ``when(m.f(1, {"a": 2}))`` and
``when(m.f(equals(1), object_eq({"a": 2})))`` accept the same calls.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import enum
import json
import numbers
import operator
import typing as t
from collections import abc
from decimal import Decimal
from fractions import Fraction

from .formatting import fmt, indent

MatchResult = t.Literal[True] | str

_PRIMITIVES = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    enum.Enum,
    dt.date,
    dt.time,
    dt.timedelta,
)


class _AbsentType:
    """Type of :data:`ABSENT`."""

    __slots__ = ()

    def __repr__(self) -> str:
        """Return a debug representation."""
        return "<absent>"

    def __bool__(self) -> bool:
        """Treat a missing argument as falsy."""
        return False


ABSENT = _AbsentType()
"""Stands in for an argument the caller did not pass."""


class Matcher:
    """Base class for every matcher.

    Subclasses implement :meth:`_match` and :attr:`name`, and return the values
    that identify them from :meth:`_params` so that :meth:`equals` can compare
    two declarations structurally.
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        """Return the human readable name of this matcher."""
        raise NotImplementedError

    def match(self, actual: object) -> MatchResult:
        """Return ``True`` if *actual* matches, otherwise the reason it does not.

        When *actual* is itself a matcher the comparison is matcher equality.
        """
        if isinstance(actual, Matcher):
            if self.equals(actual):
                return True
            return f"{fmt(actual)} is a different matcher than {fmt(self)}"
        return self._match(actual)

    def _match(self, actual: object) -> MatchResult:
        raise NotImplementedError

    def _params(self) -> tuple[object, ...]:
        return ()

    def equals(self, other: object) -> bool:
        """Return ``True`` when *other* is a matcher of the same kind and arguments."""
        if type(self) is not type(other):
            return False
        return equivalent(self._params(), t.cast("Matcher", other)._params())

    def __call__(self, actual: object) -> bool:
        """Return ``True`` if *actual* matches."""
        return self.match(actual) is True

    def __repr__(self) -> str:
        """Return the matcher name in angle brackets."""
        return f"<{self.name}>"

    def __describe__(self) -> str:
        """Render the matcher in diagnostics."""
        return repr(self)


# ===================================
# Basic matchers
# ===================================


class Matching(Matcher):
    """Generic matcher built from a predicate.

    The predicate returns ``True`` on success and a string describing the
    mismatch otherwise. Any other falsy result produces a generic reason.
    """

    __slots__ = ("_name", "_predicate")

    def __init__(
        self, predicate: t.Callable[[t.Any], bool | str], name: str
    ) -> None:
        self._predicate = predicate
        self._name = name

    @property
    def name(self) -> str:
        """Return the name given at construction."""
        return self._name

    def _match(self, actual: object) -> MatchResult:
        result = self._predicate(actual)
        if isinstance(result, str):
            return result
        if result:
            return True
        return f"{fmt(actual)} does not match {self._name}"

    def _params(self) -> tuple[object, ...]:
        return (self._predicate, self._name)


def matching(predicate: t.Callable[[t.Any], bool | str], name: str) -> Matcher:
    """Create a matcher from *predicate*.

    Examples
    --------
    >>> the_answer = matching(lambda v: v == 42 or "not the answer", "answer")
    >>> match(the_answer, 22)
    'not the answer'
    >>> match(the_answer, 42)
    True
    """
    return Matching(predicate, name)


class Same(Matcher):
    """Match by identity."""

    __slots__ = ("expected",)

    def __init__(self, expected: object) -> None:
        self.expected = expected

    @property
    def name(self) -> str:
        """Return ``same(<expected>)``."""
        return f"same({fmt(self.expected)})"

    def _match(self, actual: object) -> MatchResult:
        if actual is self.expected:
            return True
        return f"expected {fmt(actual)} to be the same instance as {fmt(self.expected)}"

    def equals(self, other: object) -> bool:
        """Return ``True`` when *other* refers to the very same object."""
        return isinstance(other, Same) and other.expected is self.expected


def same(expected: object) -> Matcher:
    """Match values identical to *expected* (``is``)."""
    return Same(expected)


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def _loosely_equal(ref: object, candidate: object) -> bool:
    if isinstance(ref, str) and _is_number(candidate):
        ref, candidate = candidate, ref
    if _is_number(ref) and isinstance(candidate, str):
        text = candidate.strip()
        if not text:
            return ref == 0
        try:
            return float(text) == ref
        except ValueError:
            return False
    return bool(ref == candidate)


class WeakEquals(Matcher):
    """Match by loose equality, coercing numeric strings."""

    __slots__ = ("ref",)

    def __init__(self, ref: object) -> None:
        self.ref = ref

    @property
    def name(self) -> str:
        """Return ``~= <ref>``."""
        return f"~= {fmt(self.ref)}"

    def _match(self, actual: object) -> MatchResult:
        if _loosely_equal(self.ref, actual):
            return True
        return f"{fmt(actual)} is not equal to {fmt(self.ref)}"

    def _params(self) -> tuple[object, ...]:
        return (self.ref,)


def weak_equals(ref: object) -> Matcher:
    """Match values loosely equal to *ref* (``"12" ~= 12``)."""
    return WeakEquals(ref)


class Anything(Matcher):
    """Match every value, including an omitted argument."""

    __slots__ = ()

    @property
    def name(self) -> str:
        """Return ``anything``."""
        return "anything"

    def _match(self, actual: object) -> MatchResult:
        return True


def anything() -> Matcher:
    """Match any argument, including omitted arguments."""
    return Anything()


class Absent(Matcher):
    """Match only an omitted argument."""

    __slots__ = ()

    @property
    def name(self) -> str:
        """Return ``absent``."""
        return "absent"

    def _match(self, actual: object) -> MatchResult:
        if actual is ABSENT:
            return True
        return f"expected no argument but got {fmt(actual)}"


def absent() -> Matcher:
    """Match an argument the caller did not pass."""
    return Absent()


class InstanceOf(Matcher):
    """Match instances of a class."""

    __slots__ = ("cls",)

    def __init__(self, cls: type | tuple[type, ...]) -> None:
        self.cls = cls

    @property
    def name(self) -> str:
        """Return ``instance_of(<class>)``."""
        return f"instance_of({fmt(self.cls)})"

    def _match(self, actual: object) -> MatchResult:
        if isinstance(actual, self.cls):
            return True
        return f"{fmt(actual)} is not an instance of {fmt(self.cls)}"

    def _params(self) -> tuple[object, ...]:
        return (self.cls,)


def instance_of(cls: type | tuple[type, ...]) -> Matcher:
    """Match objects for which ``isinstance(actual, cls)`` holds."""
    return InstanceOf(cls)


# ===================================
# Type matchers
# ===================================


class TypeMatcher(Matcher):
    """Match values of a broad kind such as "number" or "string"."""

    __slots__ = ("_predicate", "type_name")

    def __init__(self, predicate: t.Callable[[object], bool], type_name: str) -> None:
        self._predicate = predicate
        self.type_name = type_name

    @property
    def name(self) -> str:
        """Return ``any <type>``."""
        return f"any {self.type_name}"

    def _match(self, actual: object) -> MatchResult:
        if self._predicate(actual):
            return True
        return f"expected {self.type_name} but got {type(actual).__name__}"

    def _params(self) -> tuple[object, ...]:
        return (self.type_name,)


def _is_object(value: object) -> bool:
    return value is not None and not isinstance(value, _PRIMITIVES)


def any_number() -> Matcher:
    """Match any number except booleans."""
    return TypeMatcher(_is_number, "number")


def any_boolean() -> Matcher:
    """Match ``True`` or ``False``."""
    return TypeMatcher(lambda value: isinstance(value, bool), "boolean")


def any_string() -> Matcher:
    """Match any ``str``."""
    return TypeMatcher(lambda value: isinstance(value, str), "string")


def any_bytes() -> Matcher:
    """Match ``bytes`` or ``bytearray``."""
    return TypeMatcher(lambda value: isinstance(value, bytes | bytearray), "bytes")


def any_function() -> Matcher:
    """Match any callable."""
    return TypeMatcher(callable, "function")


def any_object() -> Matcher:
    """Match anything that is neither ``None`` nor a primitive value."""
    return TypeMatcher(_is_object, "object")


def any_array() -> Matcher:
    """Match lists and tuples."""
    return TypeMatcher(lambda value: isinstance(value, list | tuple), "array")


def any_mapping() -> Matcher:
    """Match any mapping."""
    return TypeMatcher(lambda value: isinstance(value, abc.Mapping), "mapping")


# ===================================
# Combinatorial matchers
# ===================================


class AnyOf(Matcher):
    """Logical OR of matchers and plain values."""

    __slots__ = ("options",)

    def __init__(self, options: tuple[object, ...]) -> None:
        self.options = options

    @property
    def name(self) -> str:
        """Return ``any_of(...)``."""
        return "any_of(" + ", ".join(fmt(option) for option in self.options) + ")"

    def _match(self, actual: object) -> MatchResult:
        if any(match(option, actual) is True for option in self.options):
            return True
        listed = ", ".join(fmt(option) for option in self.options)
        return f"{fmt(actual)} did not match any of {listed}"

    def _params(self) -> tuple[object, ...]:
        return self.options


def any_of(*options: object) -> Matcher:
    """Match values matching at least one of *options*; ``any_of()`` never matches."""
    return AnyOf(options)


class AllOf(Matcher):
    """Logical AND of matchers and plain values."""

    __slots__ = ("requirements",)

    def __init__(self, requirements: tuple[object, ...]) -> None:
        self.requirements = requirements

    @property
    def name(self) -> str:
        """Return ``all_of(...)``."""
        return "all_of(" + ", ".join(fmt(req) for req in self.requirements) + ")"

    def _match(self, actual: object) -> MatchResult:
        for requirement in self.requirements:
            result = match(requirement, actual)
            if result is not True:
                return result
        return True

    def _params(self) -> tuple[object, ...]:
        return self.requirements


def all_of(*requirements: object) -> Matcher:
    """Match values matching all of *requirements*; ``all_of()`` always matches."""
    return AllOf(requirements)


class Not(Matcher):
    """Negate a matcher or plain value."""

    __slots__ = ("negated",)

    def __init__(self, negated: object) -> None:
        self.negated = negated

    @property
    def name(self) -> str:
        """Return ``not(...)``."""
        return f"not({fmt(self.negated)})"

    def _match(self, actual: object) -> MatchResult:
        if match(self.negated, actual) is True:
            return f"{fmt(actual)} matches {fmt(self.negated)}"
        return True

    def _params(self) -> tuple[object, ...]:
        return (self.negated,)


def not_(negated: object) -> Matcher:
    """Match values that do not match *negated*."""
    return Not(negated)


# ===================================
# Comparison matchers
# ===================================


class Comparison(Matcher):
    """Compare candidates against a reference with a binary operator."""

    __slots__ = ("_description", "_failure", "_op", "ref")

    def __init__(
        self,
        ref: object,
        op: t.Callable[[t.Any, t.Any], bool],
        description: str,
        failure: str,
    ) -> None:
        self.ref = ref
        self._op = op
        self._description = description
        self._failure = failure

    @property
    def name(self) -> str:
        """Return e.g. ``greater than 12``."""
        return f"{self._description} {fmt(self.ref)}"

    def _match(self, actual: object) -> MatchResult:
        try:
            ok = self._op(actual, self.ref)
        except TypeError:
            return f"{fmt(actual)} cannot be compared with {fmt(self.ref)}"
        if ok:
            return True
        return f"{fmt(actual)} is {self._failure} {fmt(self.ref)}"

    def _params(self) -> tuple[object, ...]:
        return (self._description, self.ref)


def greater_than(ref: object) -> Matcher:
    """Match candidates strictly greater than *ref*."""
    return Comparison(ref, operator.gt, "greater than", "no greater than")


def smaller_than(ref: object) -> Matcher:
    """Match candidates strictly smaller than *ref*."""
    return Comparison(ref, operator.lt, "smaller than", "no smaller than")


def greater_than_or_equal(ref: object) -> Matcher:
    """Match candidates greater than or equal to *ref*."""
    return Comparison(
        ref,
        operator.ge,
        "greater than or equal to",
        "no greater than nor equal to",
    )


def smaller_than_or_equal(ref: object) -> Matcher:
    """Match candidates smaller than or equal to *ref*."""
    return Comparison(
        ref,
        operator.le,
        "smaller than or equal to",
        "no smaller than nor equal to",
    )


def equals(ref: object) -> Matcher:
    """Match candidates strictly equal to *ref* (``True`` never equals ``1``)."""
    return Comparison(ref, _strictly_equal, "equal to", "not strictly equal to")


@dc.dataclass(frozen=True, slots=True)
class Exclusive:
    """Wrap a :func:`between` bound to exclude it from the range."""

    value: t.Any


def _bound(bound: object) -> tuple[t.Any, bool]:
    if isinstance(bound, Exclusive):
        return bound.value, False
    if isinstance(bound, abc.Mapping) and "exclusive" in bound:
        return bound["value"], not bound["exclusive"]
    return bound, True


class Between(Matcher):
    """Match candidates within an interval."""

    __slots__ = ("include_max", "include_min", "maximum", "minimum")

    def __init__(self, minimum: object, maximum: object) -> None:
        self.minimum, self.include_min = _bound(minimum)
        self.maximum, self.include_max = _bound(maximum)

    @property
    def range_text(self) -> str:
        """Return the interval in ``[a ; b[`` notation."""
        opening = "[" if self.include_min else "]"
        closing = "]" if self.include_max else "["
        return f"{opening}{self.minimum} ; {self.maximum}{closing}"

    @property
    def name(self) -> str:
        """Return ``range [a ; b]``."""
        return f"range {self.range_text}"

    def _match(self, actual: t.Any) -> MatchResult:  # noqa: ANN401 - any comparable
        try:
            above = actual > self.minimum or (
                self.include_min and actual == self.minimum
            )
            below = actual < self.maximum or (
                self.include_max and actual == self.maximum
            )
        except TypeError:
            above = below = False
        if above and below:
            return True
        return f"{fmt(actual)} is not in range {self.range_text}"

    def _params(self) -> tuple[object, ...]:
        return (self.minimum, self.include_min, self.maximum, self.include_max)


def between(minimum: object, maximum: object) -> Matcher:
    """Match candidates between *minimum* and *maximum*.

    Both bounds are inclusive unless wrapped in :class:`Exclusive` or given as
    ``{"value": v, "exclusive": True}``.

    Examples
    --------
    >>> between(0, Exclusive(10)).name
    'range [0 ; 10['
    """
    return Between(minimum, maximum)


# ===================================
# Structural matchers
# ===================================


def _stable_json(value: object) -> str:
    return json.dumps(value, sort_keys=True, default=repr)


class JsonEq(Matcher):
    """Match objects whose JSON serialization equals the expected one."""

    __slots__ = ("expected",)

    def __init__(self, expected: object) -> None:
        self.expected = expected

    @property
    def name(self) -> str:
        """Return ``json_eq(...)``."""
        return f"json_eq({fmt(self.expected)})"

    def _match(self, actual: object) -> MatchResult:
        serialized_expected = _stable_json(self.expected)
        serialized_actual = _stable_json(actual)
        if serialized_actual == serialized_expected:
            return True
        return f"expected {serialized_expected} but got {serialized_actual}"

    def _params(self) -> tuple[object, ...]:
        return (_stable_json(self.expected),)


def json_eq(expected: object) -> Matcher:
    """Match values that serialize to the same JSON as *expected*."""
    return JsonEq(expected)


class ArrayEq(Matcher):
    """Match sequences element by element."""

    __slots__ = ("expected",)

    def __init__(self, expected: t.Sequence[object]) -> None:
        self.expected = tuple(expected)

    @property
    def name(self) -> str:
        """Return ``array_eq([...])``."""
        return f"array_eq({fmt(list(self.expected))})"

    def _match(self, actual: object) -> MatchResult:
        if not isinstance(actual, list | tuple):
            return f"expected array type but got {fmt(actual)}"
        if len(self.expected) != len(actual):
            return (
                f"array length differ: expected {len(self.expected)} "
                f"but got {len(actual)}"
            )
        for index, (wanted, got) in enumerate(zip(self.expected, actual, strict=True)):
            result = match(wanted, got)
            if result is not True:
                return f"element [{index}] mismatches: {indent(result)}"
        return True

    def _params(self) -> tuple[object, ...]:
        return self.expected


def array_eq(expected: t.Sequence[object]) -> Matcher:
    """Match sequences of the same length whose elements match *expected*."""
    return ArrayEq(expected)


def _key_order(key: object) -> tuple[str, str]:
    return (type(key).__qualname__, repr(key))


def _key_set_difference(
    expected: list[object], actual: list[object]
) -> tuple[list[object], list[object]]:
    """Return ``(missing, unexpected)``; both inputs are sorted by ``_key_order``."""
    missing: list[object] = []
    unexpected: list[object] = []
    i = j = 0
    while i < len(expected) and j < len(actual):
        left, right = _key_order(expected[i]), _key_order(actual[j])
        if left < right:
            missing.append(expected[i])
            i += 1
        elif left > right:
            unexpected.append(actual[j])
            j += 1
        else:
            i += 1
            j += 1
    missing.extend(expected[i:])
    unexpected.extend(actual[j:])
    return missing, unexpected


class ObjectEq(Matcher):
    """Match mappings with exactly the expected keys, recursing into values."""

    __slots__ = ("_keys", "expected")

    def __init__(self, expected: t.Mapping[object, object]) -> None:
        self.expected = dict(expected)
        self._keys = sorted(self.expected, key=_key_order)

    @property
    def name(self) -> str:
        """Return ``object_eq(...)``."""
        return f"object_eq({fmt(self.expected)})"

    def _match(self, actual: object) -> MatchResult:
        if actual is None:
            return "expected non null variable but got None."
        if not isinstance(actual, abc.Mapping):
            return f"expected a mapping but was {type(actual).__name__}"
        missing, unexpected = _key_set_difference(
            self._keys, sorted(actual, key=_key_order)
        )
        if missing:
            listed = ", ".join(repr(key) for key in missing)
            return f"actual object is missing the following keys: {listed}"
        if unexpected:
            listed = ", ".join(repr(key) for key in unexpected)
            return f"actual object contains unexpected keys: {listed}"
        errors = []
        for key in self._keys:
            result = match(self.expected[key], actual[key])
            if result is not True:
                errors.append(f"- [{key!r}]: {indent(result)}")
        if errors:
            return "object mismatch:\n" + "\n".join(errors)
        return True

    def _params(self) -> tuple[object, ...]:
        return (self.expected,)


def object_eq(expected: t.Mapping[object, object]) -> Matcher:
    """Match mappings with the same key set whose values match *expected*."""
    return ObjectEq(expected)


class Contains(Matcher):
    """Match containers holding at least the expected part."""

    __slots__ = ("partial",)

    def __init__(self, partial: object) -> None:
        self.partial = partial

    @property
    def name(self) -> str:
        """Return ``contains(...)``."""
        return f"contains({fmt(self.partial)})"

    def _match(self, actual: object) -> MatchResult:
        partial = self.partial
        if isinstance(partial, abc.Mapping):
            return self._match_mapping(partial, actual)
        if isinstance(partial, str):
            if isinstance(actual, str) and partial in actual:
                return True
            return f"{fmt(actual)} does not contain {fmt(partial)}"
        if isinstance(partial, list | tuple):
            if not isinstance(actual, abc.Iterable) or isinstance(actual, str):
                return f"expected a collection but got {fmt(actual)}"
            items = list(actual)
            for wanted in partial:
                if not any(match(wanted, item) is True for item in items):
                    return f"no element matches {fmt(wanted)}"
            return True
        return f"{fmt(actual)} cannot contain {fmt(partial)}"

    @staticmethod
    def _match_mapping(
        partial: t.Mapping[object, object], actual: object
    ) -> MatchResult:
        if not isinstance(actual, abc.Mapping):
            return f"expected a mapping but got {fmt(actual)}"
        for key, wanted in partial.items():
            if key not in actual:
                return f"actual object is missing the key {key!r}"
            result = match(wanted, actual[key])
            if result is not True:
                return f"[{key!r}]: {indent(result)}"
        return True

    def _params(self) -> tuple[object, ...]:
        return (self.partial,)


def contains(partial: object) -> Matcher:
    """Match containers that include *partial*.

    A mapping matches mappings holding at least its keys, a string matches
    containing strings and a sequence matches collections with a matching
    element for each of its entries.
    """
    if not isinstance(partial, abc.Mapping | str | list | tuple):
        msg = f"contains() does not support {fmt(partial)}"
        raise TypeError(msg)
    return Contains(partial)


# ===================================
# Call arguments
# ===================================


class FunctionArguments(Matcher):
    """Match a positional argument list.

    Arguments the caller omitted are presented to the expected matchers as
    :data:`ABSENT`, so ``anything()`` and ``absent()`` accept missing trailing
    arguments. Surplus arguments never match.
    """

    __slots__ = ("expected",)

    def __init__(self, expected: t.Sequence[object]) -> None:
        self.expected = tuple(expected)

    @property
    def name(self) -> str:
        """Return ``arguments(...)``."""
        return "arguments(" + ", ".join(fmt(arg) for arg in self.expected) + ")"

    def _match(self, actual: object) -> MatchResult:
        if not isinstance(actual, list | tuple):
            return f"expected an argument list but got {fmt(actual)}"
        for index in range(max(len(self.expected), len(actual))):
            if index >= len(self.expected):
                return f"unexpected argument [{index}]: {fmt(actual[index])}"
            got = actual[index] if index < len(actual) else ABSENT
            result = match(self.expected[index], got)
            if result is not True:
                return f"argument [{index}] mismatches: {indent(result)}"
        return True

    def _params(self) -> tuple[object, ...]:
        return self.expected


def function_arguments(expected: t.Sequence[object]) -> Matcher:
    """Match positional argument lists against *expected*."""
    return FunctionArguments(expected)


class KeywordArguments(Matcher):
    """Match keyword arguments by exact key set, with omitted keys :data:`ABSENT`."""

    __slots__ = ("expected",)

    def __init__(self, expected: t.Mapping[str, object]) -> None:
        self.expected = dict(expected)

    @property
    def name(self) -> str:
        """Return ``keywords(...)``."""
        inner = ", ".join(f"{key}={fmt(value)}" for key, value in self.expected.items())
        return f"keywords({inner})"

    def _match(self, actual: object) -> MatchResult:
        if not isinstance(actual, abc.Mapping):
            return f"expected keyword arguments but got {fmt(actual)}"
        surplus = [key for key in actual if key not in self.expected]
        if surplus:
            return "unexpected keyword arguments: " + ", ".join(surplus)
        for key, wanted in self.expected.items():
            result = match(wanted, actual.get(key, ABSENT))
            if result is not True:
                return f"keyword argument {key!r} mismatches: {indent(result)}"
        return True

    def _params(self) -> tuple[object, ...]:
        return (self.expected,)


def keyword_arguments(expected: t.Mapping[str, object]) -> Matcher:
    """Match keyword argument mappings against *expected*."""
    return KeywordArguments(expected)


# ===================================
# Matching API
# ===================================


def _strictly_equal(actual: object, expected: object) -> bool:
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return bool(actual == expected)


def match(expected: object, actual: object) -> MatchResult:
    """Test whether *actual* matches *expected*.

    Returns ``True`` on a match, otherwise a string with the reason.
    """
    if isinstance(expected, Matcher):
        return expected.match(actual)
    if expected is None:
        if actual is None:
            return True
        return f"expected {fmt(actual)} to be None."
    if isinstance(expected, list | tuple):
        return ArrayEq(expected).match(actual)
    if isinstance(expected, dict):
        return ObjectEq(expected).match(actual)
    if isinstance(expected, _PRIMITIVES):
        if _strictly_equal(actual, expected):
            return True
        return f"expected {fmt(actual)} to equal {fmt(expected)}"
    return Same(expected).match(actual)


def equivalent(expected: object, actual: object) -> bool:
    """Return ``True`` when two declarations describe the same values.

    Matchers are compared with :meth:`Matcher.equals`, containers element by
    element and everything else with :func:`match`. ``anything()`` is not
    equivalent to ``5`` even though it matches it.
    """
    if isinstance(expected, Matcher) or isinstance(actual, Matcher):
        return isinstance(expected, Matcher) and expected.equals(actual)
    if isinstance(expected, list | tuple):
        return (
            isinstance(actual, list | tuple)
            and len(actual) == len(expected)
            and all(equivalent(a, b) for a, b in zip(expected, actual, strict=True))
        )
    if isinstance(expected, dict):
        return (
            isinstance(actual, dict)
            and expected.keys() == actual.keys()
            and all(equivalent(expected[key], actual[key]) for key in expected)
        )
    return match(expected, actual) is True


__all__ = [
    "ABSENT",
    "Exclusive",
    "MatchResult",
    "Matcher",
    "absent",
    "all_of",
    "any_array",
    "any_boolean",
    "any_bytes",
    "any_function",
    "any_mapping",
    "any_number",
    "any_object",
    "any_of",
    "any_string",
    "anything",
    "array_eq",
    "between",
    "contains",
    "equals",
    "equivalent",
    "function_arguments",
    "greater_than",
    "greater_than_or_equal",
    "instance_of",
    "json_eq",
    "keyword_arguments",
    "match",
    "matching",
    "not_",
    "object_eq",
    "same",
    "smaller_than",
    "smaller_than_or_equal",
    "weak_equals",
]
