"""Quantifier verbs constraining how often the last behavior may be used."""

from __future__ import annotations

from ..plugin_api import (
    ExpectationSetter,
    ExpectationSetterApi,
    Verb,
    register_expectations,
)
from ..ranges import (
    AT_LEAST_ONCE,
    AT_MOST_ONCE,
    NEVER,
    ONCE,
    ZERO_OR_MORE,
    Range,
)


def quantifiers(api: ExpectationSetterApi) -> dict[str, Verb]:
    """Verbs setting the call range of the most recent behavior."""

    def expect(expected: Range) -> ExpectationSetter:
        api.expectations.set_last_expectation_range(expected)
        return api.chain()

    def times(count: int) -> ExpectationSetter:
        """Expect exactly *count* invocations."""
        return expect(Range(count))

    def between_times(minimum: int, maximum: int) -> ExpectationSetter:
        """Expect between *minimum* and *maximum* invocations, inclusive."""
        return expect(Range(minimum, maximum))

    return {
        "times": times,
        "between_times": between_times,
        "once": lambda: expect(ONCE),
        "at_least_once": lambda: expect(AT_LEAST_ONCE),
        "at_most_once": lambda: expect(AT_MOST_ONCE),
        "any_times": lambda: expect(ZERO_OR_MORE),
        "never": lambda: expect(NEVER),
    }


register_expectations(quantifiers)

__all__ = ["quantifiers"]
