"""Core answering verbs: ``returns``, ``raises``, ``calls`` and friends."""

from __future__ import annotations

import typing as t

from ..errors import UsageError
from ..instance import MISSING
from ..plugin_api import (
    ExpectationSetter,
    ExpectationSetterApi,
    Verb,
    register_expectations,
)

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from ..behavior import RuntimeContext


def _original(runtime: RuntimeContext, verb: str, what: str) -> t.Any:  # noqa: ANN401
    target = runtime.get_original_target
    original = MISSING if target is None else target()
    if original is MISSING:
        msg = f"Attempted to `{verb}` using a backing object with no such {what}."
        raise UsageError(msg)
    return original


def base_expectations(api: ExpectationSetterApi) -> dict[str, Verb]:
    """Verbs deciding what an invocation answers."""

    def returns(value: object) -> ExpectationSetter:
        """Answer with *value*."""
        api.answer(lambda runtime: value)
        return api.chain()

    def use_value(value: object) -> ExpectationSetter:
        """Answer an attribute read with *value*."""
        api.answer(lambda runtime: value)
        return api.chain()

    def raises(error: BaseException | type[BaseException]) -> ExpectationSetter:
        """Raise *error* when invoked."""

        def handler(runtime: RuntimeContext) -> t.NoReturn:
            raise error

        api.answer(handler)
        return api.chain()

    def calls(fn: t.Callable[..., object]) -> ExpectationSetter:
        """Answer with ``fn(*args, **kwargs)`` of the actual invocation."""

        def handler(runtime: RuntimeContext) -> object:
            if runtime.args is None:
                return fn()
            return fn(*runtime.args.args, **runtime.args.kwargs)

        api.answer(handler)
        return api.chain()

    def use_getter(fn: t.Callable[[], object]) -> ExpectationSetter:
        """Answer an attribute read with the result of ``fn()``."""
        api.answer(lambda runtime: fn())
        return api.chain()

    def call_through() -> ExpectationSetter:
        """Forward the call to the backing object."""
        api.answer(lambda runtime: _original(runtime, "call_through", "method"))
        return api.chain()

    def use_actual() -> ExpectationSetter:
        """Answer with the backing object's member."""
        api.answer(lambda runtime: _original(runtime, "use_actual", "member"))
        return api.chain()

    return {
        "returns": returns,
        "use_value": use_value,
        "raises": raises,
        "throw": raises,
        "calls": calls,
        "call": calls,
        "use_getter": use_getter,
        "call_through": call_through,
        "use_actual": use_actual,
    }


register_expectations(base_expectations)

__all__ = ["base_expectations"]
