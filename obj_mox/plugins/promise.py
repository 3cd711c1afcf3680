"""Awaitable answers: ``resolves`` and ``rejects``."""

from __future__ import annotations

import typing as t

from ..plugin_api import (
    ExpectationSetter,
    ExpectationSetterApi,
    Verb,
    register_expectations,
)


async def _resolved(value: object) -> object:
    return value


async def _rejected(error: BaseException | type[BaseException]) -> t.NoReturn:
    raise error


def promise_expectations(api: ExpectationSetterApi) -> dict[str, Verb]:
    """Verbs answering with a fresh coroutine on every invocation."""

    def resolves(value: object = None) -> ExpectationSetter:
        """Answer with a coroutine returning *value*."""
        api.answer(lambda runtime: _resolved(value))
        return api.chain()

    def rejects(error: BaseException | type[BaseException]) -> ExpectationSetter:
        """Answer with a coroutine raising *error*."""
        api.answer(lambda runtime: _rejected(error))
        return api.chain()

    return {
        "resolves": resolves,
        "resolve": resolves,
        "rejects": rejects,
        "reject": rejects,
    }


register_expectations(promise_expectations)

__all__ = ["promise_expectations"]
