"""Plugin authoring API for expectation verbs.

Every verb available on ``when(...)`` comes from a factory registered with
:func:`register_expectations`. A factory receives an
:class:`ExpectationSetterApi` bound to one recording and returns a mapping of
verb names to callables::

    from obj_mox import plugin

    def logging_verbs(api):
        def returns_logged(value):
            def handler(runtime):
                print("answering", runtime.args)
                return value

            api.answer(handler)
            return api.chain()

        return {"returns_logged": returns_logged}

    plugin.register_expectations(logging_verbs)

Later factories override verbs of the same name.
"""

from __future__ import annotations

import logging
import typing as t

from .errors import UsageError

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .behavior import BehaviorRegistry, Handler
    from .nodes import MockNode

logger = logging.getLogger(__name__)

Verb = t.Callable[..., t.Any]
ExpectationSetterFactory = t.Callable[["ExpectationSetterApi"], t.Mapping[str, Verb]]

_factories: list[ExpectationSetterFactory] = []


class ExpectationSetterApi:
    """What a plugin factory can do with the recording passed to ``when()``."""

    def __init__(
        self, node: MockNode, chain: t.Callable[[], ExpectationSetter]
    ) -> None:
        self._node = node
        self.chain = chain

    @property
    def path(self) -> str:
        """Return the path of the recording, e.g. ``<cat>.purr()``."""
        return self._node.path

    @property
    def expectations(self) -> BehaviorRegistry:
        """Registry receiving the behaviors declared through this setter."""
        registry = self._node.expectations
        if registry is None:
            msg = (
                f"Cannot declare behaviors on the root of a mock ({self._node.path}). "
                "Use an attribute, a call or an item of it instead."
            )
            raise UsageError(msg)
        return registry

    def answer(self, handler: Handler) -> None:
        """Declare *handler* as the answer to the recorded invocation."""
        registry = self.expectations
        parent = self._node.parent
        if parent is not None:
            parent.materialize()
        registry.add_expectation(self._node.args, handler)
        logger.debug("Declared behavior for %s", self._node.path)


class ExpectationSetter:
    """Chainable object exposing the registered verbs as attributes."""

    __slots__ = ("_path", "_verbs")

    def __init__(self, path: str, verbs: dict[str, Verb]) -> None:
        self._path = path
        self._verbs = verbs

    def __getattr__(self, name: str) -> Verb:
        """Return verb *name*."""
        try:
            return self._verbs[name]
        except KeyError:
            msg = (
                f"No expectation verb named {name!r} is registered "
                f"(on when({self._path}))."
            )
            raise AttributeError(msg) from None

    def __dir__(self) -> list[str]:
        """List the available verbs."""
        return sorted(self._verbs)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"when({self._path})"


def register_expectations(factory: ExpectationSetterFactory) -> None:
    """Register a factory contributing expectation verbs."""
    _factories.append(factory)


def create_expectation_setter(node: MockNode) -> ExpectationSetter:
    """Build the setter returned by ``when()`` for *node*."""
    verbs: dict[str, Verb] = {}
    setter = ExpectationSetter(node.path, verbs)
    api = ExpectationSetterApi(node, lambda: setter)
    for factory in _factories:
        verbs.update(factory(api))
    return setter


def mock_object_not_supported(plugin_name: str) -> t.NoReturn:
    """Fail because a plugin was handed something it cannot work with."""
    msg = (
        "Failed to load expectation setters on this mock object. Possible causes are:\n"
        "- The object you are trying to mock was not obtained from the 'mock()' "
        "function.\n"
        f"- The plugin '{plugin_name}' is not compatible with this version of obj-mox."
    )
    raise UsageError(msg)


__all__ = [
    "ExpectationSetter",
    "ExpectationSetterApi",
    "ExpectationSetterFactory",
    "Verb",
    "create_expectation_setter",
    "mock_object_not_supported",
    "register_expectations",
]
