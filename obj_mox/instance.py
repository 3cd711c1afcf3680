"""The object handed to code under test.

An :class:`InstanceProxy` answers attribute reads, subscripts and calls from
the behaviors declared on its :class:`~obj_mox.nodes.MockNode`. Anything the
behaviors do not account for falls back to the backing object when there is
one, and is reported as an :class:`~obj_mox.errors.UnexpectedAccessError`
otherwise.
"""

from __future__ import annotations

import logging
import typing as t
from collections import abc

from .behavior import CallArgs, HandlingSuccess, RuntimeContext
from .formatting import format_args, format_item_access, format_property_access
from .reporters import (
    NOT_BACKED,
    report_function_call_error,
    report_item_access_error,
    report_member_access_error,
    report_unexpected_delete,
    report_unexpected_write,
)

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .behavior import BehaviorMatchResult, BehaviorRegistry
    from .nodes import MockNode

logger = logging.getLogger(__name__)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


MISSING: t.Any = _Missing()
"""Marks the absence of a backing object."""

# Names probed by tooling (pytest, IPython, json encoders, os.fspath, ...).
# They never produce unexpected access reports, although a declared behavior
# still takes precedence. Every dunder name is treated the same way.
FILTERED_NAMES = frozenset(
    {
        "_repr_html_",
        "_repr_pretty_",
        "_ipython_display_",
        "_ipython_canary_method_should_not_exist_",
        "_pytestfixturefunction",
        "_fixture_function_marker",
        "pytestmark",
        "_mock_methods",
        "_mock_name",
    }
)


def is_filtered(name: str) -> bool:
    """Return ``True`` for names that must not trigger unexpected access reports."""
    return name in FILTERED_NAMES or (name.startswith("__") and name.endswith("__"))


# ----------------------------------------------------------------------
# Backing objects: mappings behave as attribute bags
# ----------------------------------------------------------------------
def backing_has(backing: object, name: str) -> bool:
    """Return ``True`` when *backing* provides attribute *name*."""
    if backing is MISSING:
        return False
    if isinstance(backing, abc.Mapping):
        return name in backing
    return hasattr(backing, name)


def backing_get(backing: object, name: str) -> t.Any:  # noqa: ANN401 - arbitrary member
    """Read attribute *name* from *backing*."""
    if isinstance(backing, abc.Mapping):
        return backing[name]
    return getattr(backing, name)


def backing_set(backing: object, name: str, value: object) -> None:
    """Write attribute *name* on *backing*."""
    if isinstance(backing, abc.MutableMapping):
        backing[name] = value
    else:
        setattr(backing, name, value)


def backing_del(backing: object, name: str) -> None:
    """Delete attribute *name* from *backing*; missing names are ignored."""
    if not backing_has(backing, name):
        return
    if isinstance(backing, abc.MutableMapping):
        del backing[name]
    else:
        delattr(backing, name)


def backing_members(backing: object) -> list[str]:
    """List the public-facing attributes of *backing*."""
    if isinstance(backing, abc.Mapping):
        return [str(key) for key in backing]
    return [name for name in dir(backing) if not name.startswith("__")]


# ----------------------------------------------------------------------
# Dispatch
# ----------------------------------------------------------------------
def _state(proxy: InstanceProxy) -> MockNode:
    return object.__getattribute__(proxy, "_obj_mox_node")


def _members_with_behavior(node: MockNode) -> list[str]:
    return [name for name, reg in node.expected_member_access.items() if reg.size]


def read_member(proxy: InstanceProxy, name: str) -> t.Any:  # noqa: ANN401 - user values
    """Answer ``proxy.name``.

    The backing object is only resolved when a handler asks for it or when no
    behavior matched, so declared chains never run the real code behind them.
    """
    node = _state(proxy)
    registry = node.expected_member_access.get(name)
    match: BehaviorMatchResult | None = None
    if registry is not None and registry.size:
        context = RuntimeContext(None, proxy, _resolver(node, _member_of(name)))
        match = registry.match(context)
        if match.matched is not None:
            outcome = match.matched.handle(context)
            if isinstance(outcome, HandlingSuccess):
                return outcome.result
            _report_member(node, name, match)
    backing = node.get_backing()
    if backing_has(backing, name):
        if not is_filtered(name):
            logger.debug("Falling through to backing for %s.%s", node.path, name)
        return backing_get(backing, name)
    if is_filtered(name):
        raise AttributeError(name)
    _report_member(node, name, match)


def _report_member(
    node: MockNode, name: str, match: BehaviorMatchResult | None
) -> t.NoReturn:
    backing = node.get_backing()
    report_member_access_error(
        node.path + format_property_access(name),
        _members_with_behavior(node),
        match,
        None if backing is MISSING else backing_members(backing),
    )


def _member_of(name: str) -> t.Callable[[object], t.Any]:
    def read(backing: object) -> t.Any:  # noqa: ANN401 - user values
        return backing_get(backing, name) if backing_has(backing, name) else MISSING

    return read


def _resolver(
    node: MockNode, answer: t.Callable[[object], t.Any]
) -> t.Callable[[], t.Any] | None:
    """Return a lazy ``get_original_target`` for handlers of *node*.

    The returned callable yields :data:`MISSING` when the backing object cannot
    answer. Virtual positions have no resolver at all.
    """
    if node.is_virtual:
        return None
    return lambda: answer(node.get_backing())


def _backing_note(backing: object, *, usable: bool, kind: str) -> str | None:
    if backing is MISSING:
        return NOT_BACKED
    if usable:
        return None
    return f"The backing object is not {kind}"


def _handle_or_none(
    registry: BehaviorRegistry, context: RuntimeContext
) -> tuple[bool, t.Any, BehaviorMatchResult]:
    match = registry.match(context)
    if match.matched is None:
        return False, None, match
    outcome = match.matched.handle(context)
    if isinstance(outcome, HandlingSuccess):
        return True, outcome.result, match
    return False, MISSING, match


def _is_subscriptable(backing: object) -> bool:
    return backing is not MISSING and hasattr(type(backing), "__getitem__")


def _item_of(key: object) -> t.Callable[[object], t.Any]:
    def read(backing: object) -> t.Any:  # noqa: ANN401 - user values
        if not _is_subscriptable(backing):
            return MISSING
        return backing[key]  # type: ignore[index]

    return read


def read_item(proxy: InstanceProxy, key: object) -> t.Any:  # noqa: ANN401 - user values
    """Answer ``proxy[key]``."""
    node = _state(proxy)
    context = RuntimeContext(CallArgs((key,)), proxy, _resolver(node, _item_of(key)))
    handled, result, match = _handle_or_none(node.expected_items, context)
    if handled:
        return result
    backing = node.get_backing()
    subscriptable = _is_subscriptable(backing)
    if match.matched is None and subscriptable:
        logger.debug("Falling through to backing for %s[%r]", node.path, key)
        return backing[key]  # type: ignore[index]
    report_item_access_error(
        node.path + format_item_access(key),
        match,
        backing_note=_backing_note(
            backing, usable=subscriptable, kind="subscriptable"
        ),
    )


def _call_of(
    args: tuple[object, ...], kwargs: dict[str, object]
) -> t.Callable[[object], t.Any]:
    def call(backing: object) -> t.Any:  # noqa: ANN401 - user values
        if backing is MISSING or not callable(backing):
            return MISSING
        return backing(*args, **kwargs)

    return call


def invoke(
    proxy: InstanceProxy, args: tuple[object, ...], kwargs: dict[str, object]
) -> t.Any:  # noqa: ANN401 - user values
    """Answer ``proxy(*args, **kwargs)``.

    Positions that only declare constructions (see ``new()``) answer from the
    constructor registry.
    """
    node = _state(proxy)
    constructing = node.expected_constructors.size > 0 and node.expected_calls.size == 0
    registry = node.expected_constructors if constructing else node.expected_calls
    context = RuntimeContext(
        CallArgs(args, kwargs), proxy, _resolver(node, _call_of(args, kwargs))
    )
    handled, result, match = _handle_or_none(registry, context)
    if handled:
        return result
    backing = node.get_backing()
    backing_callable = backing is not MISSING and callable(backing)
    if match.matched is None and backing_callable:
        logger.debug("Falling through to backing for call on %s", node.path)
        return backing(*args, **kwargs)  # type: ignore[operator]
    report_function_call_error(
        f"{registry.path}({format_args(args, kwargs)})",
        match,
        backing_note=_backing_note(
            backing, usable=backing_callable, kind="a function"
        ),
    )


def write_member(proxy: InstanceProxy, name: str, value: object) -> None:
    """Forward ``proxy.name = value`` to the backing object."""
    node = _state(proxy)
    backing = node.get_backing()
    if backing is MISSING:
        report_unexpected_write(node.path + format_property_access(name), value)
    backing_set(backing, name, value)


def delete_member(proxy: InstanceProxy, name: str) -> None:
    """Forward ``del proxy.name`` to the backing object."""
    node = _state(proxy)
    backing = node.get_backing()
    if backing is MISSING:
        report_unexpected_delete(node.path + format_property_access(name))
    backing_del(backing, name)


def write_item(proxy: InstanceProxy, key: object, value: object) -> None:
    """Forward ``proxy[key] = value`` to the backing object."""
    node = _state(proxy)
    backing = node.get_backing()
    if backing is MISSING:
        report_unexpected_write(node.path + format_item_access(key), value)
    backing[key] = value  # type: ignore[index]


def delete_item(proxy: InstanceProxy, key: object) -> None:
    """Forward ``del proxy[key]`` to the backing object."""
    node = _state(proxy)
    backing = node.get_backing()
    if backing is MISSING:
        report_unexpected_delete(node.path + format_item_access(key))
    del backing[key]  # type: ignore[attr-defined]


class InstanceProxy:
    """Stand-in object whose every interaction is answered by a mock node.

    The class defines no public methods so that no attribute of the mocked
    object is shadowed. ``isinstance`` checks see the mocked class through the
    ``__class__`` property.
    """

    __slots__ = ("_obj_mox_node",)

    def __init__(self, node: MockNode) -> None:
        object.__setattr__(self, "_obj_mox_node", node)

    def _obj_mox_class(self) -> type:
        original = _state(self).original_class
        return type(self) if original is None else original

    __class__ = property(_obj_mox_class)  # type: ignore[assignment]
    del _obj_mox_class

    def __getattr__(self, name: str) -> t.Any:  # noqa: ANN401 - user values
        """Answer an attribute read."""
        return read_member(self, name)

    def __setattr__(self, name: str, value: object) -> None:
        """Forward the write to the backing object."""
        write_member(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Forward the deletion to the backing object."""
        delete_member(self, name)

    def __getitem__(self, key: object) -> t.Any:  # noqa: ANN401 - user values
        """Answer a subscript."""
        return read_item(self, key)

    def __setitem__(self, key: object, value: object) -> None:
        """Forward the item write to the backing object."""
        write_item(self, key, value)

    def __delitem__(self, key: object) -> None:
        """Forward the item deletion to the backing object."""
        delete_item(self, key)

    def __call__(self, *args: object, **kwargs: object) -> t.Any:  # noqa: ANN401
        """Answer a call."""
        return invoke(self, args, kwargs)

    def __str__(self) -> str:
        """Use a declared ``__str__`` behavior, else the backing's ``str()``."""
        node = _state(self)
        registry = node.expected_member_access.get("__str__")
        if registry is not None and registry.size:
            return read_member(self, "__str__")()
        backing = node.get_backing()
        if backing is not MISSING:
            return str(backing)
        return repr(self)

    def __repr__(self) -> str:
        """Return ``instance(<path>)``."""
        return f"instance({_state(self).path})"

    def __describe__(self) -> str:
        """Render the instance in diagnostics."""
        return repr(self)

    def __dir__(self) -> list[str]:
        """List declared members and the backing's attributes."""
        node = _state(self)
        names = set(_members_with_behavior(node))
        backing = node.get_backing()
        if backing is not MISSING:
            names.update(backing_members(backing))
        return sorted(names)


__all__ = [
    "FILTERED_NAMES",
    "MISSING",
    "InstanceProxy",
    "backing_del",
    "backing_get",
    "backing_has",
    "backing_members",
    "backing_set",
    "is_filtered",
]
