"""Top-level functions: ``mock``, ``instance``, ``when`` and friends."""

from __future__ import annotations

import functools
import inspect
import logging
import types
import typing as t
from collections import abc

from . import plugins  # noqa: F401 - registers the built-in verbs
from .errors import UsageError
from .instance import MISSING
from .nodes import MockNode, Recording, node_of
from .plugin_api import ExpectationSetter, create_expectation_setter

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .instance import InstanceProxy

logger = logging.getLogger(__name__)


def _is_function(target: object) -> bool:
    return inspect.isroutine(target) or isinstance(target, functools.partial)


def _function_name(target: object) -> str:
    name = getattr(target, "__name__", None)
    if name is None and isinstance(target, functools.partial):
        name = getattr(target.func, "__name__", None)
    if name is None or name == "<lambda>":
        return "anonymous function"
    return name


def _class_of(backing: object) -> type | None:
    """Return the class a backed instance should report, if any."""
    if (
        backing is None
        or isinstance(backing, abc.Mapping | types.SimpleNamespace | type)
        or _is_function(backing)
    ):
        return None
    return type(backing)


def _classify(
    target: object, backing: object
) -> tuple[str, object, type | None]:
    """Return ``(name, backing, original_class)`` for the arguments of ``mock()``."""
    if target is None or isinstance(target, str):
        name = target or "mock"
        if backing is None:
            return name, MISSING, None
        return name, backing, _class_of(backing)
    if isinstance(target, type):
        return target.__name__, MISSING if backing is None else backing, target
    if backing is not None:
        msg = "A backing object can only be given along with a name or a class."
        raise UsageError(msg)
    if _is_function(target):
        return _function_name(target), target, None
    return type(target).__name__, target, _class_of(target)


def mock(target: object = None, backing: object = None) -> Recording:
    """Create a mock and return its root recording.

    Parameters
    ----------
    target:
        ``None`` or a name for a virtual mock, a class for a virtual mock that
        passes ``isinstance`` checks, a function to back the mock with, or any
        other object to back the mock with.
    backing:
        Full or partial backing object (a mapping acts as an attribute bag)
        for a named or class mock.

    Examples
    --------
    >>> cat = mock("cat")
    >>> _ = when(cat.purr()).returns("rrr")
    >>> instance(cat).purr()
    'rrr'
    """
    name, backing_object, original_class = _classify(target, backing)
    node = MockNode(
        f"<{name}>",
        is_virtual=backing_object is MISSING,
        original_class=original_class,
        backing=backing_object,
    )
    logger.debug(
        "Created %s mock %s", "virtual" if node.is_virtual else "backed", node.path
    )
    return node.recording


def _node(recording: object, operation: str) -> MockNode:
    node = node_of(recording)
    if node is None:
        msg = (
            f"`{operation}` needs to be invoked on a mock. "
            "Did you forget to `mock()` your object?"
        )
        raise UsageError(msg)
    return node


def instance(recording: Recording) -> t.Any:  # noqa: ANN401 - mocked type
    """Return the object to hand to code under test."""
    node = _node(recording, "instance")
    if not node.is_root:
        msg = (
            "instance() can only be used on the root of a mock, "
            f"that is on the value returned by mock(). It was called on {node.path}."
        )
        raise UsageError(msg)
    return node.get_instance()


def mock_instance(target: object = None, backing: object = None) -> InstanceProxy:
    """Shorthand for ``instance(mock(target, backing))``."""
    return instance(mock(target, backing))


def when(recording: object) -> ExpectationSetter:
    """Return the expectation setter for the position *recording* describes.

    Examples
    --------
    >>> m = mock("m")
    >>> _ = when(m.get_tag(1).chip.id).use_value(42)
    >>> instance(m).get_tag(1).chip.id
    42
    """
    node = _node(recording, "when")
    if node.is_root:
        msg = (
            f"`when` cannot declare behaviors on the root of a mock ({node.path}). "
            "Declare them on an attribute, an item or a call of it."
        )
        raise UsageError(msg)
    return create_expectation_setter(node)


def verify(recording: Recording) -> None:
    """Raise if a behavior at or below *recording* is unsatisfied."""
    _node(recording, "verify").verify()


def reset(recording: Recording) -> None:
    """Drop the behaviors declared on *recording*, without recursing."""
    _node(recording, "reset").reset()


def debug(recording: Recording) -> str:
    """Return one line per behavior at or below *recording*."""
    return _node(recording, "debug").debug()


def new(recording: Recording, *args: object, **kwargs: object) -> Recording:
    """Return the recording of instantiating *recording* with these arguments."""
    return _node(recording, "new").construct(args, kwargs).recording


def member(recording: Recording, name: str) -> Recording:
    """Return the recording of attribute *name*, including dunder names."""
    return _node(recording, "member").member(name).recording


__all__ = [
    "debug",
    "instance",
    "member",
    "mock",
    "mock_instance",
    "new",
    "reset",
    "verify",
    "when",
]
