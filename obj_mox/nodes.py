"""Recording side of a mock: the node tree behind ``m.a.b(1).c``.

Every attribute read, subscript, call or construction on a :class:`Recording`
yields the recording of a child :class:`MockNode`. Children are memoized in the
parent's :class:`~obj_mox.chaining.ChainingCache`, so the same expression
always reaches the same node.

Declaring a behavior on a node *materializes* it: the node registers a chain
behavior into the parent's registry for its symbol, which hands out the node's
:class:`~obj_mox.instance.InstanceProxy`, and then asks the parent to
materialize itself, all the way up to the root.
"""

from __future__ import annotations

import logging
import typing as t

from .behavior import Behavior, BehaviorRegistry, CallArgs, RuntimeContext
from .chaining import ChainingCache
from .errors import UsageError
from .formatting import (
    RecordingType,
    format_args,
    format_item_access,
    format_property_access,
)
from .instance import MISSING, InstanceProxy
from .reporters import unsatisfied_error

logger = logging.getLogger(__name__)

_UNRESOLVED: t.Any = object()


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__") and len(name) > 4


def _constructor_path(path: str) -> str:
    if path.endswith(")"):
        path = f"({path})"
    return f"new {path}"


class MockNode:
    """One position in a mock chain.

    Parameters
    ----------
    path:
        Human readable location, e.g. ``<cat>.get_tag(1).chip``.
    kind:
        How the position was reached from its parent.
    parent:
        The node this one was reached from; ``None`` for a root.
    locate:
        Returns the parent's registry this node's chain behavior lives in.
    args:
        Arguments (possibly matchers) the chain behavior is declared with.
    is_virtual:
        ``True`` when the whole tree has no backing object.
    original_class:
        Class instances report through ``isinstance``.
    backing:
        Backing object of a root node.
    """

    def __init__(
        self,
        path: str,
        *,
        kind: RecordingType = RecordingType.GETTER,
        parent: MockNode | None = None,
        locate: t.Callable[[], BehaviorRegistry] | None = None,
        args: CallArgs | None = None,
        is_virtual: bool = True,
        original_class: type | None = None,
        backing: object = MISSING,
    ) -> None:
        self.path = path
        self.kind = kind
        self.parent = parent
        self.args = args
        self.is_virtual = is_virtual
        self.original_class = original_class
        self._locate = locate
        self.expected_calls = BehaviorRegistry(path, RecordingType.CALL)
        self.expected_constructors = BehaviorRegistry(
            _constructor_path(path), RecordingType.CONSTRUCT
        )
        self.expected_items = BehaviorRegistry(path, RecordingType.ITEM)
        self.expected_member_access: dict[str, BehaviorRegistry] = {}
        self.cache: ChainingCache[tuple[object, ...], MockNode] = ChainingCache()
        self._chain_behavior: Behavior | None = None
        self._instance: InstanceProxy | None = None
        self._backing = backing
        self._backing_source: t.Callable[[], object] | None = None
        self.recording = Recording(self)

    # ------------------------------------------------------------------
    # Tree structure
    # ------------------------------------------------------------------
    @property
    def is_root(self) -> bool:
        """Return ``True`` for the node returned by ``mock()``."""
        return self.parent is None

    @property
    def root(self) -> MockNode:
        """Return the root of the tree this node belongs to."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def expectations(self) -> BehaviorRegistry | None:
        """Registry of the parent holding the behaviors declared on this node."""
        return None if self._locate is None else self._locate()

    def member_registry(self, name: str) -> BehaviorRegistry:
        """Return the registry for attribute *name*, creating it on first use."""
        registry = self.expected_member_access.get(name)
        if registry is None:
            registry = BehaviorRegistry(
                self.path + format_property_access(name), RecordingType.GETTER
            )
            self.expected_member_access[name] = registry
        return registry

    def _child(
        self,
        key: tuple[object, ...],
        path: str,
        kind: RecordingType,
        locate: t.Callable[[], BehaviorRegistry],
        args: CallArgs | None,
    ) -> MockNode:
        return self.cache.get_or_else(
            key,
            lambda: MockNode(
                path,
                kind=kind,
                parent=self,
                locate=locate,
                args=args,
                is_virtual=self.is_virtual,
            ),
        )

    def member(self, name: str) -> MockNode:
        """Return the child reached by reading attribute *name*."""
        return self._child(
            (RecordingType.GETTER.value, name),
            self.path + format_property_access(name),
            RecordingType.GETTER,
            lambda: self.member_registry(name),
            None,
        )

    def item(self, key: object) -> MockNode:
        """Return the child reached by subscripting with *key*."""
        return self._child(
            (RecordingType.ITEM.value, key),
            self.path + format_item_access(key),
            RecordingType.ITEM,
            lambda: self.expected_items,
            CallArgs((key,)),
        )

    def call(self, args: tuple[object, ...], kwargs: dict[str, object]) -> MockNode:
        """Return the child reached by calling with *args* and *kwargs*."""
        return self._child(
            (RecordingType.CALL.value, args, kwargs),
            f"{self.path}({format_args(args, kwargs)})",
            RecordingType.CALL,
            lambda: self.expected_calls,
            CallArgs(args, kwargs),
        )

    def construct(
        self, args: tuple[object, ...], kwargs: dict[str, object]
    ) -> MockNode:
        """Return the child reached by instantiating with *args* and *kwargs*."""
        return self._child(
            (RecordingType.CONSTRUCT.value, args, kwargs),
            f"{_constructor_path(self.path)}({format_args(args, kwargs)})",
            RecordingType.CONSTRUCT,
            lambda: self.expected_constructors,
            CallArgs(args, kwargs),
        )

    def children(self) -> list[MockNode]:
        """Return the cached children in creation order."""
        return self.cache.get_all()

    # ------------------------------------------------------------------
    # Materialization
    # ------------------------------------------------------------------
    def materialize(self) -> None:
        """Make this position reachable from the root instance.

        Idempotent: the chain behavior is registered only if it is not
        already present in the parent's registry.
        """
        expectations = self.expectations
        if expectations is None:
            return
        if self._chain_behavior is None or self._chain_behavior not in expectations:
            logger.debug("Materializing %s", self.path)
            self._chain_behavior = expectations.add_expectation(
                self.args, self._provide_instance
            )
        if self.parent is not None:
            self.parent.materialize()

    def _provide_instance(self, runtime: RuntimeContext) -> InstanceProxy:
        self._backing_source = runtime.get_original_target
        self._backing = _UNRESOLVED
        return self.get_instance()

    def get_instance(self) -> InstanceProxy:
        """Return the instance proxy of this node, creating it once."""
        if self._instance is None:
            self._instance = InstanceProxy(self)
        return self._instance

    def get_backing(self) -> object:
        """Return the backing object, or :data:`MISSING` for virtual positions."""
        if self._backing is _UNRESOLVED:
            source = self._backing_source
            self._backing = MISSING if source is None else source()
        return self._backing

    # ------------------------------------------------------------------
    # Registries
    # ------------------------------------------------------------------
    def registries(self) -> list[BehaviorRegistry]:
        """Return this node's own registries in reporting order."""
        return [
            self.expected_calls,
            self.expected_constructors,
            self.expected_items,
            *self.expected_member_access.values(),
        ]

    def walk(self) -> t.Iterator[MockNode]:
        """Yield this node and every cached descendant, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()

    def get_all_unsatisfied(self) -> list[Behavior]:
        """Return unsatisfied behaviors at or below this node."""
        return [
            behavior
            for node in self.walk()
            for registry in node.registries()
            for behavior in registry.get_all_unsatisfied()
        ]

    def verify(self) -> None:
        """Raise if any behavior at or below this node is unsatisfied."""
        unsatisfied = self.get_all_unsatisfied()
        if unsatisfied:
            raise unsatisfied_error(unsatisfied)

    def reset(self) -> None:
        """Forget the behaviors declared on this node and its own registries.

        Cached children are dropped but not reset themselves.
        """
        logger.debug("Resetting %s", self.path)
        expectations = self.expectations
        if expectations is not None:
            expectations.discard(self.args)
        for registry in self.registries():
            registry.reset()
        self.expected_member_access.clear()
        self.cache.clear()

    def debug(self) -> str:
        """Return one line per behavior at or below this node."""
        return "\n".join(
            str(behavior)
            for node in self.walk()
            for registry in node.registries()
            for behavior in registry
        )

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"MockNode({self.path!r})"


class Recording:
    """Expression builder returned by ``mock()``.

    Reading attributes, subscripting, calling it and passing it to ``new()``
    describe positions to declare behaviors on with ``when()``. It is not the
    object handed to code under test; that is ``instance(recording)``.
    """

    __slots__ = ("_obj_mox_node",)

    _obj_mox_node: MockNode

    def __init__(self, node: MockNode) -> None:
        object.__setattr__(self, "_obj_mox_node", node)

    def __getattr__(self, name: str) -> Recording:
        """Return the recording of attribute *name*."""
        if _is_dunder(name):
            raise AttributeError(name)
        return self._obj_mox_node.member(name).recording

    def __getitem__(self, key: object) -> Recording:
        """Return the recording of subscript *key*."""
        return self._obj_mox_node.item(key).recording

    def __call__(self, *args: object, **kwargs: object) -> Recording:
        """Return the recording of a call with these arguments."""
        return self._obj_mox_node.call(args, kwargs).recording

    def __iter__(self) -> t.NoReturn:
        """Refuse iteration, which would otherwise subscript forever."""
        msg = f"{self!r} is not iterable"
        raise TypeError(msg)

    def __setattr__(self, name: str, value: object) -> None:
        """Refuse assignment."""
        _refuse_write(self, format_property_access(name))

    def __delattr__(self, name: str) -> None:
        """Refuse deletion."""
        _refuse_write(self, format_property_access(name))

    def __setitem__(self, key: object, value: object) -> None:
        """Refuse item assignment."""
        _refuse_write(self, format_item_access(key))

    def __delitem__(self, key: object) -> None:
        """Refuse item deletion."""
        _refuse_write(self, format_item_access(key))

    def __repr__(self) -> str:
        """Return ``mock(<path>)``."""
        return f"mock({self._obj_mox_node.path})"

    def __describe__(self) -> str:
        """Render the recording in diagnostics."""
        return repr(self)


def _refuse_write(recording: Recording, access: str) -> t.NoReturn:
    path = recording._obj_mox_node.path  # noqa: SLF001 - module private
    msg = (
        f"Cannot modify {path}{access} on a mock recording. "
        "Did you forget to use instance()?"
    )
    raise UsageError(msg)


def node_of(value: object) -> MockNode | None:
    """Return the node behind *value* if it is a recording."""
    if isinstance(value, Recording):
        return value._obj_mox_node  # noqa: SLF001 - module private
    return None


__all__ = ["MISSING", "MockNode", "Recording", "node_of"]
