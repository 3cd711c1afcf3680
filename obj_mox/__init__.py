"""Test doubles for Python objects with automatic chaining.

Declare behaviors on recordings returned by :func:`mock`, hand
:func:`instance` to the code under test and check the quantifiers with
:func:`verify`::

    cat = mock(Cat)
    when(cat.get_tag(1).chip.id).use_value(42)
    when(cat.purr()).returns("rrr").once()

    assert instance(cat).get_tag(1).chip.id == 42
    verify(cat)

The ``obj_mox`` pytest fixture lives in :mod:`obj_mox.pytest_plugin`, which
is not registered through an entry point. Load it from a ``conftest.py``::

    pytest_plugins = ("obj_mox.pytest_plugin",)
"""

from __future__ import annotations

from . import plugin_api as plugin
from .behavior import (
    Behavior,
    BehaviorMatchResult,
    BehaviorRegistry,
    CallArgs,
    ObservedCall,
    RuntimeContext,
)
from .controller import ObjMox
from .errors import (
    ObjMoxError,
    UnexpectedAccessError,
    UnfulfilledExpectationError,
    UsageError,
    VerificationError,
)
from .instance import InstanceProxy
from .matchers import (
    ABSENT,
    Exclusive,
    Matcher,
    absent,
    all_of,
    any_array,
    any_boolean,
    any_bytes,
    any_function,
    any_mapping,
    any_number,
    any_object,
    any_of,
    any_string,
    anything,
    array_eq,
    between,
    contains,
    equals,
    greater_than,
    greater_than_or_equal,
    instance_of,
    json_eq,
    match,
    matching,
    not_,
    object_eq,
    same,
    smaller_than,
    smaller_than_or_equal,
    weak_equals,
)
from .nodes import Recording
from .plugin_api import (
    ExpectationSetter,
    ExpectationSetterApi,
    mock_object_not_supported,
    register_expectations,
)
from .pytest_plugin import obj_mox as obj_mox_fixture
from .ranges import (
    AT_LEAST_ONCE,
    AT_MOST_ONCE,
    MAX,
    NEVER,
    ONCE,
    ZERO_OR_MORE,
    Range,
)
from .reporters import set_custom_fail
from .static_api import (
    debug,
    instance,
    member,
    mock,
    mock_instance,
    new,
    reset,
    verify,
    when,
)

__all__ = [
    "ABSENT",
    "AT_LEAST_ONCE",
    "AT_MOST_ONCE",
    "MAX",
    "NEVER",
    "ONCE",
    "ZERO_OR_MORE",
    "Behavior",
    "BehaviorMatchResult",
    "BehaviorRegistry",
    "CallArgs",
    "Exclusive",
    "ExpectationSetter",
    "ExpectationSetterApi",
    "InstanceProxy",
    "Matcher",
    "ObjMox",
    "ObjMoxError",
    "ObservedCall",
    "Range",
    "Recording",
    "RuntimeContext",
    "UnexpectedAccessError",
    "UnfulfilledExpectationError",
    "UsageError",
    "VerificationError",
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
    "debug",
    "equals",
    "greater_than",
    "greater_than_or_equal",
    "instance",
    "instance_of",
    "json_eq",
    "match",
    "matching",
    "member",
    "mock",
    "mock_instance",
    "mock_object_not_supported",
    "new",
    "not_",
    "obj_mox_fixture",
    "object_eq",
    "plugin",
    "register_expectations",
    "reset",
    "same",
    "set_custom_fail",
    "smaller_than",
    "smaller_than_or_equal",
    "verify",
    "weak_equals",
    "when",
]
