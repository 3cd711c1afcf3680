"""Human readable rendering of values, paths and signatures.

Every diagnostic produced by obj-mox goes through :func:`fmt`. Objects that
want control over how they appear in messages implement ``__describe__`` on
their class; recordings, instances and matchers all do.
"""

from __future__ import annotations

import enum
import types
import typing as t
from textwrap import indent as _indent

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .behavior import CallArgs

_MAX_TEXT = 80
_ELLIPSIS = "…"

_FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
)


class RecordingType(enum.StrEnum):
    """How a position in a chain was reached."""

    GETTER = "getter"
    ITEM = "item"
    CALL = "call"
    CONSTRUCT = "construct"


def _truncate(text: str) -> str:
    if len(text) <= _MAX_TEXT:
        return text
    quote = text[-1] if text[-1] in "'\"" else ""
    return text[: _MAX_TEXT - 1 - len(quote)] + _ELLIPSIS + quote


def fmt(value: object) -> str:
    """Return a short, human readable representation of *value*."""
    describe = getattr(type(value), "__describe__", None)
    if describe is not None:
        return describe(value)
    if isinstance(value, str | bytes):
        return _truncate(repr(value))
    if value is None or isinstance(value, bool | int | float | complex):
        return repr(value)
    if isinstance(value, list):
        return "[" + ", ".join(fmt(item) for item in value) + "]"
    if isinstance(value, tuple):
        inner = ", ".join(fmt(item) for item in value)
        return f"({inner},)" if len(value) == 1 else f"({inner})"
    if isinstance(value, dict):
        return "dict(" + ", ".join(str(key) for key in value) + ")"
    if isinstance(value, type):
        return f"class {value.__qualname__}"
    if isinstance(value, _FUNCTION_TYPES):
        name = getattr(value, "__qualname__", None) or getattr(value, "__name__", "?")
        return f"function {name}"
    if type(value).__repr__ is not object.__repr__:
        return _truncate(repr(value))
    return type(value).__qualname__


def format_args(args: t.Sequence[object], kwargs: t.Mapping[str, object]) -> str:
    """Render positional and keyword arguments as they would be written."""
    parts = [fmt(arg) for arg in args]
    parts.extend(f"{key}={fmt(value)}" for key, value in kwargs.items())
    return ", ".join(parts)


def format_property_access(name: object) -> str:
    """Render an attribute access, e.g. ``.name`` or ``['not an identifier']``."""
    if isinstance(name, str) and name.isidentifier():
        return f".{name}"
    return f"[{fmt(name)}]"


def format_item_access(key: object) -> str:
    """Render a subscript, e.g. ``[2]``."""
    return f"[{fmt(key)}]"


def format_signature(
    path: str, args: CallArgs | None, kind: RecordingType = RecordingType.CALL
) -> str:
    """Render *path* applied to *args* in the notation matching *kind*."""
    if args is None:
        return path
    if kind is RecordingType.ITEM:
        key = args.args[0] if args.args else None
        return path + format_item_access(key)
    return f"{path}({format_args(args.args, args.kwargs)})"


def indent(message: str, prefix: str = "    ") -> str:
    """Indent every line of *message* after the first one."""
    first, _, rest = message.partition("\n")
    if not rest:
        return first
    return first + "\n" + _indent(rest, prefix)


def numbered(entries: t.Sequence[str], *, start: int = 1) -> str:
    """Render *entries* as a numbered list, keeping continuation lines aligned."""
    if not entries:
        return "(none)"
    lines: list[str] = []
    for index, entry in enumerate(entries, start=start):
        entry_lines = entry.splitlines() or [""]
        lines.append(f"{index}. {entry_lines[0]}")
        lines.extend(f"   {extra}" for extra in entry_lines[1:])
    return "\n".join(lines)


__all__ = [
    "RecordingType",
    "fmt",
    "format_args",
    "format_item_access",
    "format_property_access",
    "format_signature",
    "indent",
    "numbered",
]
