"""Built-in expectation verbs, registered on import."""

from __future__ import annotations

from . import base, promise, quantifiers

__all__ = ["base", "promise", "quantifiers"]
