"""Exception hierarchy shared by the mocking engine and its façades."""

from __future__ import annotations


class ObjMoxError(Exception):
    """Base class for all errors raised by obj-mox."""


class UsageError(ObjMoxError):
    """Raised when the mocking API is used incorrectly at declaration time.

    Examples are applying a quantifier before any behaviour exists, asking for
    ``instance()`` below the root of a mock, or assigning to a recording.
    """


class UnexpectedAccessError(ObjMoxError):
    """Raised when an instance is used in a way no behaviour accounts for."""


class VerificationError(ObjMoxError):
    """Base class for errors surfaced by :func:`obj_mox.verify`."""


class UnfulfilledExpectationError(VerificationError):
    """Raised when declared quantifiers are not satisfied."""


__all__ = [
    "ObjMoxError",
    "UnexpectedAccessError",
    "UnfulfilledExpectationError",
    "UsageError",
    "VerificationError",
]
