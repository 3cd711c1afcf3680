"""ObjMox controller owning the mocks of one test."""

from __future__ import annotations

import logging
import types  # noqa: TC003
import typing as t

from .errors import UnfulfilledExpectationError
from .nodes import node_of
from .reporters import unsatisfied_error
from .static_api import debug, instance, mock, reset

if t.TYPE_CHECKING:
    from .behavior import Behavior
    from .nodes import Recording

logger = logging.getLogger(__name__)


class ObjMox:
    """Track mocks created for a test and verify them together.

    Examples
    --------
    >>> from obj_mox import when
    >>> with ObjMox() as mox:
    ...     cat = mox.mock("cat")
    ...     _ = when(cat.purr()).returns("rrr").once()
    ...     instance(cat).purr()
    'rrr'
    """

    def __init__(self, *, verify_on_exit: bool = True) -> None:
        """Create a new controller.

        Parameters
        ----------
        verify_on_exit:
            When ``True`` (the default), leaving the ``with`` block without an
            exception calls :meth:`verify`.
        """
        self._verify_on_exit = verify_on_exit
        self._mocks: list[Recording] = []

    # ------------------------------------------------------------------
    # Mock accessors
    # ------------------------------------------------------------------
    @property
    def mocks(self) -> list[Recording]:
        """Return the root recordings created through this controller."""
        return list(self._mocks)

    @property
    def verify_on_exit(self) -> bool:
        """Return whether leaving the context verifies the mocks."""
        return self._verify_on_exit

    # ------------------------------------------------------------------
    # Context manager protocol
    # ------------------------------------------------------------------
    def __enter__(self) -> ObjMox:
        """Enter context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Exit context, verifying the mocks unless the block raised."""
        if self._verify_on_exit and exc_type is None:
            self.verify()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def mock(self, target: object = None, backing: object = None) -> Recording:
        """Create a mock with :func:`obj_mox.mock` and track it."""
        recording = mock(target, backing)
        self._mocks.append(recording)
        return recording

    def mock_instance(
        self, target: object = None, backing: object = None
    ) -> t.Any:  # noqa: ANN401 - stands in for the mocked type
        """Create a tracked mock and return its instance."""
        return instance(self.mock(target, backing))

    def unsatisfied(self) -> list[Behavior]:
        """Return the unsatisfied behaviors of every tracked mock."""
        behaviors: list[Behavior] = []
        for recording in self._mocks:
            node = node_of(recording)
            if node is not None:
                behaviors.extend(node.get_all_unsatisfied())
        return behaviors

    def verify(self) -> None:
        """Raise one aggregated error for every unsatisfied behavior."""
        unsatisfied = self.unsatisfied()
        if unsatisfied:
            error: UnfulfilledExpectationError = unsatisfied_error(unsatisfied)
            logger.debug("Verification failed for %d behaviors", len(unsatisfied))
            raise error

    def reset(self) -> None:
        """Reset every tracked mock."""
        for recording in self._mocks:
            reset(recording)

    def debug(self) -> str:
        """Return the debug dump of every tracked mock."""
        return "\n".join(
            dump for dump in (debug(recording) for recording in self._mocks) if dump
        )


__all__ = ["ObjMox"]
