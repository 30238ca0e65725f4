"""Abstract interface for the host stack-walking facility."""

from collections.abc import Iterator, Sequence
from typing import Any, Protocol

from ..models.frame import RawFrame

# Opaque handle for one live stack level; only the walker that issued it
# knows how to resolve it.
FrameHandle = Any


class StackWalker(Protocol):
    """Abstract interface for walking and resolving the live call stack.

    This protocol defines the contract consumed by ``capture``. The CPython
    implementation lives in ``callertrace.adapters.walker.sys_frames``; tests
    substitute a fake producer.
    """

    def callers(self, skip: int, limit: int) -> Sequence[FrameHandle]:
        """
        Collect opaque handles for the live call stack.

        Args:
            skip: Number of frames to skip, with 0 identifying the frame
                of ``callers`` itself and 1 identifying its caller
            limit: Maximum number of handles to return

        Returns:
            Up to ``limit`` handles, innermost first. Empty when ``skip``
            exceeds the stack depth.
        """
        ...

    def frames(self, handles: Sequence[FrameHandle]) -> Iterator[RawFrame]:
        """
        Resolve handles into frame records, one at a time.

        Args:
            handles: Handles previously returned by ``callers``

        Yields:
            RawFrame: One record per handle, innermost first. Exhaustion
            means no more frames remain.
        """
        ...
