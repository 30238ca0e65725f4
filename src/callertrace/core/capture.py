"""Call stack capture.

``capture`` asks the stack walker for the live frames above its caller and
freezes them into a StackTrace. It never fails: a too-deep skip yields an
empty trace and a stack deeper than the buffer is truncated.

Nothing here logs, since the structlog stack processor calls ``capture``
while an event is being processed.
"""

from __future__ import annotations

from ..adapters.walker.sys_frames import SysFrameWalker
from ..interfaces.walker import StackWalker
from ..models.frame import Frame
from ..models.stacktrace import StackTrace

# Frames recorded per capture
MAX_DEPTH = 32

# The walker's own entry frame plus the frame of capture itself
_CAPTURE_FRAMES = 2

_default_walker = SysFrameWalker()


def capture(
    skip: int = 0,
    walker: StackWalker | None = None,
    max_depth: int = MAX_DEPTH,
) -> StackTrace:
    """Capture the current call stack.

    Args:
        skip: Number of frames to skip before recording, with 0 identifying
            the caller of ``capture`` and 1 identifying that caller's caller.
            Negative values count as 0.
        walker: Stack walker to use (defaults to the CPython frame walker)
        max_depth: Capacity of the scratch buffer; deeper stacks are truncated

    Returns:
        StackTrace of the recorded frames, innermost first

    Example:
        def helper():
            return capture(1)  # starts at the caller of helper
    """
    if walker is None:
        walker = _default_walker

    handles = walker.callers(_CAPTURE_FRAMES + max(skip, 0), max_depth)
    try:
        frames = tuple(Frame(raw_frame=raw) for raw in walker.frames(handles))
    finally:
        # Handles may be live frames and must not outlive the capture
        del handles

    return StackTrace(frames)
