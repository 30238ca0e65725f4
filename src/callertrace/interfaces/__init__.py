"""Protocol definitions for pluggable collaborators."""

from .walker import FrameHandle, StackWalker

__all__ = ["FrameHandle", "StackWalker"]
