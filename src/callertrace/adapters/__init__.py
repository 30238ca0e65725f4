"""Concrete implementations of collaborator interfaces."""

from .walker.sys_frames import SysFrameWalker

__all__ = [
    "SysFrameWalker",
]
