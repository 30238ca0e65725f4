"""Data models for captured stacks."""

from .frame import Frame, RawFrame
from .stacktrace import StackTrace

__all__ = [
    "Frame",
    "RawFrame",
    "StackTrace",
]
