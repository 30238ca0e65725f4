"""Call stack capture and format-spec rendering.

Example:
    from callertrace import capture

    stack = capture()
    print(f"{stack:n}")   # [handler main <module>]
    print(f"{stack[0]:+v}")  # /app/service/handler.py:42
"""

from callertrace._version import __version__
from callertrace.adapters.walker.sys_frames import SysFrameWalker
from callertrace.core.capture import MAX_DEPTH, capture
from callertrace.core.formatter import (
    FormatSpec,
    format_frame,
    format_stack,
    parse_format_spec,
)
from callertrace.interfaces.walker import StackWalker
from callertrace.models.frame import Frame, RawFrame
from callertrace.models.stacktrace import StackTrace

__all__ = [
    "MAX_DEPTH",
    "FormatSpec",
    "Frame",
    "RawFrame",
    "StackTrace",
    "StackWalker",
    "SysFrameWalker",
    "__version__",
    "capture",
    "format_frame",
    "format_stack",
    "parse_format_spec",
]
