"""Core capture and formatting components.

This module exports:
- capture: Records the current call stack as a StackTrace
- format_frame / format_stack: Verb-dispatch rendering
- parse_format_spec: Splits a format spec into flags and verb
"""

from callertrace.core.capture import MAX_DEPTH, capture
from callertrace.core.formatter import (
    FormatSpec,
    format_frame,
    format_stack,
    parse_format_spec,
    render_frame,
)

__all__ = [
    "MAX_DEPTH",
    "FormatSpec",
    "capture",
    "format_frame",
    "format_stack",
    "parse_format_spec",
    "render_frame",
]
