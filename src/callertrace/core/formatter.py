"""Verb-dispatch rendering of frames and stack traces.

A format spec is a run of flag characters followed by a single verb, the
same shape used by ``format()``, f-strings and ``str.format``:

    verb  flag  output                  example
    s           file name               a.go
    s     +     file path               example.com/sample/a/a.go
    d           line number             10
    n           function name           F.G.func1
    P           package name            a
    P     +     import path             example.com/sample/a
    v           file:line               a.go:10

Unknown verbs render as an empty string. An empty spec means ``v``.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.frame import Frame

FLAG_CHARS = frozenset("+-# 0")
DEFAULT_VERB = "v"
VERBS = ("s", "d", "n", "P", "v")


@dataclass(frozen=True)
class FormatSpec:
    """A parsed format spec."""

    verb: str
    flags: frozenset[str] = frozenset()

    @property
    def long(self) -> bool:
        """Whether the ``+`` flag asks for the long form."""
        return "+" in self.flags

    def __str__(self) -> str:
        return ("+" if self.long else "") + self.verb


def parse_format_spec(format_spec: str) -> FormatSpec:
    """Split a format spec into its flags and verb.

    Args:
        format_spec: Spec such as ``"s"``, ``"+P"`` or ``""``

    Returns:
        Parsed FormatSpec; the verb is empty when the spec holds only flags
    """
    if not format_spec:
        return FormatSpec(DEFAULT_VERB)

    idx = 0
    while idx < len(format_spec) and format_spec[idx] in FLAG_CHARS:
        idx += 1

    flags = frozenset(format_spec[:idx])
    return FormatSpec(verb=format_spec[idx:], flags=flags)


def _render_file(frame: Frame, long: bool) -> str:
    # host separators: "\\" counts too on Windows
    return frame.file if long else os.path.basename(frame.file)


def _render_line(frame: Frame, long: bool) -> str:
    return str(frame.line)


def _render_func_name(frame: Frame, long: bool) -> str:
    return frame.func_name


def _render_package(frame: Frame, long: bool) -> str:
    return frame.pkg_path if long else frame.pkg_name


def _render_location(frame: Frame, long: bool) -> str:
    return f"{_render_file(frame, long)}:{_render_line(frame, long)}"


# 'p' (pointer) and 'T' (type) are left free, hence the upper-case package verb
_RENDERERS: dict[str, Callable[[Frame, bool], str]] = {
    "s": _render_file,
    "d": _render_line,
    "n": _render_func_name,
    "P": _render_package,
    "v": _render_location,
}


def render_frame(frame: Frame, spec: FormatSpec) -> str:
    """Render one frame under an already parsed spec."""
    renderer = _RENDERERS.get(spec.verb)
    if renderer is None:
        return ""
    return renderer(frame, spec.long)


def format_frame(frame: Frame, format_spec: str = "") -> str:
    """Render one frame under a format spec string."""
    return render_frame(frame, parse_format_spec(format_spec))


def format_stack(frames: Iterable[Frame], format_spec: str = "") -> str:
    """Render frames as ``[f1 f2 ...]``, each under the same spec.

    An empty sequence renders as ``[]``.
    """
    spec = parse_format_spec(format_spec)
    return "[" + " ".join(render_frame(frame, spec) for frame in frames) + "]"
