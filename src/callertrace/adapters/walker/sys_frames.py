"""CPython stack walker built on interpreter frame objects.

This module implements the StackWalker protocol with ``sys._getframe`` and
the ``f_back`` chain. Each live frame is turned into a qualified symbol of
the form ``<module-path>/<module>.<qualname>``:

- ``pkg.sub.mod`` + ``Outer.<locals>.inner`` -> ``pkg/sub/mod.Outer.inner``
- ``mod`` + ``func`` -> ``mod.func``
- no module name + ``func`` -> ``func``
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from types import FrameType

from ...models.frame import RawFrame

LOCALS_MARKER = "<locals>."


def qualified_symbol(module: str, qualname: str) -> str:
    """Build a qualified symbol from a module name and a code qualname.

    Args:
        module: Dotted module name, e.g. ``pkg.sub.mod``
        qualname: Code qualname, e.g. ``Outer.<locals>.inner``

    Returns:
        Symbol such as ``pkg/sub/mod.Outer.inner``
    """
    local_path = qualname.replace(LOCALS_MARKER, "")
    parent, sep, leaf = module.rpartition(".")
    module_path = parent.replace(".", "/") + "/" + leaf if sep else module
    if not module_path:
        return local_path
    return f"{module_path}.{local_path}"


def raw_frame_from(frame: FrameType) -> RawFrame:
    """Resolve an interpreter frame into a frame record."""
    code = frame.f_code
    module = frame.f_globals.get("__name__") or ""
    return RawFrame(
        function=qualified_symbol(str(module), code.co_qualname),
        file=code.co_filename,
        line=frame.f_lineno or 0,
    )


class SysFrameWalker:
    """StackWalker over the live CPython frame chain.

    Handles are frame objects. They keep their locals alive, so callers
    should drop them as soon as ``frames`` has resolved them.

    Example:
        walker = SysFrameWalker()
        handles = walker.callers(1, 32)
        records = list(walker.frames(handles))
    """

    def callers(self, skip: int, limit: int) -> list[FrameType]:
        """Collect up to ``limit`` frames, skipping ``skip`` from this one."""
        try:
            frame: FrameType | None = sys._getframe(skip)
        except ValueError:
            # skip is deeper than the stack
            return []

        handles: list[FrameType] = []
        try:
            while frame is not None and len(handles) < limit:
                handles.append(frame)
                frame = frame.f_back
            return handles
        finally:
            del frame

    def frames(self, handles: Sequence[FrameType]) -> Iterator[RawFrame]:
        """Resolve frames lazily, innermost first."""
        for handle in handles:
            yield raw_frame_from(handle)
