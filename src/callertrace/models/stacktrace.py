"""Data model for a captured call stack."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from .frame import Frame


@dataclass(frozen=True)
class StackTrace(Sequence[Frame]):
    """An ordered, immutable stack of frames, innermost first."""

    frames: tuple[Frame, ...] = ()

    @overload
    def __getitem__(self, index: int) -> Frame: ...

    @overload
    def __getitem__(self, index: slice) -> "StackTrace": ...

    def __getitem__(self, index: int | slice) -> "Frame | StackTrace":
        if isinstance(index, slice):
            return StackTrace(self.frames[index])
        return self.frames[index]

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    @property
    def innermost_frame(self) -> Frame | None:
        """The frame closest to the capture point, if any."""
        return self.frames[0] if self.frames else None

    def __format__(self, format_spec: str) -> str:
        from ..core.formatter import format_stack

        return format_stack(self.frames, format_spec)

    def __str__(self) -> str:
        return format(self, "v")
