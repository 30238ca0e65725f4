"""Tests for the CPython frame walker."""

import sys

import pytest

from callertrace.adapters.walker.sys_frames import (
    SysFrameWalker,
    qualified_symbol,
    raw_frame_from,
)
from callertrace.interfaces.walker import StackWalker
from callertrace.models.frame import Frame, RawFrame


class TestQualifiedSymbol:
    """Test symbol construction from module names and qualnames."""

    @pytest.mark.parametrize(
        ("module", "qualname", "want"),
        [
            ("pkg.sub.mod", "Outer.<locals>.inner", "pkg/sub/mod.Outer.inner"),
            ("pkg.mod", "Class.method", "pkg/mod.Class.method"),
            ("mod", "func", "mod.func"),
            ("__main__", "<module>", "__main__.<module>"),
            ("", "func", "func"),
            ("a.b", "f.<locals>.<lambda>", "a/b.f.<lambda>"),
        ],
    )
    def test_qualified_symbol(self, module: str, qualname: str, want: str) -> None:
        """Test module dots become slashes except before the module's own name."""
        assert qualified_symbol(module, qualname) == want

    def test_parses_back_into_parts(self) -> None:
        """Test a built symbol splits back into package and function."""
        frame = Frame(RawFrame(qualified_symbol("pkg.sub.mod", "Outer.<locals>.inner"), ""))

        assert frame.pkg_path == "pkg/sub/mod"
        assert frame.pkg_name == "mod"
        assert frame.func_name == "Outer.inner"


class TestSysFrameWalker:
    """Test SysFrameWalker against the live stack."""

    def test_satisfies_protocol(self) -> None:
        """Test the walker can stand in for the StackWalker protocol."""
        walker: StackWalker = SysFrameWalker()
        assert walker is not None

    def test_skip_zero_is_callers_itself(self) -> None:
        """Test skip 0 identifies the callers frame."""
        handles = SysFrameWalker().callers(0, 8)

        assert handles[0].f_code.co_name == "callers"
        assert handles[1].f_code.co_name == "test_skip_zero_is_callers_itself"

    def test_skip_one_is_caller(self) -> None:
        """Test skip 1 identifies the caller of callers."""
        handles = SysFrameWalker().callers(1, 8)

        assert handles[0] is sys._getframe()

    def test_limit_bounds_handles(self) -> None:
        """Test no more than limit handles are returned."""
        assert len(SysFrameWalker().callers(1, 2)) == 2

    def test_skip_past_stack_returns_empty(self) -> None:
        """Test a skip deeper than the stack yields no handles."""
        assert SysFrameWalker().callers(100_000, 8) == []

    def test_frames_resolves_in_order(self) -> None:
        """Test records come back one per handle, innermost first."""
        walker = SysFrameWalker()
        handles = walker.callers(1, 3)

        records = list(walker.frames(handles))

        assert len(records) == len(handles)
        assert records[0].function.endswith(".TestSysFrameWalker.test_frames_resolves_in_order")
        assert records[0].file == __file__ or records[0].file.endswith("test_sys_frames.py")
        # the innermost frame has moved on since; its callers have not
        assert [r.line for r in records[1:]] == [h.f_lineno for h in handles[1:]]

    def test_frames_is_lazy(self) -> None:
        """Test frames returns an iterator rather than a list."""
        walker = SysFrameWalker()
        records = walker.frames(walker.callers(1, 1))

        assert next(records).function.endswith("test_frames_is_lazy")
        with pytest.raises(StopIteration):
            next(records)


class TestRawFrameFrom:
    """Test resolving interpreter frames into records."""

    def test_current_frame(self) -> None:
        """Test the current frame resolves to this test."""
        frame = sys._getframe()
        # same line, so the live frame has not moved on yet
        raw, want_line = raw_frame_from(frame), frame.f_lineno

        assert raw.function == f"{__name__.replace('.', '/')}.TestRawFrameFrom.test_current_frame"
        assert raw.line == want_line
        assert raw.file == frame.f_code.co_filename
