"""Data models for a single captured stack frame."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawFrame:
    """A frame record as reported by the stack walker.

    The function is a qualified symbol of the form
    ``<module-path>/<pkg>.<Local>.<Nested>``, e.g.
    ``example.com/sample/a.F.G.func1``.
    """

    function: str
    file: str
    line: int = 0


@dataclass(frozen=True)
class Frame:
    """One level of a captured call stack."""

    raw_frame: RawFrame

    @property
    def file(self) -> str:
        """The source file path."""
        return self.raw_frame.file

    @property
    def line(self) -> int:
        """The line number (0 when unknown)."""
        return self.raw_frame.line

    @property
    def func_name(self) -> str:
        """
        Function name without the package path.

        e.g., example.com/sample/a.F.G.func1 -> F.G.func1
        """
        qualified = self.raw_frame.function
        idx = qualified.rfind("/")
        if idx >= 0:
            qualified = qualified[idx:]

        _, sep, func_name = qualified.partition(".")
        if not sep:
            return qualified
        return func_name

    @property
    def pkg_path(self) -> str:
        """
        Import path of the package owning the function.

        e.g., example.com/sample/a.F.G.func1 -> example.com/sample/a
        """
        function = self.raw_frame.function
        pkg_path = ""
        qualified = function
        idx = function.rfind("/")
        if idx >= 0:
            pkg_path = function[:idx]
            qualified = function[idx:]

        # qualified keeps its leading "/" so the concatenation below needs no separator
        pkg_name, sep, _ = qualified.partition(".")
        if not sep:
            return pkg_path
        return pkg_path + pkg_name

    @property
    def pkg_name(self) -> str:
        """
        Short name of the package owning the function.

        e.g., example.com/sample/a.F.G.func1 -> a
        """
        qualified = self.raw_frame.function
        idx = qualified.rfind("/")
        if idx >= 0:
            qualified = qualified[idx + 1 :]

        pkg_name, sep, _ = qualified.partition(".")
        if not sep:
            return ""
        return pkg_name

    def __format__(self, format_spec: str) -> str:
        from ..core.formatter import format_frame

        return format_frame(self, format_spec)

    def __str__(self) -> str:
        return format(self, "v")
