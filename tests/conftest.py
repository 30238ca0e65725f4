"""Shared test fixtures for callertrace."""

from collections.abc import Iterator, Sequence

import pytest

from callertrace.models.frame import Frame, RawFrame
from callertrace.models.stacktrace import StackTrace


class FakeStackWalker:
    """StackWalker producing canned records; handles are list indexes."""

    def __init__(self, records: Sequence[RawFrame]) -> None:
        self.records = list(records)
        self.calls: list[tuple[int, int]] = []

    def callers(self, skip: int, limit: int) -> list[int]:
        self.calls.append((skip, limit))
        return list(range(min(len(self.records), limit)))

    def frames(self, handles: Sequence[int]) -> Iterator[RawFrame]:
        for handle in handles:
            yield self.records[handle]


@pytest.fixture
def frame_a() -> Frame:
    """A frame of a closure in package example.com/sample/a."""
    return Frame(
        RawFrame(
            function="example.com/sample/a.F.G.func1",
            file="example.com/sample/a/a.go",
            line=10,
        )
    )


@pytest.fixture
def frame_b() -> Frame:
    """A frame of a closure in package example.com/sample/b."""
    return Frame(
        RawFrame(
            function="example.com/sample/b.F.G.func2",
            file="example.com/sample/b/b.go",
            line=11,
        )
    )


@pytest.fixture
def sample_stack(frame_a: Frame, frame_b: Frame) -> StackTrace:
    """A two-frame stack, innermost first."""
    return StackTrace((frame_a, frame_b))


@pytest.fixture
def fake_walker_factory() -> type[FakeStackWalker]:
    """Return the fake walker class for building canned stacks."""
    return FakeStackWalker
