"""Routing of assertion failures to the test case currently executing."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class FailureSink(Protocol):
    def record_failure(
        self, description: str, file: str, line: int, expected: bool
    ) -> None:
        """Receive one failure report."""
        ...


# Context-local so that independent threads and asyncio tasks route their
# failures to their own test case.
_current_test_case: ContextVar[FailureSink | None] = ContextVar(
    "xctest_current_test_case", default=None
)


def current_test_case() -> FailureSink | None:
    """Return the failure sink of the test presently executing, if any."""
    return _current_test_case.get()


@contextmanager
def running_test_case(sink: FailureSink | None) -> Iterator[FailureSink | None]:
    """Install ``sink`` as the current test case for the duration of the block.

    The previous sink is restored on exit, so contexts nest.
    """
    token = _current_test_case.set(sink)
    try:
        yield sink
    finally:
        _current_test_case.reset(token)
