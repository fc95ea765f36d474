"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AssertionKind(Enum):
    EQUAL = "equal"
    EQUAL_WITH_ACCURACY = "equal_with_accuracy"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    NOT_EQUAL = "not_equal"
    NOT_EQUAL_WITH_ACCURACY = "not_equal_with_accuracy"
    NIL = "nil"
    NOT_NIL = "not_nil"
    TRUE = "true"
    FALSE = "false"
    FAIL = "fail"
    THROWS_ERROR = "throws_error"

    @property
    def display_name(self) -> str | None:
        """Name used as the prefix of failure descriptions, if any."""
        return _DISPLAY_NAMES.get(self)


_DISPLAY_NAMES: dict[AssertionKind, str] = {
    AssertionKind.EQUAL: "XCTAssertEqual",
    AssertionKind.EQUAL_WITH_ACCURACY: "XCTAssertEqualWithAccuracy",
    AssertionKind.GREATER_THAN: "XCTAssertGreaterThan",
    AssertionKind.GREATER_THAN_OR_EQUAL: "XCTAssertGreaterThanOrEqual",
    AssertionKind.LESS_THAN: "XCTAssertLessThan",
    AssertionKind.LESS_THAN_OR_EQUAL: "XCTAssertLessThanOrEqual",
    AssertionKind.NOT_EQUAL: "XCTAssertNotEqual",
    AssertionKind.NOT_EQUAL_WITH_ACCURACY: "XCTAssertNotEqualWithAccuracy",
    AssertionKind.NIL: "XCTAssertNil",
    AssertionKind.NOT_NIL: "XCTAssertNotNil",
    AssertionKind.TRUE: "XCTAssertTrue",
    AssertionKind.FALSE: "XCTAssertFalse",
    AssertionKind.THROWS_ERROR: "XCTAssertThrowsError",
}


@dataclass(frozen=True)
class Success:
    """The assertion's predicate held."""

    @property
    def is_expected(self) -> bool:
        return True

    def explanation(self) -> str:
        return "passed"


@dataclass(frozen=True)
class ExpectedFailure:
    """The predicate was false under normal evaluation.

    Attributes:
        detail: Rendering of the compared values, or None for the boolean
            and unconditional forms.
    """

    detail: str | None = None

    @property
    def is_expected(self) -> bool:
        return True

    def explanation(self) -> str:
        if self.detail is not None:
            return f"failed: {self.detail}"
        return "failed"


@dataclass(frozen=True)
class UnexpectedFailure:
    """Evaluating the expression raised before the predicate could run."""

    error: BaseException

    @property
    def is_expected(self) -> bool:
        return False

    def explanation(self) -> str:
        return f'threw error "{self.error}"'


AssertionOutcome = Success | ExpectedFailure | UnexpectedFailure

SUCCESS = Success()


def failure_description(outcome: AssertionOutcome, kind: AssertionKind) -> str:
    """Render ``<assertion-name> <explanation>``, or just the explanation for nameless kinds."""
    name = kind.display_name
    if name is None:
        return outcome.explanation()
    return f"{name} {outcome.explanation()}"


@dataclass(frozen=True)
class FailureReport:
    """A single non-success outcome, as handed to the current test case.

    Attributes:
        description: Full failure text, including the caller's message.
        file: Source file of the assertion call site.
        line: Line number of the assertion call site.
        expected: False only when the expression itself raised.
    """

    description: str
    file: str
    line: int
    expected: bool

    def __str__(self) -> str:
        return f"{self.file}:{self.line}: {self.description}"
