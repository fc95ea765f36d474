"""Public assertion functions.

Every assertion takes its operands as zero-argument callables so that they
are evaluated lazily, exactly once, inside the evaluator::

    assert_equal(lambda: parse("1 + 1"), lambda: 2, "parser is broken")

``message`` may be a string or a callable returning one; it is only
resolved when the assertion fails. ``file`` and ``line`` default to the
location of the call, which is what helper assertions should forward when
they want failures reported where *they* are called:

    def assert_empty(elements, file=None, line=None):
        file, line = call_site(file, line)
        assert_equal(lambda: len(elements), lambda: 0, "not empty", file=file, line=line)
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, TypeVar

from xctest.assertions.base import (
    SUCCESS,
    AssertionKind,
    AssertionOutcome,
    ExpectedFailure,
)
from xctest.assertions.equality import values_equal
from xctest.assertions.evaluator import Message, call_site, evaluate_assertion

T = TypeVar("T")

Expression = Callable[[], T]


def assert_that(
    expression: Expression[Any],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    """Fail unless ``expression()`` is truthy. Same as ``assert_true``."""
    file, line = call_site(file, line)
    return assert_true(expression, message, file=file, line=line)


def assert_equal(
    expression1: Expression[T],
    expression2: Expression[T],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    """Fail unless both values are equal.

    Scalars compare with ``==``; ``None`` only equals ``None``; mappings and
    ordered sequences compare element by element, recursively.
    """
    file, line = call_site(file, line)

    def expression() -> AssertionOutcome:
        value1, value2 = expression1(), expression2()
        if values_equal(value1, value2):
            return SUCCESS
        return ExpectedFailure(f'("{value1}") is not equal to ("{value2}")')

    return evaluate_assertion(
        AssertionKind.EQUAL, expression, message=message, file=file, line=line
    )


def assert_not_equal(
    expression1: Expression[T],
    expression2: Expression[T],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    """Fail if both values are equal, using the same rules as ``assert_equal``."""
    file, line = call_site(file, line)

    def expression() -> AssertionOutcome:
        value1, value2 = expression1(), expression2()
        if not values_equal(value1, value2):
            return SUCCESS
        return ExpectedFailure(f'("{value1}") is equal to ("{value2}")')

    return evaluate_assertion(
        AssertionKind.NOT_EQUAL, expression, message=message, file=file, line=line
    )


def assert_equal_with_accuracy(
    expression1: Expression[float],
    expression2: Expression[float],
    accuracy: float,
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    """Fail unless ``|value1 - value2| <= |accuracy|``."""
    file, line = call_site(file, line)

    def expression() -> AssertionOutcome:
        value1, value2 = expression1(), expression2()
        if abs(value1 - value2) <= abs(accuracy):
            return SUCCESS
        return ExpectedFailure(
            f'("{value1}") is not equal to ("{value2}") +/- ("{accuracy}")'
        )

    return evaluate_assertion(
        AssertionKind.EQUAL_WITH_ACCURACY,
        expression,
        message=message,
        file=file,
        line=line,
    )


def assert_not_equal_with_accuracy(
    expression1: Expression[float],
    expression2: Expression[float],
    accuracy: float,
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    """Fail unless ``|value1 - value2| > |accuracy|``."""
    file, line = call_site(file, line)

    def expression() -> AssertionOutcome:
        value1, value2 = expression1(), expression2()
        if abs(value1 - value2) > abs(accuracy):
            return SUCCESS
        return ExpectedFailure(
            f'("{value1}") is equal to ("{value2}") +/- ("{accuracy}")'
        )

    return evaluate_assertion(
        AssertionKind.NOT_EQUAL_WITH_ACCURACY,
        expression,
        message=message,
        file=file,
        line=line,
    )


def _ordering(
    kind: AssertionKind,
    holds: Callable[[Any, Any], bool],
    relation: str,
    expression1: Expression[Any],
    expression2: Expression[Any],
    message: Message,
    file: str,
    line: int,
) -> AssertionOutcome:
    def expression() -> AssertionOutcome:
        value1, value2 = expression1(), expression2()
        if holds(value1, value2):
            return SUCCESS
        return ExpectedFailure(f'("{value1}") is not {relation} ("{value2}")')

    return evaluate_assertion(kind, expression, message=message, file=file, line=line)


def assert_greater_than(
    expression1: Expression[T],
    expression2: Expression[T],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    file, line = call_site(file, line)
    return _ordering(
        AssertionKind.GREATER_THAN,
        lambda a, b: a > b,
        "greater than",
        expression1,
        expression2,
        message,
        file,
        line,
    )


def assert_greater_than_or_equal(
    expression1: Expression[T],
    expression2: Expression[T],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    file, line = call_site(file, line)
    return _ordering(
        AssertionKind.GREATER_THAN_OR_EQUAL,
        lambda a, b: a >= b,
        "greater than or equal to",
        expression1,
        expression2,
        message,
        file,
        line,
    )


def assert_less_than(
    expression1: Expression[T],
    expression2: Expression[T],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    file, line = call_site(file, line)
    return _ordering(
        AssertionKind.LESS_THAN,
        lambda a, b: a < b,
        "less than",
        expression1,
        expression2,
        message,
        file,
        line,
    )


def assert_less_than_or_equal(
    expression1: Expression[T],
    expression2: Expression[T],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    file, line = call_site(file, line)
    return _ordering(
        AssertionKind.LESS_THAN_OR_EQUAL,
        lambda a, b: a <= b,
        "less than or equal to",
        expression1,
        expression2,
        message,
        file,
        line,
    )


def assert_nil(
    expression: Expression[Any],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    """Fail unless the value is None."""
    file, line = call_site(file, line)

    def evaluate() -> AssertionOutcome:
        value = expression()
        if value is None:
            return SUCCESS
        return ExpectedFailure(f'"{value}"')

    return evaluate_assertion(
        AssertionKind.NIL, evaluate, message=message, file=file, line=line
    )


def assert_not_nil(
    expression: Expression[Any],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    """Fail if the value is None."""
    file, line = call_site(file, line)

    def evaluate() -> AssertionOutcome:
        if expression() is not None:
            return SUCCESS
        return ExpectedFailure()

    return evaluate_assertion(
        AssertionKind.NOT_NIL, evaluate, message=message, file=file, line=line
    )


def assert_true(
    expression: Expression[Any],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    file, line = call_site(file, line)

    def evaluate() -> AssertionOutcome:
        if expression():
            return SUCCESS
        return ExpectedFailure()

    return evaluate_assertion(
        AssertionKind.TRUE, evaluate, message=message, file=file, line=line
    )


def assert_false(
    expression: Expression[Any],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    file, line = call_site(file, line)

    def evaluate() -> AssertionOutcome:
        if not expression():
            return SUCCESS
        return ExpectedFailure()

    return evaluate_assertion(
        AssertionKind.FALSE, evaluate, message=message, file=file, line=line
    )


def fail(
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> AssertionOutcome:
    """Record a failure unconditionally."""
    file, line = call_site(file, line)
    return evaluate_assertion(
        AssertionKind.FAIL, ExpectedFailure, message=message, file=file, line=line
    )


def _ignore_error(error: BaseException) -> None:
    pass


def _call_error_handler(handler: Callable[..., Any], error: BaseException) -> None:
    try:
        parameters = inspect.signature(handler).parameters.values()
    except (TypeError, ValueError):
        handler(error)
        return

    accepts_error = any(
        p.kind
        in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        )
        for p in parameters
    )
    if accepts_error:
        handler(error)
    else:
        handler()


def assert_throws_error(
    expression: Expression[Any],
    message: Message = "",
    *,
    file: str | None = None,
    line: int | None = None,
    error_handler: Callable[..., Any] = _ignore_error,
) -> AssertionOutcome:
    """Fail unless calling ``expression`` raises.

    On success the caught error is passed to ``error_handler`` (or the
    handler is called without arguments if it takes none) before the
    assertion reports success. Any ``Exception`` subclass counts.
    """
    file, line = call_site(file, line)

    def evaluate() -> AssertionOutcome:
        caught: Exception | None = None
        try:
            expression()
        except Exception as e:
            caught = e

        if caught is None:
            return ExpectedFailure("did not throw error")
        _call_error_handler(error_handler, caught)
        return SUCCESS

    return evaluate_assertion(
        AssertionKind.THROWS_ERROR, evaluate, message=message, file=file, line=line
    )
