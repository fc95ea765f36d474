"""Evaluation of a single assertion and routing of its failure report."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Union

from xctest.assertions.base import (
    AssertionKind,
    AssertionOutcome,
    FailureReport,
    Success,
    UnexpectedFailure,
    failure_description,
)
from xctest.context import current_test_case

logger = logging.getLogger(__name__)

Message = Union[str, Callable[[], str]]


def call_site(file: str | None, line: int | None, depth: int = 1) -> tuple[str, int]:
    """Resolve missing source location to the caller of the public assertion.

    ``depth`` counts frames above the function calling ``call_site``.
    """
    if file is not None and line is not None:
        return file, line
    frame = sys._getframe(depth + 1)
    return (
        file if file is not None else frame.f_code.co_filename,
        line if line is not None else frame.f_lineno,
    )


def resolve_message(message: Message) -> str:
    return message() if callable(message) else message


def evaluate_assertion(
    kind: AssertionKind,
    expression: Callable[[], AssertionOutcome],
    *,
    message: Message = "",
    file: str,
    line: int,
) -> AssertionOutcome:
    """Evaluate ``expression`` once and report a non-success outcome.

    The expression applies the kind-specific predicate and returns the
    outcome; any ``Exception`` it raises becomes an unexpected failure.
    The report goes to the current test case. Outside a running test there
    is no receiver and the failure is dropped without resolving the message.

    Returns the outcome so that callers can inspect it; the framework itself
    only relies on the side effect.
    """
    try:
        outcome = expression()
    except Exception as e:
        outcome = UnexpectedFailure(e)

    if isinstance(outcome, Success):
        return outcome

    sink = current_test_case()
    if sink is None:
        logger.debug(
            f"No current test case, dropping failure: {file}:{line}: "
            f"{failure_description(outcome, kind)}"
        )
        return outcome

    report = FailureReport(
        description=f"{failure_description(outcome, kind)} - {resolve_message(message)}",
        file=file,
        line=line,
        expected=outcome.is_expected,
    )
    sink.record_failure(report.description, report.file, report.line, report.expected)
    return outcome
