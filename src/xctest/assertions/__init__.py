"""Assertion system for test case bodies."""

from xctest.assertions.base import (
    AssertionKind,
    AssertionOutcome,
    ExpectedFailure,
    FailureReport,
    Success,
    UnexpectedFailure,
)
from xctest.assertions.evaluator import call_site, evaluate_assertion
from xctest.assertions.predicates import (
    assert_equal,
    assert_equal_with_accuracy,
    assert_false,
    assert_greater_than,
    assert_greater_than_or_equal,
    assert_less_than,
    assert_less_than_or_equal,
    assert_nil,
    assert_not_equal,
    assert_not_equal_with_accuracy,
    assert_not_nil,
    assert_that,
    assert_throws_error,
    assert_true,
    fail,
)

__all__ = [
    "AssertionKind",
    "AssertionOutcome",
    "ExpectedFailure",
    "FailureReport",
    "Success",
    "UnexpectedFailure",
    "assert_equal",
    "assert_equal_with_accuracy",
    "assert_false",
    "assert_greater_than",
    "assert_greater_than_or_equal",
    "assert_less_than",
    "assert_less_than_or_equal",
    "assert_nil",
    "assert_not_equal",
    "assert_not_equal_with_accuracy",
    "assert_not_nil",
    "assert_that",
    "assert_throws_error",
    "assert_true",
    "call_site",
    "evaluate_assertion",
    "fail",
]
