"""XCTest-style assertions and test suites."""

from xctest.assertions import (
    AssertionKind,
    AssertionOutcome,
    ExpectedFailure,
    FailureReport,
    Success,
    UnexpectedFailure,
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
    call_site,
    evaluate_assertion,
    fail,
)
from xctest.context import FailureSink, current_test_case, running_test_case
from xctest.testing import (
    WrongTestRunClassError,
    XCTest,
    XCTestCase,
    XCTestRun,
    XCTestSuite,
    XCTestSuiteRun,
)

__all__ = [
    "AssertionKind",
    "AssertionOutcome",
    "ExpectedFailure",
    "FailureReport",
    "FailureSink",
    "Success",
    "UnexpectedFailure",
    "WrongTestRunClassError",
    "XCTest",
    "XCTestCase",
    "XCTestRun",
    "XCTestSuite",
    "XCTestSuiteRun",
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
    "current_test_case",
    "evaluate_assertion",
    "fail",
    "running_test_case",
]
