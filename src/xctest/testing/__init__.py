from xctest.testing.base import WrongTestRunClassError, XCTest
from xctest.testing.case import XCTestCase
from xctest.testing.run import XCTestRun, XCTestSuiteRun
from xctest.testing.suite import XCTestSuite

__all__ = [
    "WrongTestRunClassError",
    "XCTest",
    "XCTestCase",
    "XCTestRun",
    "XCTestSuite",
    "XCTestSuiteRun",
]
