"""Pytest configuration and fixtures."""

import logging
import sys

import pytest

from xctest.assertions.base import FailureReport
from xctest.context import running_test_case


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from xctest loggers after each test so names can be reused."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("xctest"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


class RecordingSink:
    """Failure sink that keeps every report it receives."""

    def __init__(self):
        self.reports: list[FailureReport] = []

    def record_failure(self, description, file, line, expected):
        self.reports.append(
            FailureReport(description=description, file=file, line=line, expected=expected)
        )

    @property
    def descriptions(self) -> list[str]:
        return [r.description for r in self.reports]


class Counting:
    """Zero-argument expression that counts how often it is evaluated."""

    def __init__(self, value=None, error: Exception | None = None):
        self.value = value
        self.error = error
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.value


@pytest.fixture
def sink():
    """Install a recording sink as the current test case."""
    recorder = RecordingSink()
    with running_test_case(recorder):
        yield recorder


@pytest.fixture
def counting():
    return Counting


SAMPLE_MODULE = '''\
from xctest import XCTestCase, XCTestSuite, assert_equal, assert_true


def make_passing():
    suite = XCTestSuite("passing")
    suite.add_test(XCTestCase("addition", lambda: assert_equal(lambda: 1 + 1, lambda: 2)))
    suite.add_test(XCTestCase("truth", lambda: assert_true(lambda: True)))
    return suite


def boom():
    raise RuntimeError("boom")


def make_failing():
    suite = XCTestSuite("failing")
    suite.add_test(XCTestCase("wrong", lambda: assert_equal(lambda: 1, lambda: 2, "math")))
    suite.add_test(XCTestCase("raises", boom))
    return suite


single_case = XCTestCase("single", lambda: None)
not_a_test = 42
'''


@pytest.fixture
def sample_module(tmp_path, monkeypatch):
    """Importable module ``xctest_sample_suites`` with a few suite factories."""
    module_dir = tmp_path / "sample_pkg"
    module_dir.mkdir()
    (module_dir / "xctest_sample_suites.py").write_text(SAMPLE_MODULE)
    monkeypatch.syspath_prepend(str(module_dir))
    monkeypatch.delitem(sys.modules, "xctest_sample_suites", raising=False)
    return "xctest_sample_suites"
