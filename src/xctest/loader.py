"""Resolve configured targets into a tree of tests."""

from __future__ import annotations

import importlib
import logging

from xctest.config import RunConfig, SuiteRef
from xctest.testing import XCTest, XCTestSuite

logger = logging.getLogger(__name__)


def resolve_target(target: str) -> XCTest:
    """Import ``module:attribute`` and return the test it names.

    Raises ValueError when the module or attribute is missing or does not
    produce an ``XCTest``.
    """
    module_name, _, attribute = target.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import module for target '{target}': {e}") from e

    obj = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ValueError(f"Target '{target}' not found") from None

    if not isinstance(obj, XCTest) and callable(obj):
        obj = obj()

    if not isinstance(obj, XCTest):
        raise ValueError(
            f"Target '{target}' did not produce an XCTest (got {type(obj).__name__})"
        )
    return obj


def build_suite(config: RunConfig) -> XCTestSuite:
    """Assemble the root suite, one member per configured target, in config order."""
    root = XCTestSuite(config.name)
    for ref in config.suites:
        root.add_test(_build_member(ref))
    logger.debug(f"Built suite '{root.name}' with {root.test_case_count} test case(s)")
    return root


def _build_member(ref: SuiteRef) -> XCTest:
    test = resolve_target(ref.target)
    if ref.name is None:
        return test
    wrapper = XCTestSuite(ref.name)
    wrapper.add_test(test)
    return wrapper
