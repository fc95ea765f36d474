"""Example suites for ``xctest run examples/calculator/xctest.yaml``."""

import math

from xctest import (
    XCTestCase,
    XCTestSuite,
    assert_equal,
    assert_equal_with_accuracy,
    assert_greater_than,
    assert_nil,
    assert_throws_error,
)


def parse_number(text: str) -> float | None:
    text = text.strip()
    if not text:
        return None
    return float(text)


class ParsingTests(XCTestCase):
    def test_parses_integers(self):
        assert_equal(lambda: parse_number("42"), lambda: 42.0)

    def test_blank_is_nil(self):
        assert_nil(lambda: parse_number("   "))

    def test_garbage_raises(self):
        assert_throws_error(
            lambda: parse_number("forty-two"),
            error_handler=lambda e: assert_equal(lambda: type(e), lambda: ValueError),
        )


def make_suite() -> XCTestSuite:
    parsing = XCTestSuite("Parsing")
    for name in ("test_parses_integers", "test_blank_is_nil", "test_garbage_raises"):
        parsing.add_test(ParsingTests(name))

    arithmetic = XCTestSuite("Arithmetic")
    arithmetic.add_test(
        XCTestCase(
            "pi_is_close",
            lambda: assert_equal_with_accuracy(lambda: math.pi, lambda: 3.14159, 1e-5),
        )
    )
    arithmetic.add_test(
        XCTestCase("e_is_bigger_than_two", lambda: assert_greater_than(lambda: math.e, lambda: 2))
    )

    root = XCTestSuite("Calculator")
    root.add_test(parsing)
    root.add_test(arithmetic)
    return root
