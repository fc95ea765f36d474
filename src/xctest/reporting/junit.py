from __future__ import annotations

from pathlib import Path

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

from xctest.testing import XCTestRun, XCTestSuiteRun


def _case_results(run: XCTestRun) -> list[Failure | Error]:
    results: list[Failure | Error] = []
    for report in run.failures:
        if report.expected:
            results.append(Failure(str(report)))
        else:
            results.append(Error(str(report)))
    return results


def _collect_suites(
    run: XCTestSuiteRun, path: list[str], xml: JUnitXml
) -> None:
    """Emit one <testsuite> per suite that directly holds cases, depth first."""
    label = " / ".join(path)
    case_runs = [r for r in run.test_runs if not isinstance(r, XCTestSuiteRun)]

    if case_runs:
        suite = TestSuite(label)
        for case_run in case_runs:
            case = TestCase(case_run.test.name)
            case.classname = label
            case.time = round(case_run.total_duration, 6)
            results = _case_results(case_run)
            if results:
                case.result = results
            suite.add_testcase(case)

        suite.add_property("test_case_count", str(run.test_case_count))
        suite.add_property(
            "unexpected_exception_count", str(run.unexpected_exception_count)
        )
        # Set time after add_testcase (add_testcase resets it via update_statistics)
        suite.time = round(run.total_duration, 6)
        xml.append(suite)

    for child in run.test_runs:
        if isinstance(child, XCTestSuiteRun):
            _collect_suites(child, path + [child.test.name], xml)


def write_junit(run_dir: Path, root_run: XCTestSuiteRun) -> Path:
    """Write junit.xml for a finished suite run, return path."""
    xml = JUnitXml(root_run.test.name)
    _collect_suites(root_run, [root_run.test.name], xml)

    junit_path = run_dir / "junit.xml"
    xml.write(str(junit_path), pretty=True)
    return junit_path


def summarize_junit(junit_path: Path) -> dict[str, int]:
    """Read totals back from a junit.xml file."""
    xml = JUnitXml.fromfile(str(junit_path))
    totals = {"tests": 0, "failures": 0, "errors": 0}
    for suite in xml:
        totals["tests"] += suite.tests
        totals["failures"] += suite.failures
        totals["errors"] += suite.errors
    return totals
