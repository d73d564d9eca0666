from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from pointwise.assertions.base import AssertionResult
from pointwise.metrics import summarize


def write_junit(
    run_dir: Path, results: list[AssertionResult], suite_name: str = "pointwise"
) -> Path:
    """Write junit.xml with one test case per assertion result, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    summary = summarize(results)
    for key in ("weighted_score", "pass_rate"):
        suite.add_property(key, str(summary[key]))

    for result in results:
        case = TestCase(result.name)
        case.classname = suite_name
        if not result.passed:
            case.result = Failure(result.message)
        suite.add_testcase(case)

    # Use append (not +=) to preserve properties
    xml.append(suite)

    junit_path = run_dir / "junit.xml"
    xml.write(str(junit_path), pretty=True)
    return junit_path


def count_failures(junit_path: Path) -> int:
    """Return the total number of failed test cases recorded in junit.xml."""
    xml = JUnitXml.fromfile(str(junit_path))
    return sum(suite.failures for suite in xml)
