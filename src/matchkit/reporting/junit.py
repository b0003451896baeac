from __future__ import annotations

from pathlib import Path
from typing import Any

from junitparser import TestCase, TestSuite, JUnitXml, Failure


def write_junit(run_dir: Path, suite_name: str, results: list[dict[str, Any]]) -> Path:
    """Write junit.xml with one test case per check result, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    for check in results:
        case = TestCase(check["name"])
        case.classname = suite_name
        if not check.get("passed", True):
            failure = Failure(check.get("message", ""))
            failure.text = check.get("description", "")
            case.result = failure
        suite.add_testcase(case)

    # Use append (not +=) to preserve suite attributes
    xml.append(suite)

    junit_path = run_dir / "junit.xml"
    xml.write(str(junit_path), pretty=True)
    return junit_path


def summarize(junit_path: Path) -> tuple[int, int]:
    """Return (total, failures) counted across every suite in junit.xml."""
    xml = JUnitXml.fromfile(str(junit_path))
    total = 0
    failures = 0
    for suite in xml:
        total += suite.tests
        failures += suite.failures
    return total, failures
