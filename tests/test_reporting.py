from __future__ import annotations

from junitparser import JUnitXml, Failure

from matchkit.reporting.junit import summarize, write_junit


def _results() -> list[dict]:
    return [
        {
            "name": "ordered",
            "description": "values equal to <[1, 2]> in order",
            "passed": True,
            "message": "matched",
        },
        {
            "name": "tags",
            "description": "values equal to <['release']> in any order",
            "passed": False,
            "message": "contained an item where was <'stable'>, expected <'release'>",
        },
    ]


def test_write_junit_creates_file(tmp_path):
    path = write_junit(tmp_path, "checks", _results())
    assert path == tmp_path / "junit.xml"
    assert path.exists()


def test_write_junit_one_case_per_check(tmp_path):
    path = write_junit(tmp_path, "checks", _results())
    xml = JUnitXml.fromfile(str(path))
    suite = next(iter(xml))
    assert suite.name == "checks"
    cases = list(suite)
    assert [c.name for c in cases] == ["ordered", "tags"]
    assert all(c.classname == "checks" for c in cases)


def test_write_junit_failure_message(tmp_path):
    path = write_junit(tmp_path, "checks", _results())
    xml = JUnitXml.fromfile(str(path))
    cases = {c.name: c for c in next(iter(xml))}
    assert not cases["ordered"].result
    failure = cases["tags"].result[0]
    assert isinstance(failure, Failure)
    assert failure.message == "contained an item where was <'stable'>, expected <'release'>"


def test_summarize(tmp_path):
    path = write_junit(tmp_path, "checks", _results())
    assert summarize(path) == (2, 1)


def test_summarize_all_passed(tmp_path):
    path = write_junit(tmp_path, "checks", _results()[:1])
    assert summarize(path) == (1, 0)
