"""Assertion helper for using matchers inside tests."""

from __future__ import annotations

from typing import Any

from matchkit.matcher import Matcher


def assert_that(actual: Any, matcher: Matcher, reason: str = "") -> None:
    """Raise AssertionError when *actual* does not satisfy *matcher*."""
    result = matcher.match(actual)
    if result.passed:
        return
    raise AssertionError(
        f"{reason}\nExpected: {matcher.describe()}\n     but: {result.reason}"
    )
