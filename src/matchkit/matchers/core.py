"""Elementary value matchers."""

from __future__ import annotations

from typing import Any

from matchkit.equality import compare, deep_equal
from matchkit.errors import MatcherConstructionError
from matchkit.matcher import Matcher, MatchResult, describe_value


def equal_to(expected: Any) -> Matcher:
    """Match a value that deep-equals *expected*."""
    return Matcher(
        f"value equal to {describe_value(expected)}",
        lambda actual: compare(expected, actual),
    )


def one_of(*expected: Any) -> Matcher:
    """Match a value that deep-equals any one of *expected*."""
    if not expected:
        raise MatcherConstructionError("will never match an empty set of values")
    choices = list(expected)

    def _match(actual: Any) -> MatchResult:
        if any(deep_equal(choice, actual) for choice in choices):
            return MatchResult.success()
        return MatchResult.failure(
            f"was {describe_value(actual)}, expected one of {describe_value(choices)}"
        )

    return Matcher(f"value one of {describe_value(choices)}", _match)
