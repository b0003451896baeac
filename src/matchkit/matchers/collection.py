"""Matchers over ordered sequences (lists, tuples and other indexable types)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from matchkit.equality import compare
from matchkit.errors import MatcherConstructionError
from matchkit.matcher import Matcher, MatchResult, as_sequence, describe_value
from matchkit.matchers.core import equal_to, one_of

_NOT_A_SEQUENCE = "was not a slice or array"
_INDENT = " " * 10


def _every_item(matcher: Matcher, actual: Sequence[Any]) -> MatchResult:
    if len(actual) == 0:
        return MatchResult.failure("was empty")
    for value in actual:
        result = matcher.match(value)
        if not result.passed:
            return MatchResult.failure(f"contained an item where {result.reason}")
    return MatchResult.success()


def _any_item(matcher: Matcher, actual: Sequence[Any]) -> MatchResult:
    if len(actual) == 0:
        return MatchResult.failure("was empty")
    reasons: list[str] = []
    for value in actual:
        result = matcher.match(value)
        if result.passed:
            return result
        reasons.append(result.reason)
    if len(reasons) == 1:
        return MatchResult.failure(f"contained an item where {reasons[0]}")
    joined = f",\n{_INDENT}".join(reasons)
    return MatchResult.failure(f"no item matched where [\n{_INDENT}{joined}\n{_INDENT}]")


def _subsequence(expected: list[Any], actual: Sequence[Any]) -> MatchResult:
    # Each expected value binds to its leftmost occurrence after the previous one.
    match_index = 0
    match_len = len(expected)
    i = 0
    while i < len(actual) and match_index < match_len:
        if compare(expected[match_index], actual[i]).passed:
            match_index += 1
            if match_index == match_len:
                return MatchResult.success()
        i += 1

    if match_len - match_index > 1:
        return MatchResult.failure(f"did not contain {describe_value(expected[match_index:])}")
    return MatchResult.failure(f"did not contain {describe_value(expected[match_index])}")


def every_item_matching(matcher: Matcher) -> Matcher:
    """Match a sequence whose every element satisfies *matcher*.

    Stops at the first element that does not match. An empty sequence fails.
    """

    def _match(actual: Any) -> MatchResult:
        sequence_value = as_sequence(actual)
        if sequence_value is None:
            return MatchResult.failure(_NOT_A_SEQUENCE)
        return _every_item(matcher, sequence_value)

    return Matcher(f"every item to have {matcher.describe()}", _match)


def any_item_matching(matcher: Matcher) -> Matcher:
    """Match a sequence with at least one element satisfying *matcher*.

    Stops at the first element that matches. When nothing matches, the
    failure lists the mismatch reason of every element.
    """

    def _match(actual: Any) -> MatchResult:
        sequence_value = as_sequence(actual)
        if sequence_value is None:
            return MatchResult.failure(_NOT_A_SEQUENCE)
        return _any_item(matcher, sequence_value)

    return Matcher(f"any item to have {matcher.describe()}", _match)


def item(expected: Any) -> Matcher:
    """Match a sequence containing a value equal to *expected*."""
    return any_item_matching(equal_to(expected))


def item_in(*expected: Any) -> Matcher:
    """Match a sequence containing a value equal to any of *expected*."""
    return any_item_matching(one_of(*expected))


def items(*expected: Any) -> Matcher:
    """Match a sequence containing every one of *expected*, in any order.

    The same element may satisfy several expected values. Stops at the first
    expected value that is not found.
    """
    if not expected:
        raise MatcherConstructionError("will never match an empty set of items")
    wanted = list(expected)
    element_matchers = [equal_to(value) for value in wanted]

    def _match(actual: Any) -> MatchResult:
        sequence_value = as_sequence(actual)
        if sequence_value is None:
            return MatchResult.failure(_NOT_A_SEQUENCE)
        for element_matcher in element_matchers:
            result = _any_item(element_matcher, sequence_value)
            if not result.passed:
                return result
        return MatchResult.success()

    return Matcher(f"values equal to {describe_value(wanted)} in any order", _match)


def sequence(*expected: Any) -> Matcher:
    """Match a sequence containing *expected* in order, not necessarily contiguously."""
    if not expected:
        raise MatcherConstructionError("will never match an empty sequence of items")
    wanted = list(expected)

    def _match(actual: Any) -> MatchResult:
        sequence_value = as_sequence(actual)
        if sequence_value is None:
            return MatchResult.failure(_NOT_A_SEQUENCE)
        return _subsequence(wanted, sequence_value)

    return Matcher(f"values equal to {describe_value(wanted)} in order", _match)
