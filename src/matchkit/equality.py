"""Type-strict structural equality used by the value matchers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from matchkit.matcher import MatchResult, describe_value


def deep_equal(expected: Any, actual: Any) -> bool:
    """Compare two values structurally.

    Types must match exactly, so ``1``, ``1.0`` and ``True`` are all distinct,
    including when used as mapping keys. Mappings, lists and tuples are
    compared recursively; self-referencing containers compare equal when
    their structure repeats in the same way.
    """
    return _deep_equal(expected, actual, set())


def _deep_equal(expected: Any, actual: Any, seen: set[tuple[int, int]]) -> bool:
    if expected is actual:
        return True
    if type(expected) is not type(actual):
        return False
    if not isinstance(expected, Mapping | list | tuple):
        return expected == actual

    pair = (id(expected), id(actual))
    if pair in seen:
        return True
    seen.add(pair)

    if len(expected) != len(actual):
        return False
    if isinstance(expected, Mapping):
        return _mappings_equal(expected, actual, seen)
    return all(_deep_equal(e, a, seen) for e, a in zip(expected, actual))


def _mappings_equal(
    expected: Mapping[Any, Any], actual: Mapping[Any, Any], seen: set[tuple[int, int]]
) -> bool:
    # Maps each actual key to itself so a lookup returns the stored key object.
    actual_keys = {key: key for key in actual}
    for key, value in expected.items():
        if key not in actual_keys:
            return False
        actual_key = actual_keys[key]
        if not _deep_equal(key, actual_key, seen):
            return False
        if not _deep_equal(value, actual[actual_key], seen):
            return False
    return True


def compare(expected: Any, actual: Any) -> MatchResult:
    if deep_equal(expected, actual):
        return MatchResult.success()
    return MatchResult.failure(
        f"was {describe_value(actual)}, expected {describe_value(expected)}"
    )
