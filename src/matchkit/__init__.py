"""Composable matchers for asserting on values and sequences."""

from matchkit.assertions import assert_that
from matchkit.errors import MatcherConstructionError
from matchkit.matcher import Matcher, MatchResult
from matchkit.matchers import (
    any_item_matching,
    equal_to,
    every_item_matching,
    item,
    item_in,
    items,
    one_of,
    sequence,
)

__all__ = [
    "Matcher",
    "MatchResult",
    "MatcherConstructionError",
    "any_item_matching",
    "assert_that",
    "equal_to",
    "every_item_matching",
    "item",
    "item_in",
    "items",
    "one_of",
    "sequence",
]
