"""Matcher constructors."""

from matchkit.matchers.collection import (
    any_item_matching,
    every_item_matching,
    item,
    item_in,
    items,
    sequence,
)
from matchkit.matchers.core import equal_to, one_of

__all__ = [
    "any_item_matching",
    "equal_to",
    "every_item_matching",
    "item",
    "item_in",
    "items",
    "one_of",
    "sequence",
]
