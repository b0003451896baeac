"""Turn check-file matcher specs into matchers and evaluate them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from matchkit.matcher import Matcher
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


@dataclass
class CheckResult:
    """Result of evaluating a single check.

    Attributes:
        name: Check name from the check file.
        description: Description of the matcher that was applied.
        passed: Whether the actual value satisfied the matcher.
        message: Mismatch reason, or "matched" when passed.
    """

    name: str
    description: str
    passed: bool
    message: str


def build_matcher(spec: dict[str, Any] | BaseModel) -> Matcher:
    """Build a matcher from a single-key spec.

    Supported formats:
        {"equal_to": 3}
        {"one_of": [1, 2]}
        {"every_item": {...}}
        {"any_item": {...}}
        {"item": 3}
        {"item_in": [1, 2]}
        {"items": [1, 2]}
        {"sequence": [1, 2, 3]}

    Raises ValueError for unknown matcher types.
    """
    if isinstance(spec, BaseModel):
        spec = spec.model_dump()
    if len(spec) != 1:
        raise ValueError(f"Matcher spec must have exactly one key, got {sorted(spec)}")

    mtype, value = next(iter(spec.items()))

    if mtype == "equal_to":
        return equal_to(value)
    if mtype == "one_of":
        return one_of(*value)
    if mtype == "every_item":
        return every_item_matching(build_matcher(value))
    if mtype == "any_item":
        return any_item_matching(build_matcher(value))
    if mtype == "item":
        return item(value)
    if mtype == "item_in":
        return item_in(*value)
    if mtype == "items":
        return items(*value)
    if mtype == "sequence":
        return sequence(*value)
    raise ValueError(f"Unknown matcher type: '{mtype}'")


def evaluate_check(
    name: str,
    matcher: Matcher,
    actual: Any,
    logger: logging.Logger,
) -> CheckResult:
    logger.info(f"Checking {name}: expected {matcher.describe()}")

    result = matcher.match(actual)
    logger.info(f"Check {name} passed={result.passed}")
    if not result.passed:
        logger.debug(f"Check {name} mismatch: {result.reason}")

    return CheckResult(
        name=name,
        description=matcher.describe(),
        passed=result.passed,
        message="matched" if result.passed else result.reason,
    )
