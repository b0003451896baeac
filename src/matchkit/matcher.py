"""Base data structures for the matcher system."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class MatchResult:
    """Outcome of evaluating a matcher against one value.

    Attributes:
        passed: Whether the value satisfied the matcher.
        reason: Human-readable mismatch description. Empty when passed.
    """

    passed: bool
    reason: str = ""

    @classmethod
    def success(cls) -> MatchResult:
        return cls(passed=True)

    @classmethod
    def failure(cls, reason: str) -> MatchResult:
        return cls(passed=False, reason=reason)


@dataclass(frozen=True)
class Matcher:
    """A described predicate over a single value.

    Attributes:
        description: Summary of what the matcher expects, used in failure
            messages (e.g. "every item to have value equal to <1>").
        predicate: Callable that inspects the actual value and returns a
            MatchResult. Must not mutate its input.
    """

    description: str
    predicate: Callable[[Any], MatchResult]

    def describe(self) -> str:
        return self.description

    def match(self, actual: Any) -> MatchResult:
        return self.predicate(actual)

    def __repr__(self) -> str:
        return f"Matcher({self.description!r})"


def describe_value(value: Any) -> str:
    """Render a literal value for embedding in descriptions and reasons."""
    return f"<{value!r}>"


def as_sequence(actual: Any) -> Sequence[Any] | None:
    """Return *actual* if it is an ordered, indexable sequence, else None.

    Text and byte strings are rejected: they are values, not collections.
    """
    if isinstance(actual, Sequence) and not isinstance(actual, str | bytes | bytearray):
        return actual
    return None
