"""Base abstractions shared by every matcher."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


class MatcherResult(str, Enum):
    MATCHES = "matches"
    DOES_NOT_MATCH = "does_not_match"

    @classmethod
    def from_bool(cls, flag: bool) -> MatcherResult:
        return cls.MATCHES if flag else cls.DOES_NOT_MATCH

    @property
    def is_match(self) -> bool:
        return self is MatcherResult.MATCHES

    def pick(self, if_matches: T, if_does_not_match: T) -> T:
        """Return the first value for MATCHES and the second otherwise."""
        return if_matches if self.is_match else if_does_not_match

    def negate(self) -> MatcherResult:
        return self.pick(MatcherResult.DOES_NOT_MATCH, MatcherResult.MATCHES)


class Matcher(ABC):
    """A predicate over a single value that can describe and explain itself."""

    @abstractmethod
    def matches(self, actual: Any) -> MatcherResult:
        """Test ``actual`` against this matcher."""
        ...

    @abstractmethod
    def describe(self, matcher_result: MatcherResult) -> str:
        """Describe what this matcher demands.

        ``matcher_result`` selects the framing: MATCHES gives the positive
        statement ("is equal to 1"), DOES_NOT_MATCH the negative one
        ("isn't equal to 1").
        """
        ...

    def explain_match(self, actual: Any) -> str:
        """Explain why ``actual`` does or does not satisfy this matcher."""
        return f"which {self.describe(self.matches(actual))}"
