from __future__ import annotations

from typing import Any

from pointwise.matchers.base import Matcher, MatcherResult


class NotMatcher(Matcher):
    def __init__(self, inner: Matcher):
        self.inner = inner

    def matches(self, actual: Any) -> MatcherResult:
        return self.inner.matches(actual).negate()

    def describe(self, matcher_result: MatcherResult) -> str:
        return self.inner.describe(matcher_result.negate())

    def explain_match(self, actual: Any) -> str:
        return self.inner.explain_match(actual)

    def __repr__(self) -> str:
        return f"not_({self.inner!r})"


def not_(inner: Matcher) -> NotMatcher:
    """Match any value that ``inner`` does not match."""
    return NotMatcher(inner)
