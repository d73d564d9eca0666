"""Single-value matchers comparing against an expected value."""

from __future__ import annotations

import operator
from typing import Any, Callable

from pointwise.matchers.base import Matcher, MatcherResult


class ComparisonMatcher(Matcher):
    """Compare the actual value to ``expected`` with a binary operator."""

    def __init__(
        self,
        expected: Any,
        compare: Callable[[Any, Any], bool],
        positive: str,
        negative: str,
    ):
        self.expected = expected
        self._compare = compare
        self._positive = positive
        self._negative = negative

    def matches(self, actual: Any) -> MatcherResult:
        try:
            return MatcherResult.from_bool(bool(self._compare(actual, self.expected)))
        except TypeError:
            # Unorderable types, e.g. 1 < "a"
            return MatcherResult.DOES_NOT_MATCH

    def describe(self, matcher_result: MatcherResult) -> str:
        phrase = matcher_result.pick(self._positive, self._negative)
        return f"{phrase} {self.expected!r}"

    def __repr__(self) -> str:
        return f"<{self.describe(MatcherResult.MATCHES)}>"


def eq(expected: Any) -> ComparisonMatcher:
    return ComparisonMatcher(expected, operator.eq, "is equal to", "isn't equal to")


def ne(expected: Any) -> ComparisonMatcher:
    return ComparisonMatcher(expected, operator.ne, "isn't equal to", "is equal to")


def lt(expected: Any) -> ComparisonMatcher:
    return ComparisonMatcher(
        expected, operator.lt, "is less than", "is greater than or equal to"
    )


def le(expected: Any) -> ComparisonMatcher:
    return ComparisonMatcher(
        expected, operator.le, "is less than or equal to", "is greater than"
    )


def gt(expected: Any) -> ComparisonMatcher:
    return ComparisonMatcher(
        expected, operator.gt, "is greater than", "is less than or equal to"
    )


def ge(expected: Any) -> ComparisonMatcher:
    return ComparisonMatcher(
        expected, operator.ge, "is greater than or equal to", "is less than"
    )
