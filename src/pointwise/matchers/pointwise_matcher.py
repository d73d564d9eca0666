"""Match a sequence element by element against a list of matchers."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from pointwise.matchers.base import Matcher, MatcherResult
from pointwise.matchers.description import Description
from pointwise.matchers.zipped import zip_paired


class PointwiseMatcher(Matcher):
    """Matches a sequence whose i-th element satisfies the i-th matcher.

    The actual value must also have exactly as many elements as there are
    matchers. ``matches`` and ``explain_match`` each iterate ``actual``
    independently, so pass a re-iterable container rather than a one-shot
    iterator when both are needed.
    """

    def __init__(self, matchers: Iterable[Matcher]):
        self._matchers: tuple[Matcher, ...] = tuple(matchers)

    @property
    def matchers(self) -> Sequence[Matcher]:
        return self._matchers

    def matches(self, actual: Iterable[Any]) -> MatcherResult:
        walker = zip_paired(actual, self._matchers)
        for element, matcher in walker:
            if not matcher.matches(element).is_match:
                return MatcherResult.DOES_NOT_MATCH
        if walker.has_size_mismatch():
            return MatcherResult.DOES_NOT_MATCH
        return MatcherResult.MATCHES

    def explain_match(self, actual: Iterable[Any]) -> str:
        walker = zip_paired(actual, self._matchers)
        mismatches = [
            f"element #{index} is {element!r}, {matcher.explain_match(element)}"
            for index, (element, matcher) in enumerate(walker)
            if not matcher.matches(element).is_match
        ]

        if not mismatches:
            if walker.has_size_mismatch():
                return (
                    f"which has size {walker.left_size()} "
                    f"(expected {len(self._matchers)})"
                )
            return "which matches all elements"
        if len(mismatches) == 1:
            return f"where {mismatches[0]}"
        return f"where:\n{Description(mismatches).bullet_list().indent()}"

    def describe(self, matcher_result: MatcherResult) -> str:
        verb = matcher_result.pick("has", "doesn't have")
        descriptions = Description(
            matcher.describe(MatcherResult.MATCHES) for matcher in self._matchers
        )
        return (
            f"{verb} elements satisfying respectively:\n"
            f"{descriptions.enumerate().indent()}"
        )

    def __repr__(self) -> str:
        return f"PointwiseMatcher({list(self._matchers)!r})"


def pointwise(
    factory: Callable[[Any], Matcher], expected: Iterable[Any]
) -> PointwiseMatcher:
    """Build a matcher applying ``factory`` to each expected value in turn.

    ``pointwise(lt, [2, 3])`` matches ``[1, 2]`` because ``1 < 2`` and
    ``2 < 3``; it does not match ``[1, 3]`` or ``[1]``.
    """
    return PointwiseMatcher(factory(value) for value in expected)
