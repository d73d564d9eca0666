"""Render matcher outcomes as assertion failure reports."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from pointwise.assertions.base import AssertionResult
from pointwise.matchers.base import Matcher, MatcherResult

_LOGGER = logging.getLogger("pointwise.assertions")


def format_failure(expression: str, actual: Any, matcher: Matcher) -> str:
    return (
        f"Value of: {expression}\n"
        f"Expected: {matcher.describe(MatcherResult.MATCHES)}\n"
        f"Actual: {actual!r}, {matcher.explain_match(actual)}"
    )


def verify_that(
    actual: Any,
    matcher: Matcher,
    *,
    expression: str | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check ``actual`` against ``matcher`` and return the result as data.

    One-shot iterators are snapshotted into a list first so that matching and
    explaining both see the same elements.
    """
    logger = logger or _LOGGER
    if isinstance(actual, Iterator):
        actual = list(actual)
    if expression is None:
        expression = repr(actual)

    logger.info(f"Verifying {expression}")
    passed = matcher.matches(actual).is_match
    message = format_failure(expression, actual, matcher)
    logger.info(f"{expression} passed={passed}")
    logger.debug(message)

    return AssertionResult(
        name=f"verify_that:{expression}",
        passed=passed,
        message=message,
        score=1.0 if passed else 0.0,
    )


def assert_that(
    actual: Any,
    matcher: Matcher,
    *,
    expression: str | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Like ``verify_that`` but raise ``AssertionError`` on a non-match."""
    result = verify_that(actual, matcher, expression=expression, logger=logger)
    if not result.passed:
        raise AssertionError(result.message)
    return result
