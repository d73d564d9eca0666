"""Evaluate configured pointwise checks."""

from __future__ import annotations

import logging

from pointwise.assertions.base import AssertionResult
from pointwise.assertions.verify import verify_that
from pointwise.config import CheckConfig
from pointwise.matchers.registry import build_pointwise


def evaluate_check(check: CheckConfig, *, logger: logging.Logger) -> AssertionResult:
    """Verify a single check's ``actual`` values against its matchers."""
    logger.info(
        f"Evaluating check '{check.name}': pointwise({check.pointwise.value}, "
        f"{check.expected!r}){' negated' if check.negate else ''}"
    )

    matcher = build_pointwise(check.pointwise.value, check.expected, negate=check.negate)
    result = verify_that(check.actual, matcher, expression=check.name, logger=logger)

    return AssertionResult(
        name=f"pointwise:{check.name}",
        passed=result.passed,
        message=result.message,
        score=result.score,
        weight=check.weight,
    )
