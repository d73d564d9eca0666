"""Assertion reporting on top of matchers."""

from pointwise.assertions.base import AssertionResult
from pointwise.assertions.checks import evaluate_check
from pointwise.assertions.verify import assert_that, verify_that

__all__ = ["AssertionResult", "assert_that", "evaluate_check", "verify_that"]
