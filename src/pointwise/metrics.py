"""Aggregate statistics over a run's assertion results."""

from __future__ import annotations

from typing import Any

from pointwise.assertions.base import AssertionResult


def summarize(results: list[AssertionResult]) -> dict[str, Any]:
    """Compute pass/fail counts, pass rate and weighted score (both in percent)."""
    pass_count = sum(1 for r in results if r.passed)
    fail_count = len(results) - pass_count
    pass_rate = pass_count / len(results) * 100 if results else 0.0

    # Weighted score: sum(weight_i * score_i) / sum(weight_i) * 100
    total_weight = sum(r.weight for r in results)
    if total_weight > 0:
        weighted_score = sum(r.weight * r.score for r in results) / total_weight * 100
    else:
        weighted_score = 0.0

    return {
        "pass_count": pass_count,
        "fail_count": fail_count,
        "pass_rate": round(pass_rate, 2),
        "weighted_score": round(weighted_score, 2),
        "all_passed": fail_count == 0,
    }
