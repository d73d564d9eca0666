"""Base data structures for the assertion system."""

from dataclasses import dataclass


@dataclass
class AssertionResult:
    """Result of verifying a value against a matcher.

    Attributes:
        name: Identifier for the assertion (e.g. "pointwise:bounded").
        passed: Whether the value satisfied the matcher.
        message: Failure report with "Value of / Expected / Actual" framing.
            Produced for passing assertions too, for debug logging.
        score: 1.0 (pass) or 0.0 (fail).
        weight: Relative importance of this assertion for weighted score
            computation. Defaults to 1.0 (equal weight).
    """

    name: str
    passed: bool
    message: str
    score: float = 0.0
    weight: float = 1.0
