"""Matchers and the pointwise sequence matcher."""

from pointwise.matchers.base import Matcher, MatcherResult
from pointwise.matchers.comparison import eq, ge, gt, le, lt, ne
from pointwise.matchers.description import Description
from pointwise.matchers.logical import not_
from pointwise.matchers.pointwise_matcher import PointwiseMatcher, pointwise
from pointwise.matchers.registry import MATCHER_FACTORIES, build_pointwise
from pointwise.matchers.zipped import PairedWalker, zip_paired

__all__ = [
    "Description",
    "MATCHER_FACTORIES",
    "Matcher",
    "MatcherResult",
    "PairedWalker",
    "PointwiseMatcher",
    "build_pointwise",
    "eq",
    "ge",
    "gt",
    "le",
    "lt",
    "ne",
    "not_",
    "pointwise",
    "zip_paired",
]
