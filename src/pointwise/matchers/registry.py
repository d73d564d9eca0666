"""Lookup of matcher factories by name, for config-driven checks."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from pointwise.matchers.base import Matcher
from pointwise.matchers.comparison import eq, ge, gt, le, lt, ne
from pointwise.matchers.logical import not_
from pointwise.matchers.pointwise_matcher import pointwise

MATCHER_FACTORIES: dict[str, Callable[[Any], Matcher]] = {
    "eq": eq,
    "ne": ne,
    "lt": lt,
    "le": le,
    "gt": gt,
    "ge": ge,
}


def build_pointwise(name: str, expected: Iterable[Any], negate: bool = False) -> Matcher:
    """Build ``pointwise(<name>, expected)``, optionally wrapped in ``not_``."""
    try:
        factory = MATCHER_FACTORIES[name]
    except KeyError:
        raise ValueError(f"Unknown matcher '{name}'") from None

    matcher: Matcher = pointwise(factory, expected)
    if negate:
        matcher = not_(matcher)
    return matcher
