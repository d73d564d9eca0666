"""Lockstep iteration over two iterables of possibly different length."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

L = TypeVar("L")
R = TypeVar("R")

_EXHAUSTED = object()


class PairedWalker(Iterator[tuple[L, R]], Generic[L, R]):
    """Yield ``(left, right)`` pairs while both sides have elements.

    Unlike the builtin ``zip``, the walker remembers how iteration ended, so
    callers can ask afterwards whether the two sides differed in length
    without computing either length up front.

    A walker supports a single forward pass and cannot be restarted.
    """

    def __init__(self, left: Iterable[L], right: Iterable[R]):
        self._left = iter(left)
        self._right = iter(right)
        self._left_consumed = 0
        self._finished = False
        self._size_mismatch = False

    def __iter__(self) -> PairedWalker[L, R]:
        return self

    def __next__(self) -> tuple[L, R]:
        if self._finished:
            raise StopIteration

        left = next(self._left, _EXHAUSTED)
        right = next(self._right, _EXHAUSTED)

        if left is not _EXHAUSTED and right is not _EXHAUSTED:
            self._left_consumed += 1
            return left, right

        self._finished = True
        if left is not _EXHAUSTED:
            # Right side ran out first; the probed left element still counts.
            self._left_consumed += 1
            self._size_mismatch = True
        elif right is not _EXHAUSTED:
            self._size_mismatch = True
        raise StopIteration

    def _finish(self) -> None:
        for _ in self:
            pass

    def has_size_mismatch(self) -> bool:
        """Whether one side had elements left when the other ran out.

        If the caller stopped iterating early, the remaining pairs are
        consumed first.
        """
        self._finish()
        return self._size_mismatch

    def left_size(self) -> int:
        """Total number of elements on the left side.

        Drains whatever remains of the left iterator.
        """
        self._finish()
        for _ in self._left:
            self._left_consumed += 1
        return self._left_consumed


def zip_paired(left: Iterable[L], right: Iterable[R]) -> PairedWalker[L, R]:
    """Walk ``left`` and ``right`` in lockstep, tracking size mismatches."""
    return PairedWalker(left, right)
