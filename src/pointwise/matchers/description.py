"""List formatting helpers for multi-line matcher descriptions."""

from __future__ import annotations

from typing import Iterable, Iterator

_INDENT = "  "


def _prefix_item(item: str, prefix: str) -> str:
    first, *rest = item.split("\n")
    padding = " " * len(prefix)
    return "\n".join([f"{prefix}{first}", *(f"{padding}{line}" if line else line for line in rest)])


class Description:
    """An ordered, immutable collection of description items.

    Each formatting method returns a new ``Description``, so calls chain::

        str(Description(["a", "b"]).bullet_list().indent())
        # '  * a\\n  * b'
    """

    def __init__(self, items: Iterable[str] = ()):
        self._items = tuple(str(item) for item in items)

    def bullet_list(self) -> Description:
        """Prefix every item with ``* ``."""
        return Description(_prefix_item(item, "* ") for item in self._items)

    def enumerate(self) -> Description:
        """Prefix every item with its zero-based position, e.g. ``0. ``."""
        return Description(
            _prefix_item(item, f"{index}. ") for index, item in enumerate(self._items)
        )

    def indent(self) -> Description:
        """Indent every non-empty line of every item by two spaces."""
        return Description(
            "\n".join(f"{_INDENT}{line}" if line else line for line in item.split("\n"))
            for item in self._items
        )

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Description):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        return "\n".join(self._items)

    def __repr__(self) -> str:
        return f"Description({list(self._items)!r})"
