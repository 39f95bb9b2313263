"""
Navigation stack: the back-stack of interface screens.

Generic over the screen type; the stack never looks inside its elements.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from .errors import EmptyStackError

S = TypeVar("S")


class NavigationStack(Generic[S]):
    """Last-in-first-out stack of screens. Depth is unbounded."""

    def __init__(self) -> None:
        self._items: list[S] = []

    def push(self, state: S) -> None:
        self._items.append(state)

    def pop(self) -> S:
        """Remove and return the top. Popping an empty stack is a caller bug."""
        if not self._items:
            raise EmptyStackError("Cannot pop an empty navigation stack")
        return self._items.pop()

    def replace_top(self, state: S) -> S:
        """Swap the top for ``state`` without growing history; returns the old top."""
        if not self._items:
            raise EmptyStackError("Cannot replace the top of an empty navigation stack")
        previous = self._items[-1]
        self._items[-1] = state
        return previous

    def peek(self) -> S | None:
        return self._items[-1] if self._items else None

    def can_go_back(self) -> bool:
        """True when popping would still leave a screen to show."""
        return len(self._items) > 1

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[S]:
        """Bottom to top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"NavigationStack(depth={len(self._items)})"
