"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from containerkit.linkedlist import LinkedList


class Stack:
    """A LIFO stack stored in a ``LinkedList``."""

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items = LinkedList()
        if items is not None:
            for item in items:
                self.push(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def empty(self) -> bool:
        return self._items.empty()

    def top(self) -> Any:
        """Return the most recently pushed element."""
        return self._items.back()

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.push_back(value)

    def pop(self) -> None:
        """Remove the top element."""
        self._items.pop_back()

    def swap(self, other: "Stack") -> None:
        """Exchange contents with ``other``."""
        self._items.swap(other._items)

    def copy(self) -> "Stack":
        """Return an independent stack with the same elements."""
        return Stack(self._items)