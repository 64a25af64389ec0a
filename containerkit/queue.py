"""A first-in, first-out queue."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from containerkit.linkedlist import LinkedList


class Queue:
    """A FIFO queue stored in a ``LinkedList``."""

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items = LinkedList()
        if items is not None:
            for item in items:
                self.push(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def empty(self) -> bool:
        return self._items.empty()

    def front(self) -> Any:
        """Return the oldest element."""
        return self._items.front()

    def back(self) -> Any:
        """Return the newest element."""
        return self._items.back()

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.push_back(value)

    def pop(self) -> None:
        """Remove the front element."""
        self._items.pop_front()

    def swap(self, other: "Queue") -> None:
        """Exchange contents with ``other``."""
        self._items.swap(other._items)

    def copy(self) -> "Queue":
        """Return an independent queue with the same elements."""
        return Queue(self._items)