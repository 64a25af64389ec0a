"""A growable array with an explicit capacity."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterable, Iterator, List, Optional

_INITIAL_CAPACITY = 8
_GROWTH_FACTOR = 1.618


class Vector:
    """A sequence that tracks its capacity and grows by the golden ratio.

    Positions are integer indices; ``len(vector)`` is the position one past
    the last element.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: List[Any] = [] if items is None else list(items)
        self._capacity = len(self._items)

    @classmethod
    def filled(cls, n: int, value: Any = None) -> "Vector":
        """Create a vector of ``n`` copies of ``value``."""
        n = operator.index(n)
        if n < 0:
            raise ValueError("vector size must not be negative")
        return cls([value] * n)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, pos: int) -> Any:
        return self._items[operator.index(pos)]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._items[operator.index(pos)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    # Element access

    def at(self, pos: int) -> Any:
        """Return the element at ``pos``, checking bounds."""
        pos = operator.index(pos)
        if not 0 <= pos < len(self._items):
            raise IndexError("accessing vector element out of range")
        return self._items[pos]

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of an empty vector")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of an empty vector")
        return self._items[-1]

    # Capacity

    def empty(self) -> bool:
        return not self._items

    def max_size(self) -> int:
        return sys.maxsize

    def capacity(self) -> int:
        return self._capacity

    def reserve(self, size: int) -> None:
        """Raise the capacity to ``size``; a smaller value changes nothing."""
        size = operator.index(size)
        if size > self._capacity:
            self._capacity = size

    def shrink_to_fit(self) -> None:
        self._capacity = len(self._items)

    # Modifiers

    def assign(self, items: Iterable[Any]) -> None:
        """Replace the contents with ``items``, keeping a larger capacity."""
        new_items = list(items)
        self._items = []
        self.reserve(len(new_items))
        self._items = new_items

    def clear(self) -> None:
        """Remove every element; the capacity is kept."""
        self._items.clear()

    def insert(self, pos: int, value: Any) -> int:
        """Insert ``value`` before ``pos`` and return its position."""
        pos = self._check_insert_position(pos)
        if pos == len(self._items):
            self.push_back(value)
            return len(self._items) - 1
        self._expand()
        self._items.insert(pos, value)
        return pos

    def erase(self, pos: int) -> None:
        """Remove the element at ``pos``."""
        pos = operator.index(pos)
        if not 0 <= pos < len(self._items):
            raise IndexError("erase position out of range")
        del self._items[pos]

    def push_back(self, value: Any) -> None:
        self._expand()
        self._items.append(value)

    def pop_back(self) -> None:
        if not self._items:
            raise IndexError("pop from an empty vector")
        self._items.pop()

    def swap(self, other: "Vector") -> None:
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def insert_many(self, pos: int, *args: Any) -> int:
        """Insert ``args`` in order before ``pos``; return the first position."""
        pos = self._check_insert_position(pos)
        self._expand(len(args))
        for offset, value in enumerate(args):
            self.insert(pos + offset, value)
        return pos

    def insert_many_back(self, *args: Any) -> None:
        """Append ``args`` in order."""
        self._expand(len(args))
        for value in args:
            self.push_back(value)

    def copy(self) -> "Vector":
        """Return an independent vector with the same contents and capacity."""
        clone = Vector(self._items)
        clone._capacity = self._capacity
        return clone

    # Internals

    def _check_insert_position(self, pos: int) -> int:
        pos = operator.index(pos)
        if not 0 <= pos <= len(self._items):
            raise IndexError("insert position out of range")
        return pos

    def _expand(self, incoming: int = 1) -> None:
        needed = len(self._items) + incoming
        if self._capacity > needed:
            return
        if self._capacity == 0:
            self._capacity = _INITIAL_CAPACITY
        while self._capacity < needed:
            self._capacity = 1 + int(_GROWTH_FACTOR * self._capacity)