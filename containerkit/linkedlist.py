"""A doubly linked list with stable cursors."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterable, Iterator, Optional

_LIMIT_MESSAGE = "Limit of the container is exceeded"


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class ListCursor:
    """A position inside a ``LinkedList`` that can move in both directions.

    A cursor keeps pointing at the same element while other elements are
    inserted or erased. The position past the last element is the list's
    end; moving forward from it wraps around to the first element.
    """

    __slots__ = ("_node", "_end")

    def __init__(self, node: _Node, end: _Node) -> None:
        self._node = node
        self._end = end

    def advance(self) -> "ListCursor":
        """Move to the next position and return this cursor."""
        self._node = self._node.next
        return self

    def retreat(self) -> "ListCursor":
        """Move to the previous position and return this cursor."""
        self._node = self._node.prev
        return self

    def value(self) -> Any:
        """Return the element at this position."""
        if self._node is self._end:
            raise IndexError("cursor is past the end of the list")
        return self._node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListCursor):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if self._node is self._end:
            return "ListCursor(<end>)"
        return f"ListCursor({self._node.value!r})"


class LinkedList:
    """A doubly linked list kept as a ring around an end marker."""

    __slots__ = ("_sentinel", "_size")

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._sentinel = _Node()
        self._size = 0
        if items is not None:
            values = list(items)
            if len(values) >= self.max_size():
                raise IndexError(_LIMIT_MESSAGE)
            for value in values:
                self.push_back(value)

    @classmethod
    def filled(cls, n: int, value: Any = None) -> "LinkedList":
        """Create a list of ``n`` copies of ``value``."""
        n = operator.index(n)
        if n < 0 or n >= cls.max_size():
            raise IndexError(_LIMIT_MESSAGE)
        result = cls()
        for _ in range(n):
            result.push_back(value)
        return result

    # Container protocol

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value
            node = node.prev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._size == other._size and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    # Positions and access

    def begin(self) -> ListCursor:
        """Cursor at the first element, or ``end()`` when empty."""
        return ListCursor(self._sentinel.next, self._sentinel)

    def end(self) -> ListCursor:
        """Cursor one past the last element."""
        return ListCursor(self._sentinel, self._sentinel)

    def front(self) -> Any:
        if not self._size:
            raise IndexError("front of an empty list")
        return self._sentinel.next.value

    def back(self) -> Any:
        if not self._size:
            raise IndexError("back of an empty list")
        return self._sentinel.prev.value

    # Capacity

    def empty(self) -> bool:
        return self._size == 0

    @staticmethod
    def max_size() -> int:
        return sys.maxsize // 2

    # Modifiers

    def clear(self) -> None:
        sentinel = self._sentinel
        sentinel.next = sentinel
        sentinel.prev = sentinel
        self._size = 0

    def insert(self, pos: ListCursor, value: Any) -> ListCursor:
        """Insert ``value`` before ``pos`` and return a cursor to it."""
        node = _Node(value)
        self._link_before(pos._node, node)
        return ListCursor(node, self._sentinel)

    def erase(self, pos: ListCursor) -> None:
        """Remove the element at ``pos``; ``end()`` cannot be erased."""
        if pos._node is self._sentinel:
            raise ValueError("pointer being freed was not allocated")
        self._unlink(pos._node)

    def push_back(self, value: Any) -> None:
        self._link_before(self._sentinel, _Node(value))

    def pop_back(self) -> None:
        if not self._size:
            raise IndexError("pop from an empty list")
        self._unlink(self._sentinel.prev)

    def push_front(self, value: Any) -> None:
        self._link_before(self._sentinel.next, _Node(value))

    def pop_front(self) -> None:
        if not self._size:
            raise IndexError("pop from an empty list")
        self._unlink(self._sentinel.next)

    def swap(self, other: "LinkedList") -> None:
        """Exchange contents with ``other``."""
        self._sentinel, other._sentinel = other._sentinel, self._sentinel
        self._size, other._size = other._size, self._size

    def merge(self, other: "LinkedList") -> None:
        """Merge the sorted ``other`` into this sorted list, emptying ``other``.

        Elements of this list come before equal elements of ``other``.
        """
        if other is self:
            return
        current = self._sentinel.next
        while other._size:
            first = other._sentinel.next
            if current is not self._sentinel and not first.value < current.value:
                current = current.next
                continue
            other._unlink(first)
            self._link_before(current, first)

    def splice(self, pos: ListCursor, other: "LinkedList") -> None:
        """Move every element of ``other`` before ``pos``, emptying ``other``."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        if not other._size:
            return
        first = other._sentinel.next
        last = other._sentinel.prev
        count = other._size
        other.clear()
        target = pos._node
        before = target.prev
        before.next = first
        first.prev = before
        last.next = target
        target.prev = last
        self._size += count

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        node = self._sentinel
        while True:
            node.prev, node.next = node.next, node.prev
            node = node.prev
            if node is self._sentinel:
                break

    def unique(self) -> None:
        """Remove consecutive duplicate elements, keeping the first of each run."""
        node = self._sentinel.next
        while node is not self._sentinel and node.next is not self._sentinel:
            if node.next.value == node.value:
                self._unlink(node.next)
            else:
                node = node.next

    def sort(self) -> None:
        """Sort the elements ascending; equal elements keep their order."""
        nodes = []
        node = self._sentinel.next
        while node is not self._sentinel:
            nodes.append(node)
            node = node.next
        nodes.sort(key=lambda item: item.value)
        previous = self._sentinel
        for node in nodes:
            previous.next = node
            node.prev = previous
            previous = node
        previous.next = self._sentinel
        self._sentinel.prev = previous

    def copy(self) -> "LinkedList":
        """Return an independent list with the same elements."""
        return type(self)(self)

    # Internals

    def _link_before(self, target: _Node, node: _Node) -> None:
        before = target.prev
        node.prev = before
        node.next = target
        before.next = node
        target.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node
        node.next = node
        self._size -= 1