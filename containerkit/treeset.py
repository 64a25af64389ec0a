"""An ordered set of unique keys kept in a binary search tree."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, Optional, Tuple


class _Node:
    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: Any = None) -> None:
        self.key = key
        self.parent: Optional[_Node] = None
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class _Tree:
    """The node storage of one set; swapped as a whole between sets."""

    __slots__ = ("root", "size", "end")

    def __init__(self) -> None:
        self.root: Optional[_Node] = None
        self.size = 0
        self.end = _Node()


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _successor(tree: _Tree, node: _Node) -> _Node:
    if node is tree.end:
        # Stepping forward from the end lands on the largest element.
        return tree.end if tree.root is None else _rightmost(tree.root)
    if node.right is not None:
        return _leftmost(node.right)
    while node.parent is not None and node is node.parent.right:
        node = node.parent
    return tree.end if node.parent is None else node.parent


def _predecessor(tree: _Tree, node: _Node) -> _Node:
    if node is tree.end:
        return tree.end if tree.root is None else _rightmost(tree.root)
    if node.left is not None:
        return _rightmost(node.left)
    while node.parent is not None and node is node.parent.left:
        node = node.parent
    return tree.end if node.parent is None else node.parent


class SetCursor:
    """A position inside a ``TreeSet`` that can move in both directions.

    A cursor keeps pointing at the same element while other elements are
    inserted or erased. Moving back from the end reaches the largest
    element, and so does moving forward from the end.
    """

    __slots__ = ("_node", "_tree")

    def __init__(self, node: _Node, tree: _Tree) -> None:
        self._node = node
        self._tree = tree

    def advance(self) -> "SetCursor":
        """Move to the next position and return this cursor."""
        self._node = _successor(self._tree, self._node)
        return self

    def retreat(self) -> "SetCursor":
        """Move to the previous position and return this cursor."""
        self._node = _predecessor(self._tree, self._node)
        return self

    def value(self) -> Any:
        """Return the element at this position."""
        if self._node is self._tree.end:
            raise IndexError("cursor is past the end of the set")
        return self._node.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetCursor):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if self._node is self._tree.end:
            return "SetCursor(<end>)"
        return f"SetCursor({self._node.key!r})"


class TreeSet:
    """A set of unique keys iterated in ascending order."""

    __slots__ = ("_tree",)

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._tree = _Tree()
        if items is not None:
            for item in items:
                self.insert(item)

    # Container protocol

    def __len__(self) -> int:
        return self._tree.size

    def __iter__(self) -> Iterator[Any]:
        tree = self._tree
        if tree.root is None:
            return
        node = _leftmost(tree.root)
        while node is not tree.end:
            yield node.key
            node = _successor(tree, node)

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeSet):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TreeSet({list(self)!r})"

    # Positions

    def begin(self) -> SetCursor:
        """Cursor at the smallest element, or ``end()`` when empty."""
        tree = self._tree
        node = tree.end if tree.root is None else _leftmost(tree.root)
        return SetCursor(node, tree)

    def end(self) -> SetCursor:
        """Cursor one past the largest element."""
        return SetCursor(self._tree.end, self._tree)

    # Capacity

    def empty(self) -> bool:
        return self._tree.root is None

    @staticmethod
    def max_size() -> int:
        return sys.maxsize // 20

    # Modifiers

    def clear(self) -> None:
        self._tree = _Tree()

    def insert(self, value: Any) -> Tuple[SetCursor, bool]:
        """Add ``value`` unless present.

        Returns a cursor to the element with that key and whether it was
        added.
        """
        existing = self._find_node(value)
        if existing is not None:
            return SetCursor(existing, self._tree), False
        node = _Node(value)
        self._attach(node)
        return SetCursor(node, self._tree), True

    def erase(self, pos: SetCursor) -> None:
        """Remove the element at ``pos``; ``end()`` cannot be erased."""
        if pos._tree is not self._tree:
            raise ValueError("cursor does not belong to this set")
        if pos._node is self._tree.end:
            raise ValueError("pointer being freed was not allocated")
        self._detach(pos._node)

    def swap(self, other: "TreeSet") -> None:
        """Exchange contents with ``other``."""
        self._tree, other._tree = other._tree, self._tree

    def merge(self, other: "TreeSet") -> None:
        """Move the elements of ``other`` into this set, emptying ``other``.

        Elements already present here are dropped from ``other``.
        """
        if other is self:
            return
        source = other._tree
        while source.root is not None:
            node = _leftmost(source.root)
            other._detach(node)
            if self._find_node(node.key) is None:
                self._attach(node)

    # Lookup

    def find(self, key: Any) -> SetCursor:
        """Cursor at ``key``, or ``end()`` when absent."""
        node = self._find_node(key)
        return self.end() if node is None else SetCursor(node, self._tree)

    def contains(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def copy(self) -> "TreeSet":
        """Return an independent set with the same elements and shape."""
        clone = TreeSet()
        root = self._tree.root
        if root is None:
            return clone
        pending = [root]
        while pending:
            node = pending.pop()
            clone.insert(node.key)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return clone

    # Internals

    def _find_node(self, key: Any) -> Optional[_Node]:
        current = self._tree.root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def _attach(self, node: _Node) -> None:
        tree = self._tree
        node.parent = node.left = node.right = None
        parent: Optional[_Node] = None
        current = tree.root
        while current is not None:
            parent = current
            current = current.left if node.key < current.key else current.right
        node.parent = parent
        if parent is None:
            tree.root = node
        elif node.key < parent.key:
            parent.left = node
        else:
            parent.right = node
        tree.size += 1

    def _transplant(self, old: _Node, new: Optional[_Node]) -> None:
        parent = old.parent
        if parent is None:
            self._tree.root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def _detach(self, node: _Node) -> None:
        if node.left is None:
            self._transplant(node, node.right)
        elif node.right is None:
            self._transplant(node, node.left)
        else:
            successor = _leftmost(node.right)
            if successor.parent is not node:
                self._transplant(successor, successor.right)
                successor.right = node.right
                successor.right.parent = successor
            self._transplant(node, successor)
            successor.left = node.left
            successor.left.parent = successor
        node.parent = node.left = node.right = None
        self._tree.size -= 1