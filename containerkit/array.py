"""A fixed-size array."""

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator, Optional


class FixedArray:
    """A sequence whose length is fixed when it is created."""

    __slots__ = ("_data",)

    def __init__(self, size: int, items: Optional[Iterable[Any]] = None) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError("array size must not be negative")
        if items is None:
            self._data = [None] * size
            return
        data = list(items)
        if len(data) != size:
            raise ValueError("Initializer list size doesn't match array size")
        self._data = data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, pos: int) -> Any:
        return self._data[operator.index(pos)]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._data[operator.index(pos)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedArray):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FixedArray({len(self._data)}, {self._data!r})"

    def at(self, pos: int) -> Any:
        """Return the element at ``pos``, checking bounds."""
        pos = operator.index(pos)
        if not 0 <= pos < len(self._data):
            raise IndexError("pos out of range")
        return self._data[pos]

    def empty(self) -> bool:
        return not self._data

    def max_size(self) -> int:
        return len(self._data)

    def front(self) -> Any:
        if not self._data:
            raise IndexError("front of an empty array")
        return self._data[0]

    def back(self) -> Any:
        if not self._data:
            raise IndexError("back of an empty array")
        return self._data[-1]

    def swap(self, other: "FixedArray") -> None:
        """Exchange contents with another array of the same size."""
        if len(other) != len(self):
            raise ValueError("cannot swap arrays of different sizes")
        self._data, other._data = other._data, self._data

    def fill(self, value: Any) -> None:
        """Set every element to ``value``."""
        self._data = [value] * len(self._data)

    def copy(self) -> "FixedArray":
        return FixedArray(len(self._data), self._data)