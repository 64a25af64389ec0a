# containerkit

Container types that behave like the classic standard-library containers:
explicit capacity, bounds-checked access, cursors that step forwards and
backwards, and in-place merge, splice, reverse, unique and sort.

The package is pure Python and has no dependencies.

## Installation

```
pip install containerkit
```

To run the tests as well:

```
pip install "containerkit[test]"
pytest
```

## What is included

| Module | Class | Description |
| --- | --- | --- |
| `containerkit.vector` | `Vector` | Growable sequence that tracks its capacity and grows by about 1.618 |
| `containerkit.array` | `FixedArray` | Sequence whose length is fixed when it is created |
| `containerkit.linkedlist` | `LinkedList`, `ListCursor` | Doubly linked list with merge, splice, reverse, unique and sort |
| `containerkit.treeset` | `TreeSet`, `SetCursor` | Set of unique keys kept in a binary search tree, iterated in ascending order |
| `containerkit.queue` | `Queue` | First-in, first-out queue stored in a `LinkedList` |
| `containerkit.stack` | `Stack` | Last-in, first-out stack stored in a `LinkedList` |

## Examples

```python
from containerkit.array import FixedArray
from containerkit.linkedlist import LinkedList
from containerkit.queue import Queue
from containerkit.stack import Stack
from containerkit.treeset import TreeSet
from containerkit.vector import Vector

vec = Vector([1, 2, 3])
vec.insert_many(1, 10, 11)
print(list(vec))             # [1, 10, 11, 2, 3]
vec.reserve(20)
print(vec.capacity())        # 20
vec.shrink_to_fit()
print(vec.capacity())        # 5

arr = FixedArray(3, [1, 2, 3])
arr.fill(0)
print(list(arr))             # [0, 0, 0]
# arr.at(5) raises IndexError; FixedArray(3, [1, 2]) raises ValueError

items = LinkedList([3, 1, 2, 2])
items.sort()
items.unique()
print(list(items))           # [1, 2, 3]

keys = TreeSet([5, 1, 3])
print(list(keys))            # [1, 3, 5]
cursor, added = keys.insert(3)
print(added)                 # False
print(keys.find(4) == keys.end())  # True

queue = Queue([1, 2, 3])
queue.pop()
print(queue.front())         # 2

stack = Stack([1, 2, 3])
stack.pop()
print(stack.top())           # 2
```

## Positions and cursors

`Vector` uses integer indices as positions: `insert(pos, value)` and
`insert_many(pos, *values)` insert before `pos` (which may equal `len()`),
and return the index of the first inserted element.

`LinkedList` and `TreeSet` hand out cursors from `begin()`, `end()`,
`insert()` and, for the set, `find()`. A cursor moves with `advance()` and
`retreat()` (both return the cursor), reads its element with `value()`, and
compares equal to another cursor at the same position. A cursor stays on
its element while other elements are inserted or erased. Calling `value()`
on `end()` raises `IndexError`, and `erase(end())` raises `ValueError`.

## Errors

- Bounds-checked access (`at`, `front`, `back`) and popping from an empty
  container raise `IndexError`.
- `LinkedList.filled(n)` and `LinkedList(items)` raise `IndexError` with
  "Limit of the container is exceeded" when the size is negative or too
  large.
- `FixedArray.swap` between arrays of different sizes raises `ValueError`.

## What this package does not do

There is no ordered key-value map and no multiset that allows repeated
keys. `TreeSet` does not rebalance itself: it is a plain binary search tree,
so inserting keys in sorted order gives it the depth of a list, and it has
no lower- or upper-bound queries.