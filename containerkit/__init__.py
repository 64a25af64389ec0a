"""Container types: vectors, fixed arrays, linked lists, tree sets, queues and stacks."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "linkedlist",
    "queue",
    "stack",
    "treeset",
    "vector",
]