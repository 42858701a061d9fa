"""A FIFO queue built on the linked list."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

from dsalgo.linked_list import LinkedList

T = TypeVar("T")


class Queue(Generic[T]):
    """Queue whose front is the head of a linked list."""

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._items: LinkedList[T] = LinkedList(values)

    def enqueue(self, value: T) -> None:
        """Add ``value`` to the back of the queue."""
        self._items.insert(value, -1)

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        return self._items.delete(0)

    def peek(self) -> T:
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("peek at empty queue")
        return next(iter(self._items))

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back."""
        return iter(self._items)

    def __str__(self) -> str:
        return str(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"