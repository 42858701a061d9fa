"""A LIFO stack built on the linked list."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

from dsalgo.linked_list import LinkedList

T = TypeVar("T")


class Stack(Generic[T]):
    """Stack whose top is the head of a linked list."""

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._items: LinkedList[T] = LinkedList()
        for value in values if values is not None else ():
            self.push(value)

    def push(self, value: T) -> None:
        """Push ``value`` onto the top of the stack."""
        self._items.insert(value, 0)

    def pop(self) -> T:
        """Remove and return the top value."""
        if self.is_empty():
            raise IndexError("pop from empty stack")
        return self._items.delete(0)

    def peek(self) -> T:
        """Return the top value without removing it."""
        if self.is_empty():
            raise IndexError("peek at empty stack")
        return next(iter(self._items))

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack downwards."""
        return iter(self._items)

    def __str__(self) -> str:
        return str(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"