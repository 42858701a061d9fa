"""A singly linked list holding arbitrary Python values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list with head and tail references.

    Index ``-1`` refers to the end of the list for both insertion and deletion.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values if values is not None else ():
            self.insert(value)

    def _node_at(self, index: int) -> _Node[T]:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, value: T, index: int = -1) -> None:
        """Insert ``value`` before position ``index``; ``-1`` appends."""
        if index < -1 or index > self._size:
            raise IndexError(f"insert index {index} out of range for size {self._size}")

        node = _Node(value)
        if self._head is None or self._tail is None:
            self._head = self._tail = node
        elif index == 0:
            node.next = self._head
            self._head = node
        elif index == -1 or index == self._size:
            self._tail.next = node
            self._tail = node
        else:
            previous = self._node_at(index - 1)
            node.next = previous.next
            previous.next = node
        self._size += 1

    def delete(self, index: int = -1) -> T:
        """Remove and return the value at ``index``; ``-1`` removes the last item."""
        if self._size == 0 or index < -1 or index >= self._size:
            raise IndexError(f"delete index {index} out of range for size {self._size}")

        if index == -1:
            index = self._size - 1

        if index == 0:
            assert self._head is not None
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(index - 1)
            node = previous.next
            assert node is not None
            previous.next = node.next
            if node is self._tail:
                self._tail = previous

        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        if self._head is None:
            raise IndexError("cannot reverse an empty list")

        previous: Optional[_Node[T]] = None
        current = self._head
        self._tail = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def search(self, value: Any, key: Optional[Callable[[T], Any]] = None) -> Optional[T]:
        """Return the first stored item matching ``value``, or ``None``.

        When ``key`` is given, an item matches if ``key(item) == value``.
        """
        for item in self:
            candidate = key(item) if key is not None else item
            if candidate == value:
                return item
        return None

    def map(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every item from head to tail."""
        for item in self:
            func(item)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"