"""A probabilistic skip list of ordered values."""

from __future__ import annotations

import random
from typing import Any, Iterable, Iterator, List, Optional

MAX_LEVELS = 16


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, levels: int) -> None:
        self.value = value
        self.next: List[Optional[_Node]] = [None] * levels


class SkipList:
    """Sorted skip list; each new value is promoted one level per coin flip.

    Equal values are kept and placed after those already stored.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._head = _Node(None, MAX_LEVELS)
        self._height = 0
        self._size = 0
        for value in values if values is not None else ():
            self.insert(value)

    def _random_level(self) -> int:
        level = 1
        while level < MAX_LEVELS and self._rng.randrange(2) == 1:
            level += 1
        return level

    def insert(self, value: Any) -> None:
        """Insert ``value`` in sorted position."""
        level = self._random_level()
        self._height = max(self._height, level)
        node = _Node(value, level)
        current = self._head
        for layer in reversed(range(self._height)):
            following = current.next[layer]
            while following is not None and following.value <= value:
                current = following
                following = current.next[layer]
            if layer < level:
                node.next[layer] = following
                current.next[layer] = node
        self._size += 1

    def search(self, value: Any) -> bool:
        """Return whether ``value`` is stored."""
        current = self._head
        for layer in reversed(range(self._height)):
            following = current.next[layer]
            while following is not None and following.value < value:
                current = following
                following = current.next[layer]
            if following is not None and following.value == value:
                return True
        return False

    def levels(self) -> List[List[Any]]:
        """Return the values of each level, top level first."""
        result = []
        for layer in reversed(range(self._height)):
            values = []
            node = self._head.next[layer]
            while node is not None:
                values.append(node.value)
                node = node.next[layer]
            result.append(values)
        return result

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next[0]
        while node is not None:
            yield node.value
            node = node.next[0]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"