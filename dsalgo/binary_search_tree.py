"""An unbalanced binary search tree of distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional


@dataclass
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _delete(node: Optional[_Node], value: Any) -> Optional[_Node]:
    """Delete ``value`` from the subtree and return the new subtree root."""
    if node is None:
        raise KeyError(value)
    if value < node.value:
        node.left = _delete(node.left, value)
        return node
    if value > node.value:
        node.right = _delete(node.right, value)
        return node

    if node.left is None:
        return node.right
    if node.right is None:
        return node.left

    # Two children: take the in-order successor's value, then remove it.
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.value = successor.value
    node.right = _delete(node.right, successor.value)
    return node


class BinarySearchTree:
    """Binary search tree; duplicate values are rejected."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values if values is not None else ():
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value``; raise ``ValueError`` if it is already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            elif value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            else:
                raise ValueError(f"duplicate value {value!r}")
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove ``value``; raise ``KeyError`` if it is not stored."""
        self._root = _delete(self._root, value)
        self._size -= 1

    def preorder(self) -> Iterator[Any]:
        """Yield stored values in root, left, right order."""
        stack: List[_Node] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def to_array(self) -> List[Optional[Any]]:
        """Return the heap-style array form of the tree, sized to its item count.

        The node at slot ``i`` has children at ``2i + 1`` and ``2i + 2``.
        Slots without a node hold ``None``; nodes whose slot falls past the
        end of the array are left out.
        """
        array: List[Optional[Any]] = [None] * self._size

        def fill(node: Optional[_Node], index: int) -> None:
            if node is None:
                return
            array[index] = node.value
            for child, child_index in ((node.left, 2 * index + 1), (node.right, 2 * index + 2)):
                if child_index < self._size:
                    fill(child, child_index)

        if self._size:
            fill(self._root, 0)
        return array

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.preorder())!r})"