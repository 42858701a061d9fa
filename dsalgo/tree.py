"""A plain binary tree built from linked nodes, with depth-first traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class Node:
    """A binary tree node holding a value and two optional children."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def generate_tree() -> Node:
    """Return a fixed seven-node example tree rooted at 76."""
    return Node(
        76,
        left=Node(50, left=Node(39), right=Node(60)),
        right=Node(90, left=Node(87), right=Node(124)),
    )


def add_node_left(root: Node, value: Any) -> Node:
    """Attach a new node below the leftmost node of ``root`` and return it."""
    node = Node(value)
    current = root
    while current.left is not None:
        current = current.left
    current.left = node
    return node


def add_node_right(root: Node, value: Any) -> Node:
    """Attach a new node below the rightmost node of ``root`` and return it."""
    node = Node(value)
    current = root
    while current.right is not None:
        current = current.right
    current.right = node
    return node


def inorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield values in left, root, right order."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.value
    yield from inorder(root.right)


def preorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield values in root, left, right order."""
    if root is None:
        return
    yield root.value
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield values in left, right, root order."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.value