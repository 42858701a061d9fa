"""Depth-first and breadth-first traversal of adjacency-matrix graphs."""

from __future__ import annotations

from typing import List, Sequence, Set

from dsalgo.queue import Queue
from dsalgo.stack import Stack

Graph = Sequence[Sequence[int]]

EXAMPLE_GRAPH: List[List[int]] = [
    [0, 1, 0, 1, 0, 0, 0],
    [1, 0, 1, 1, 0, 1, 1],
    [0, 1, 0, 1, 1, 1, 0],
    [1, 1, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 0, 1],
    [0, 1, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 1, 0, 0],
]


def _check_node(graph: Graph, node: int) -> None:
    if not 0 <= node < len(graph):
        raise IndexError(f"node {node} out of range for {len(graph)} nodes")


def adjacent(graph: Graph, node: int) -> List[int]:
    """Return the nodes connected to ``node``, in ascending order."""
    _check_node(graph, node)
    return [other for other, edge in enumerate(graph[node]) if edge == 1]


def dfs(graph: Graph, start: int) -> List[int]:
    """Return the nodes reachable from ``start`` in depth-first visiting order.

    Neighbours are pushed in ascending order, so the highest is explored first.
    """
    _check_node(graph, start)
    visited: Set[int] = set()
    in_frontier = {start}
    frontier: Stack[int] = Stack([start])
    order: List[int] = []
    while not frontier.is_empty():
        node = frontier.pop()
        order.append(node)
        visited.add(node)
        in_frontier.discard(node)
        for neighbour in adjacent(graph, node):
            if neighbour in visited or neighbour in in_frontier:
                continue
            frontier.push(neighbour)
            in_frontier.add(neighbour)
    return order


def bfs(graph: Graph, start: int) -> List[int]:
    """Return the nodes reachable from ``start`` in breadth-first visiting order."""
    _check_node(graph, start)
    visited: Set[int] = set()
    in_frontier = {start}
    frontier: Queue[int] = Queue([start])
    order: List[int] = []
    while not frontier.is_empty():
        node = frontier.dequeue()
        order.append(node)
        visited.add(node)
        in_frontier.discard(node)
        for neighbour in adjacent(graph, node):
            if neighbour in visited or neighbour in in_frontier:
                continue
            frontier.enqueue(neighbour)
            in_frontier.add(neighbour)
    return order