"""Topological ordering of a directed graph by Kahn's algorithm."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class CycleError(ValueError):
    """Raised when the graph has a cycle; ``order`` holds the vertices ordered before it."""

    def __init__(self, order: list[int]) -> None:
        super().__init__("graph has a cycle; topological sort not possible")
        self.order = order


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the vertices ``0..vertex_count - 1`` so that every edge ``u -> v`` has u first.

    Vertices are released in breadth-first order; ties go to the lower vertex.
    Repeated edges count once.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    successors: list[set[int]] = [set() for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge {u} -> {v} names a vertex outside 0..{vertex_count - 1}")
        successors[u].add(v)

    indegree = [0] * vertex_count
    for targets in successors:
        for v in targets:
            indegree[v] += 1

    ready = deque(v for v, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while ready:
        u = ready.popleft()
        order.append(u)
        for v in sorted(successors[u]):
            indegree[v] -= 1
            if indegree[v] == 0:
                ready.append(v)

    if len(order) != vertex_count:
        raise CycleError(order)
    return order