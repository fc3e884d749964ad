"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: int


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning tree (or forest), in the order chosen."""
    parent = list(range(vertex_count))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    ordered = sorted(edges, key=lambda edge: edge.weight)
    for edge in ordered:
        for vertex in (edge.u, edge.v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"edge {edge} names vertex outside 0..{vertex_count - 1}")

    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) >= vertex_count - 1:
            break
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            parent[root_u] = root_v
            tree.append(edge)
    return tree


def prim(graph: Sequence[Sequence[int]]) -> list[Edge]:
    """Return a minimum spanning tree of a connected graph given as an adjacency matrix.

    A weight of 0 means no edge. Each vertex other than 0 contributes one edge
    from its parent in the tree.
    """
    matrix = [list(row) for row in graph]
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []
    key = [math.inf] * size
    parent: list[int | None] = [None] * size
    key[0] = 0
    outside = set(range(size))
    while outside:
        u = min(outside, key=key.__getitem__)
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        outside.remove(u)
        for v, weight in enumerate(matrix[u]):
            if weight and v in outside and weight < key[v]:
                parent[v] = u
                key[v] = weight
    tree = []
    for v in range(1, size):
        p = parent[v]
        assert p is not None
        tree.append(Edge(p, v, matrix[v][p]))
    return tree


def tree_cost(edges: Iterable[Edge]) -> int:
    """Return the total weight of ``edges``."""
    return sum(edge.weight for edge in edges)


def format_tree(edges: Sequence[Edge]) -> str:
    """Render tree edges as an edge/weight table followed by the total cost."""
    lines = ["Edge \tWeight"]
    lines.extend(f"{e.u} - {e.v} \t{e.weight}" for e in edges)
    lines.append(f"Minimum Cost of Spanning Tree: {tree_cost(edges)}")
    return "\n".join(lines) + "\n"