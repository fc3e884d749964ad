"""Single-source (Dijkstra) and all-pairs (Floyd-Warshall) shortest paths."""

from __future__ import annotations

import math
from collections.abc import Sequence

Number = float


def _square(graph: Sequence[Sequence[Number]]) -> list[list[Number]]:
    rows = [list(row) for row in graph]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def _cell(value: Number) -> str:
    return "INF" if value == math.inf else f"{value:g}" if isinstance(value, float) else str(value)


def dijkstra(graph: Sequence[Sequence[Number]], source: int) -> list[Number]:
    """Return the shortest distance from ``source`` to every vertex.

    ``graph`` is an adjacency matrix in which 0 means no edge. Unreachable
    vertices get ``math.inf``.
    """
    matrix = _square(graph)
    size = len(matrix)
    if not 0 <= source < size:
        raise IndexError(f"source vertex {source} out of range")
    dist: list[Number] = [math.inf] * size
    dist[source] = 0
    pending = set(range(size))
    while pending:
        u = min(pending, key=dist.__getitem__)
        pending.remove(u)
        if dist[u] == math.inf:
            break
        for v, weight in enumerate(matrix[u]):
            if weight and v in pending and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def format_distances(distances: Sequence[Number]) -> str:
    """Render a distance list as a vertex/distance table."""
    lines = ["Vertex \t Distance from Source"]
    lines.extend(f"{vertex} \t\t {_cell(d)}" for vertex, d in enumerate(distances))
    return "\n".join(lines) + "\n"


def floyd_warshall(graph: Sequence[Sequence[Number]]) -> list[list[Number]]:
    """Return the matrix of shortest distances between every pair of vertices.

    Missing edges are given as ``math.inf``.
    """
    dist = _square(graph)
    for k, row_k in enumerate(dist):
        for row in dist:
            through = row[k]
            if through == math.inf:
                continue
            for j, onward in enumerate(row_k):
                if through + onward < row[j]:
                    row[j] = through + onward
    return dist


def format_distance_matrix(matrix: Sequence[Sequence[Number]]) -> str:
    """Render a distance matrix with seven-character columns and INF for no path."""
    lines = ["Shortest distances between every pair of vertices:"]
    lines.extend("".join(f"{_cell(d):>7}" for d in row) for row in matrix)
    return "\n".join(lines) + "\n"