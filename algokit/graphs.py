"""Graph algorithms on adjacency matrices: Hamiltonian cycle, Prim's MST, TSP."""

from __future__ import annotations

import functools
import math
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _square_size(graph: Matrix) -> int:
    size = len(graph)
    if size == 0 or any(len(row) != size for row in graph):
        raise ValueError("graph must be a non-empty square matrix")
    return size


def hamiltonian_cycle(graph: Matrix) -> list[int] | None:
    """Return a Hamiltonian cycle starting and ending at vertex 0, or None."""
    size = _square_size(graph)
    path = [0]

    def extend() -> bool:
        if len(path) == size:
            return bool(graph[path[-1]][path[0]])
        for vertex in range(1, size):
            if graph[path[-1]][vertex] and vertex not in path:
                path.append(vertex)
                if extend():
                    return True
                path.pop()
        return False

    return [*path, path[0]] if extend() else None


def prim_mst(graph: Matrix) -> list[tuple[int, int, int]]:
    """Return the edges ``(parent, vertex, weight)`` of a minimum spanning tree.

    Zero entries mean no edge. Raises ValueError if the graph is not connected.
    """
    size = _square_size(graph)
    key = [math.inf] * size
    parent = [-1] * size
    in_tree = [False] * size
    key[0] = 0
    for _ in range(size - 1):
        candidates = [v for v in range(size) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    if any(k == math.inf for k in key):
        raise ValueError("graph is not connected")
    return [(parent[v], v, graph[v][parent[v]]) for v in range(1, size)]


def format_mst(edges: Sequence[tuple[int, int, int]]) -> str:
    """Render MST edges as a table with an ``Edge   Weight`` header."""
    lines = ["Edge   Weight\n"]
    lines.extend(f"{u} - {v}    {weight}\n" for u, v, weight in edges)
    return "".join(lines)


def tsp_min_distance(distances: Matrix) -> int:
    """Return the length of the shortest tour from city 0 through all cities and back."""
    size = _square_size(distances)
    complete = (1 << size) - 1

    @functools.lru_cache(maxsize=None)
    def tour(visited: int, position: int) -> int:
        if visited == complete:
            return distances[position][0]
        return min(
            distances[position][city] + tour(visited | (1 << city), city)
            for city in range(size)
            if not visited & (1 << city)
        )

    return tour(1, 0)