"""Graph traversal, reachability and minimum spanning trees on small graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from math import inf


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two vertices."""

    source: int
    dest: int
    weight: int = 1


Matrix = Sequence[Sequence[int]]


def _as_edge(edge: Edge | Sequence[int]) -> Edge:
    return edge if isinstance(edge, Edge) else Edge(*edge)


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"vertex {vertex} is outside 0..{n - 1}")


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _neighbours(matrix: Matrix, vertex: int) -> Iterator[int]:
    return (
        other
        for other, weight in enumerate(matrix[vertex])
        if weight and other != vertex
    )


def adjacency_matrix(n: int, edges: Iterable[Edge | Sequence[int]]) -> list[list[int]]:
    """Build a symmetric ``n`` by ``n`` matrix; edges are ``Edge``, ``(a, b)`` or ``(a, b, w)``."""
    if n < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * n for _ in range(n)]
    for edge in map(_as_edge, edges):
        _check_vertex(edge.source, n)
        _check_vertex(edge.dest, n)
        if edge.weight == 0:
            raise ValueError("a zero weight cannot be told apart from a missing edge")
        matrix[edge.source][edge.dest] = edge.weight
        matrix[edge.dest][edge.source] = edge.weight
    return matrix


def depth_first(matrix: Matrix, start: int) -> list[int]:
    """Return vertices in depth-first order from ``start``, lower neighbours first."""
    n = _size(matrix)
    _check_vertex(start, n)
    visited = [False] * n
    visited[start] = True
    order = [start]
    stack = [_neighbours(matrix, start)]
    while stack:
        for nxt in stack[-1]:
            if not visited[nxt]:
                visited[nxt] = True
                order.append(nxt)
                stack.append(_neighbours(matrix, nxt))
                break
        else:
            stack.pop()
    return order


def breadth_first(matrix: Matrix, start: int) -> list[int]:
    """Return vertices in breadth-first order from ``start``, lower neighbours first."""
    n = _size(matrix)
    _check_vertex(start, n)
    visited = [False] * n
    visited[start] = True
    order: list[int] = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for nxt in _neighbours(matrix, vertex):
            if not visited[nxt]:
                visited[nxt] = True
                queue.append(nxt)
    return order


def has_path(matrix: Matrix, start: int, end: int) -> bool:
    """Tell whether ``end`` can be reached from ``start``."""
    _check_vertex(end, _size(matrix))
    return end in breadth_first(matrix, start)


def kruskal(n: int, edges: Iterable[Edge | Sequence[int]]) -> list[Edge]:
    """Return a minimum spanning tree's edges in the order Kruskal's method picks them."""
    if n < 0:
        raise ValueError("vertex count must not be negative")
    candidates = [_as_edge(edge) for edge in edges]
    for edge in candidates:
        _check_vertex(edge.source, n)
        _check_vertex(edge.dest, n)
    parent = list(range(n))

    def root(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    chosen: list[Edge] = []
    for edge in sorted(candidates, key=lambda e: e.weight):
        if len(chosen) >= n - 1:
            break
        a, b = root(edge.source), root(edge.dest)
        if a != b:
            parent[b] = a
            chosen.append(edge)
    if n and len(chosen) < n - 1:
        raise ValueError("graph is not connected")
    return chosen


def prim(matrix: Matrix, start: int = 0) -> list[Edge]:
    """Return a minimum spanning tree's edges in the order Prim's method adds vertices."""
    n = _size(matrix)
    _check_vertex(start, n)
    distance: list[float] = [inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    distance[start] = 0
    chosen: list[Edge] = []
    for _ in range(n):
        outside = [v for v in range(n) if not in_tree[v] and distance[v] < inf]
        if not outside:
            raise ValueError("graph is not connected")
        vertex = min(outside, key=lambda v: distance[v])
        in_tree[vertex] = True
        origin = parent[vertex]
        if origin is not None:
            chosen.append(Edge(origin, vertex, matrix[origin][vertex]))
        for other in _neighbours(matrix, vertex):
            weight = matrix[vertex][other]
            if not in_tree[other] and weight < distance[other]:
                distance[other] = weight
                parent[other] = vertex
    return chosen