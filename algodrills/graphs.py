"""Breadth-first and depth-first graph traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


class Graph:
    """A directed graph on vertices ``0 .. vertices - 1`` held as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} out of range")

    def add_edge(self, v: int, w: int) -> None:
        """Add a directed edge from ``v`` to ``w``."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def bfs(self, source: int) -> list[int]:
        """Return the vertices reachable from ``source`` in breadth-first order."""
        self._check(source)
        visited = {source}
        order: list[int] = []
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


def dfs_adjacency_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first order from ``start`` over a 0/1 adjacency matrix.

    Neighbours are tried in increasing index order; self loops are ignored.
    """
    n = len(matrix)
    if not 0 <= start < n:
        raise ValueError(f"vertex {start} out of range")
    visited = {start}
    order = [start]
    stack = [(start, iter(range(n)))]
    while stack:
        vertex, candidates = stack[-1]
        for candidate in candidates:
            if candidate != vertex and matrix[vertex][candidate] == 1 and candidate not in visited:
                visited.add(candidate)
                order.append(candidate)
                stack.append((candidate, iter(range(n))))
                break
        else:
            stack.pop()
    return order


def dfs_components(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Depth-first order over every component of an undirected graph.

    Vertices are numbered ``1 .. n``; components are started from the lowest
    unvisited vertex, and neighbours are tried in the order edges were given.
    """
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for v, u in edges:
        if not (1 <= v <= n and 1 <= u <= n):
            raise ValueError(f"edge ({v}, {u}) out of range")
        adjacency[v].append(u)
        adjacency[u].append(v)

    visited = [False] * (n + 1)
    order: list[int] = []
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        order.append(root)
        stack = [iter(adjacency[root])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
    return order