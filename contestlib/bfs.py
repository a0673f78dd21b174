"""Breadth-first search on graphs whose edges weigh 0 or 1."""

from __future__ import annotations

from collections import deque
from typing import Iterable, NamedTuple

INF = 10**9 + 5


class Edge(NamedTuple):
    node: int
    weight: int


class ZeroOneBFS:
    """0-1 BFS; after :meth:`bfs`, ``dist`` and ``parent`` hold the results."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("node count must be non-negative")
        self.n = n
        self.adj: list[list[Edge]] = [[] for _ in range(n)]
        self.dist: list[int] = []
        self.parent: list[int] = []

    def _check(self, a: int, b: int, weight: int) -> None:
        if weight not in (0, 1):
            raise ValueError("edge weights must be 0 or 1")
        for v in (a, b):
            if not 0 <= v < self.n:
                raise IndexError(f"node {v} out of range")

    def add_directional_edge(self, a: int, b: int, weight: int) -> None:
        self._check(a, b, weight)
        self.adj[a].append(Edge(b, weight))

    def add_bidirectional_edge(self, a: int, b: int, weight: int) -> None:
        self._check(a, b, weight)
        self.adj[a].append(Edge(b, weight))
        self.adj[b].append(Edge(a, weight))

    def bfs(self, sources: Iterable[int]) -> list[int]:
        """Distances from the nearest source; unreachable nodes get ``INF``."""
        n = self.n
        dist = [INF] * n
        parent = [-1] * n
        self.dist, self.parent = dist, parent
        if n == 0:
            return dist

        q: deque[int] = deque()
        next_q: deque[int] = deque()
        for src in sources:
            if not 0 <= src < n:
                raise IndexError(f"node {src} out of range")
            if dist[src] > 0:
                dist[src] = 0
                parent[src] = -1
                q.append(src)

        level = 0
        while q or next_q:
            while q:
                top = q.popleft()
                if level > dist[top]:
                    continue
                d = dist[top]
                for node, weight in self.adj[top]:
                    new_dist = d + weight
                    if new_dist < dist[node]:
                        dist[node] = new_dist
                        parent[node] = top
                        (q if weight == 0 else next_q).append(node)
            q, next_q = next_q, q
            level += 1
        return dist