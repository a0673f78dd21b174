"""Single- or multi-source shortest paths with non-negative weights."""

from __future__ import annotations

import heapq
from typing import Iterable, NamedTuple

UNREACHABLE = (2**63 - 1) // 2


class Edge(NamedTuple):
    node: int
    weight: int


class Dijkstra:
    """Dijkstra's algorithm; after :meth:`dijkstra`, ``dist`` and ``parent`` hold the results."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("node count must be non-negative")
        self.n = n
        self.adj: list[list[Edge]] = [[] for _ in range(n)]
        self.dist: list[int] = []
        self.parent: list[int] = []

    def _check_node(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"node {v} out of range")

    def add_directional_edge(self, a: int, b: int, weight: int) -> None:
        self._check_node(a)
        self._check_node(b)
        self.adj[a].append(Edge(b, weight))

    def add_bidirectional_edge(self, a: int, b: int, weight: int) -> None:
        self.add_directional_edge(a, b, weight)
        self.add_directional_edge(b, a, weight)

    def dijkstra(self, sources: Iterable[int]) -> list[int]:
        """Distances from the nearest source; unreachable nodes get ``UNREACHABLE``."""
        n = self.n
        dist = [UNREACHABLE] * n
        parent = [-1] * n
        self.dist, self.parent = dist, parent
        if n == 0:
            return dist

        heap: list[tuple[int, int]] = []
        for src in sources:
            self._check_node(src)
            if 0 < dist[src]:
                dist[src] = 0
                parent[src] = -1
                heapq.heappush(heap, (0, src))

        while heap:
            d, node = heapq.heappop(heap)
            if d > dist[node]:
                continue
            for target, weight in self.adj[node]:
                new_dist = d + weight
                if new_dist < dist[target]:
                    dist[target] = new_dist
                    parent[target] = node
                    heapq.heappush(heap, (new_dist, target))
        return dist