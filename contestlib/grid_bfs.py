"""Breadth-first search over the cells of a rectangular grid."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

INF = 10**9 + 5

# Up, right, down, left.
DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))

Cell = tuple[int, int]
NO_CELL: Cell = (-1, -1)


class GridBFS:
    """Shortest 4-neighbour paths on a grid of equal-length rows.

    After :meth:`bfs`, ``dist[r][c]`` holds the distance from the nearest
    source (``INF`` if unreachable) and ``parent[r][c]`` the previous cell.
    """

    def __init__(self, grid: Sequence[Sequence[object]] = ()) -> None:
        self.grid = list(grid)
        self.R = len(self.grid)
        self.C = len(self.grid[0]) if self.grid else 0
        self.dist: list[list[int]] = []
        self.parent: list[list[Cell]] = []

    def valid(self, r: int, c: int) -> bool:
        return 0 <= r < self.R and 0 <= c < self.C

    def bfs(self, sources: Iterable[Cell]) -> list[list[int]]:
        """Run the search from ``sources`` and return the distance table."""
        if self.R == 0 or self.C == 0:
            self.dist, self.parent = [], []
            return self.dist

        dist = [[INF] * self.C for _ in range(self.R)]
        parent = [[NO_CELL] * self.C for _ in range(self.R)]
        self.dist, self.parent = dist, parent
        q: deque[Cell] = deque()
        next_q: deque[Cell] = deque()

        def check(cell: Cell, from_cell: Cell, new_dist: int, add: int) -> None:
            r, c = cell
            if new_dist < dist[r][c]:
                dist[r][c] = new_dist
                parent[r][c] = from_cell
                (q if add == 0 else next_q).append(cell)

        for r, c in sources:
            if not self.valid(r, c):
                raise IndexError(f"cell ({r}, {c}) is outside the grid")
            check((r, c), NO_CELL, 0, 0)

        level = 0
        while q or next_q:
            while q:
                r, c = q.popleft()
                if level > dist[r][c]:
                    continue
                for dr, dc in DIRECTIONS:
                    nr, nc = r + dr, c + dc
                    if self.valid(nr, nc):
                        check((nr, nc), (r, c), dist[r][c] + 1, 1)
            q, next_q = next_q, q
            level += 1
        return dist