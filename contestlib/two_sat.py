"""Strongly connected components (Tarjan) and a 2-SAT solver built on them."""

from __future__ import annotations

from typing import Iterable


class SCC:
    """Tarjan's algorithm; components come out in reverse topological order."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("node count must be non-negative")
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.components: list[list[int]] = []
        self.which_component: list[int] = []

    @classmethod
    def from_adjacency(cls, adj: Iterable[Iterable[int]]) -> SCC:
        scc = cls()
        scc.adj = [list(row) for row in adj]
        return scc

    @property
    def size(self) -> int:
        return len(self.adj)

    def add_edge(self, a: int, b: int) -> None:
        for v in (a, b):
            if not 0 <= v < self.size:
                raise IndexError(f"node {v} out of range")
        self.adj[a].append(b)

    def build(self) -> list[list[int]]:
        """Compute the components and return them."""
        n = self.size
        adj = self.adj
        tour_index = [-1] * n
        low_link = [0] * n
        in_stack = [False] * n
        stack: list[int] = []
        which = [-1] * n
        components: list[list[int]] = []
        tour = 0

        for start in range(n):
            if tour_index[start] >= 0:
                continue
            tour_index[start] = low_link[start] = tour
            tour += 1
            stack.append(start)
            in_stack[start] = True
            work = [(start, 0)]
            while work:
                node, i = work[-1]
                neighbors = adj[node]
                if i < len(neighbors):
                    work[-1] = (node, i + 1)
                    nb = neighbors[i]
                    if tour_index[nb] < 0:
                        tour_index[nb] = low_link[nb] = tour
                        tour += 1
                        stack.append(nb)
                        in_stack[nb] = True
                        work.append((nb, 0))
                    elif in_stack[nb]:
                        low_link[node] = min(low_link[node], tour_index[nb])
                    continue
                work.pop()
                if work:
                    up = work[-1][0]
                    low_link[up] = min(low_link[up], low_link[node])
                if low_link[node] == tour_index[node]:
                    component: list[int] = []
                    while True:
                        x = stack.pop()
                        in_stack[x] = False
                        which[x] = len(components)
                        component.append(x)
                        if x == node:
                            break
                    components.append(component)

        self.components = components
        self.which_component = which
        return components


class TwoSat:
    """2-SAT over literals: variable ``v`` is even and its negation is ``v ^ 1``.

    Negative literals stand for "no variable" in the ``create_*`` helpers.
    """

    def __init__(self) -> None:
        self.n = 0
        self.adj: list[list[int]] = []
        self.assignment: list[bool] = []

    def inv(self, var: int) -> int:
        return var ^ 1

    def new_var(self) -> int:
        self.adj.append([])
        self.adj.append([])
        self.n += 1
        return 2 * (self.n - 1)

    def implies(self, a: int, b: int) -> None:
        self.adj[a].append(b)
        self.adj[self.inv(b)].append(self.inv(a))

    def either(self, a: int, b: int) -> None:
        self.adj[self.inv(a)].append(b)
        self.adj[self.inv(b)].append(a)

    def set_value(self, a: int) -> None:
        self.adj[self.inv(a)].append(a)

    def equal(self, a: int, b: int) -> None:
        self.implies(a, b)
        self.implies(self.inv(a), self.inv(b))

    def unequal(self, a: int, b: int) -> None:
        self.implies(a, self.inv(b))
        self.implies(self.inv(a), b)

    def create_and(self, a: int, b: int) -> int:
        """A literal that implies both ``a`` and ``b`` (one direction only)."""
        if a < 0 or b < 0:
            return max(a, b)
        result = self.new_var()
        self.implies(result, a)
        self.implies(result, b)
        return result

    def create_or(self, a: int, b: int) -> int:
        """A literal implied by ``a`` and by ``b`` (one direction only)."""
        if a < 0 or b < 0:
            return max(a, b)
        result = self.new_var()
        self.implies(a, result)
        self.implies(b, result)
        return result

    def create_at_most_one(self, a: int, b: int) -> int:
        """Forbid ``a`` and ``b`` together; return a literal implied by either."""
        if a < 0 or b < 0:
            return max(a, b)
        self.either(self.inv(a), self.inv(b))
        return self.create_or(a, b)

    def create_at_most_one_of(self, variables: Iterable[int]) -> int:
        """Allow at most one of ``variables`` to be true."""
        aux = -1
        for var in variables:
            aux = self.create_at_most_one(aux, var)
        return aux

    def solve(self) -> bool:
        """Find an assignment; on success ``assignment[literal]`` holds its truth."""
        scc = SCC.from_adjacency(self.adj)
        scc.build()
        which = scc.which_component
        if any(which[2 * i] == which[2 * i + 1] for i in range(self.n)):
            return False
        assignment = [False] * (2 * self.n)
        done = [False] * self.n
        # Components arrive in reverse topological order.
        for component in scc.components:
            for x in component:
                assignment[x] = not done[x // 2]
                done[x // 2] = True
        self.assignment = assignment
        return True