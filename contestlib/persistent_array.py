"""A fully persistent array with logarithmic lookups and updates."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class PersistentArray(Generic[T]):
    """Array whose every version stays readable; versions are named by root ids.

    The initial version has root ``1``. Each update returns the root of a new
    version and leaves the old one untouched.
    """

    INITIAL_ROOT = 1

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._values: list[T] = list(values)
        self._n = len(self._values)
        # Node 0 is unused so that valid roots are always positive.
        self._tree: list[list[int]] = [[-1, -1]]
        self._build(0, self._n)

    def __len__(self) -> int:
        return self._n

    def _build(self, start: int, end: int) -> int:
        if start >= end:
            return -1
        node = len(self._tree)
        self._tree.append([-1, -1])
        if end - start == 1:
            # Leaves point at their slot in the value store.
            self._tree[node] = [start, start]
            return node
        mid = (start + end) // 2
        left = self._build(start, mid)
        right = self._build(mid, end)
        self._tree[node] = [left, right]
        return node

    def _check(self, root: int, index: int) -> None:
        if not 0 < root < len(self._tree):
            raise ValueError(f"invalid root {root}")
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range for length {self._n}")

    def get(self, root: int, index: int) -> T:
        """Value at ``index`` in the version named by ``root``."""
        self._check(root, index)
        current, start, end = root, 0, self._n
        while end - start > 1:
            mid = (start + end) // 2
            if index < mid:
                current, end = self._tree[current][0], mid
            else:
                current, start = self._tree[current][1], mid
        return self._values[self._tree[current][0]]

    def update(self, root: int, index: int, value: T) -> int:
        """Set ``index`` to ``value`` on top of ``root``; return the new root."""
        self._check(root, index)
        tree = self._tree
        current, start, end = root, 0, self._n
        parent: tuple[int, int] | None = None
        new_root = len(tree)
        while True:
            position = len(tree)
            tree.append(list(tree[current]))
            if parent is not None:
                tree[parent[0]][parent[1]] = position
            if end - start == 1:
                slot = len(self._values)
                tree[position] = [slot, slot]
                self._values.append(value)
                return new_root
            mid = (start + end) // 2
            if index < mid:
                parent = (position, 0)
                current, end = tree[position][0], mid
            else:
                parent = (position, 1)
                current, start = tree[position][1], mid