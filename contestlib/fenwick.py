"""A Fenwick (binary indexed) tree over integer sums."""

from __future__ import annotations

from typing import Sequence


class FenwickTree:
    """Point updates and prefix sums over ``n`` values, all starting at 0.

    With 0/1 or count values it doubles as an ordered (multi)set of indices:
    ``query(i)`` counts elements below ``i`` and ``find_last_prefix(k)`` finds
    the ``k``-th smallest (0-indexed).
    """

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._total = 0
        self._tree = [0] * (n + 1)

    def __len__(self) -> int:
        return self.n

    def _check(self, index: int) -> None:
        if not 0 <= index < self.n:
            raise IndexError(f"index {index} out of range for length {self.n}")

    def build(self, initial: Sequence[int]) -> None:
        """Replace the contents with ``initial`` in linear time."""
        if len(initial) != self.n:
            raise ValueError(f"expected {self.n} values, got {len(initial)}")
        tree = self._tree
        self._total = 0
        for i, value in enumerate(initial, start=1):
            tree[i] = value
            self._total += value
            k = (i & -i) >> 1
            while k > 0:
                tree[i] += tree[i - k]
                k >>= 1

    def update(self, index: int, change: int) -> None:
        """Add ``change`` to the value at ``index``."""
        self._check(index)
        self._total += change
        tree = self._tree
        i = index + 1
        while i <= self.n:
            tree[i] += change
            i += i & -i

    def query(self, count: int) -> int:
        """Sum of the first ``count`` values."""
        count = min(count, self.n)
        tree = self._tree
        total = 0
        while count > 0:
            total += tree[count]
            count -= count & -count
        return total

    def query_range(self, a: int, b: int) -> int:
        """Sum of the values in ``[a, b)``."""
        return self.query(b) - self.query(a)

    def query_suffix(self, start: int) -> int:
        """Sum of the values from ``start`` to the end."""
        return self._total - self.query(start)

    def get(self, index: int) -> int:
        """The value at ``index``."""
        self._check(index)
        tree = self._tree
        above = index + 1
        total = tree[above]
        above -= above & -above
        a = index
        while a != above:
            total -= tree[a]
            a -= a & -a
        return total

    def set(self, index: int, value: int) -> bool:
        """Set the value at ``index``; return whether it changed."""
        current = self.get(index)
        if current == value:
            return False
        self.update(index, value - current)
        return True

    def find_last_prefix(self, total: int) -> int:
        """Largest ``p`` in ``[0, n]`` with ``query(p) <= total``, or -1 if ``total < 0``.

        Values must be non-negative for the answer to be meaningful.
        """
        if total < 0:
            return -1
        tree = self._tree
        prefix = 0
        for k in range(self.n.bit_length() - 1, -1, -1):
            step = prefix + (1 << k)
            if step <= self.n and tree[step] <= total:
                prefix = step
                total -= tree[prefix]
        return prefix