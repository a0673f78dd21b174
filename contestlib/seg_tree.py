"""A segment tree with lazy range assignment and range addition."""

from __future__ import annotations

from typing import Callable, Iterable

from contestlib.segments import IDENTITY_CHANGE, Segment, SegmentChange


class SegTree:
    """Range updates and range queries over :class:`Segment` summaries."""

    def __init__(self, n: int = 0) -> None:
        self._init(n)

    def _init(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        tree_n = 1
        while tree_n < n:
            tree_n *= 2
        self.tree_n = tree_n
        self._tree = [Segment()] * (2 * tree_n)
        self._changes = [IDENTITY_CHANGE] * tree_n

    def _check_range(self, a: int, b: int) -> None:
        if not 0 <= a <= b <= self.tree_n:
            raise IndexError(f"invalid range [{a}, {b}) for size {self.tree_n}")

    def build(self, initial: Iterable[Segment]) -> None:
        """Reset the tree to hold ``initial`` in linear time."""
        segments = list(initial)
        self._init(len(segments))
        tree, tree_n = self._tree, self.tree_n
        tree[tree_n:tree_n + len(segments)] = segments
        for position in range(tree_n - 1, 0, -1):
            tree[position] = tree[2 * position].join(tree[2 * position + 1])

    def _apply_and_combine(self, position: int, length: int, change: SegmentChange) -> None:
        self._tree[position] = self._tree[position].apply(change, length)
        if position < self.tree_n:
            self._changes[position] = self._changes[position].combine(change)

    def _push_down(self, position: int, length: int) -> None:
        change = self._changes[position]
        if change.has_change():
            self._apply_and_combine(2 * position, length // 2, change)
            self._apply_and_combine(2 * position + 1, length // 2, change)
            self._changes[position] = IDENTITY_CHANGE

    def _process_range(
        self,
        position: int,
        start: int,
        end: int,
        a: int,
        b: int,
        needs_join: bool,
        range_op: Callable[[int, int], None],
    ) -> None:
        if a <= start and end <= b:
            range_op(position, end - start)
            return
        if position >= self.tree_n:
            return
        self._push_down(position, end - start)
        mid = (start + end) // 2
        if a < mid:
            self._process_range(2 * position, start, mid, a, b, needs_join, range_op)
        if b > mid:
            self._process_range(2 * position + 1, mid, end, a, b, needs_join, range_op)
        if needs_join:
            tree = self._tree
            tree[position] = tree[2 * position].join(tree[2 * position + 1])

    def query(self, a: int, b: int) -> Segment:
        """Summary of the range ``[a, b)``."""
        self._check_range(a, b)
        answer = Segment()

        def collect(position: int, _length: int) -> None:
            nonlocal answer
            answer = answer.join(self._tree[position])

        self._process_range(1, 0, self.tree_n, a, b, False, collect)
        return answer

    def query_full(self) -> Segment:
        """Summary of the whole tree."""
        return self._tree[1]

    def update(self, a: int, b: int, change: SegmentChange) -> None:
        """Apply ``change`` to every element of ``[a, b)``."""
        self._check_range(a, b)
        self._process_range(
            1, 0, self.tree_n, a, b, True,
            lambda position, length: self._apply_and_combine(position, length, change),
        )

    def update_single(self, index: int, seg: Segment) -> None:
        """Replace the element at ``index`` with ``seg``."""
        if not 0 <= index < self.tree_n:
            raise IndexError(f"index {index} out of range for size {self.tree_n}")
        position = self.tree_n + index
        for up in range(self.tree_n.bit_length() - 1, 0, -1):
            self._push_down(position >> up, 1 << up)
        tree = self._tree
        tree[position] = seg
        while position > 1:
            position //= 2
            tree[position] = tree[2 * position].join(tree[2 * position + 1])

    def to_array(self) -> list[Segment]:
        """All ``tree_n`` leaves with pending changes applied."""
        for i in range(1, self.tree_n):
            self._push_down(i, self.tree_n >> (i.bit_length() - 1))
        return self._tree[self.tree_n:]

    def find_last_subarray(
        self,
        should_join: Callable[[Segment, Segment], bool],
        n: int,
        first: int = 0,
    ) -> int:
        """End of the longest subarray starting at ``first`` accepted by ``should_join``.

        ``should_join(current, add)`` decides whether ``add`` may be appended to
        the accumulated ``current``. Returns ``first - 1`` if even the empty
        subarray is rejected.
        """
        if not 0 <= first <= n:
            raise IndexError(f"invalid start {first} for length {n}")
        current = Segment()
        if not should_join(current, current):
            return first - 1

        def search(position: int, start: int, end: int) -> int:
            nonlocal current
            if end <= first:
                return end
            if first <= start and end <= n and should_join(current, self._tree[position]):
                current = current.join(self._tree[position])
                return end
            if end - start == 1:
                return start
            self._push_down(position, end - start)
            mid = (start + end) // 2
            left = search(2 * position, start, mid)
            return left if left < mid else search(2 * position + 1, mid, end)

        return search(1, 0, self.tree_n)