"""Sliding-window minimum (or maximum) with a monotonic deque."""

from __future__ import annotations

import math
from collections import deque
from typing import Any, Sequence


class MonotonicRMQ:
    """Queue of values answering the best value among indices at least a bound.

    Added indices and queried indices must each be non-decreasing. Querying with
    nothing left returns ``inf`` (or ``-inf`` in maximum mode).
    """

    def __init__(self, maximum_mode: bool = False) -> None:
        self.maximum_mode = maximum_mode
        self.current_index = 0
        self._values: deque[tuple[Any, int]] = deque()
        self._prev_add: int | None = None
        self._prev_query: int | None = None

    def _is_better(self, a: Any, b: Any) -> bool:
        return b < a if self.maximum_mode else a < b

    def add(self, x: Any, index: int | None = None) -> int:
        """Add ``x`` and return its index."""
        if index is None:
            index = self.current_index
            self.current_index += 1
        if self._prev_add is not None and index < self._prev_add:
            raise ValueError("indices must be added in non-decreasing order")
        self._prev_add = index
        values = self._values
        while values and not self._is_better(values[-1][0], x):
            values.pop()
        values.append((x, index))
        return index

    def query_index(self, index: int) -> Any:
        """Best value among entries with index at least ``index``."""
        if self._prev_query is not None and index < self._prev_query:
            raise ValueError("query indices must be non-decreasing")
        self._prev_query = index
        values = self._values
        while values and values[0][1] < index:
            values.popleft()
        if not values:
            return -math.inf if self.maximum_mode else math.inf
        return values[0][0]

    def query_count(self, count: int) -> Any:
        """Best value among the last ``count`` automatically indexed entries."""
        return self.query_index(self.current_index - count)

    def has_index(self, index: int) -> bool:
        return bool(self._values) and self._values[-1][1] >= index

    def has_count(self, count: int) -> bool:
        return self.has_index(self.current_index - count)


def rmq_every_k(values: Sequence[Any], k: int, maximum_mode: bool = False) -> list[Any]:
    """Best value in every window of ``k`` consecutive values."""
    n = len(values)
    if not 1 <= k <= n:
        raise ValueError("window size must satisfy 1 <= k <= len(values)")
    rmq = MonotonicRMQ(maximum_mode)
    result = []
    for i, value in enumerate(values):
        rmq.add(value)
        if i >= k - 1:
            result.append(rmq.query_count(k))
    return result