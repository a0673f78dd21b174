"""Counting values below a threshold in a range, with point assignment."""

from __future__ import annotations

import math
from bisect import bisect_left
from typing import Any, Iterable


class SearchBuckets:
    """Square-root decomposition into sorted buckets.

    Both :meth:`modify` and :meth:`count_less_than` take about
    ``sqrt(n log n)`` time.
    """

    def __init__(self, initial: Iterable[Any] = ()) -> None:
        self._values = list(initial)
        n = len(self._values)
        self.n = n
        self.bucket_size = int(3 * math.sqrt(n * math.log(n + 1)) + 1)
        size = self.bucket_size
        self._buckets: list[Any] = []
        for start in range(0, n, size):
            self._buckets.extend(sorted(self._values[start:start + size]))

    def __len__(self) -> int:
        return self.n

    @property
    def values(self) -> list[Any]:
        return list(self._values)

    def _bucket_start(self, index: int) -> int:
        return index - index % self.bucket_size

    def _bucket_end(self, bucket_start: int) -> int:
        return min(bucket_start + self.bucket_size, self.n)

    def _bucket_count_less_than(self, bucket_start: int, value: Any) -> int:
        end = self._bucket_end(bucket_start)
        return bisect_left(self._buckets, value, bucket_start, end) - bucket_start

    def count_less_than(self, start: int, end: int, value: Any) -> int:
        """How many entries in ``[start, end)`` are less than ``value``."""
        if not 0 <= start <= end <= self.n:
            raise IndexError(f"invalid range [{start}, {end}) for length {self.n}")
        values = self._values
        count = 0

        bucket_start = self._bucket_start(start)
        bucket_end = self._bucket_end(bucket_start)
        if start - bucket_start < bucket_end - start:
            count -= sum(v < value for v in values[bucket_start:start])
            start = bucket_start
        else:
            count += sum(v < value for v in values[start:bucket_end])
            start = max(start, bucket_end)

        bucket_start = self._bucket_start(end)
        bucket_end = self._bucket_end(bucket_start)
        if end - bucket_start < bucket_end - end:
            count += sum(v < value for v in values[bucket_start:end])
            end = bucket_start
        else:
            count -= sum(v < value for v in values[end:bucket_end])
            end = max(end, bucket_end)

        while start < end:
            count += self._bucket_count_less_than(start, value)
            start = self._bucket_end(start)
        return count

    def prefix_count_less_than(self, length: int, value: Any) -> int:
        """How many of the first ``length`` entries are less than ``value``."""
        return self.count_less_than(0, length, value)

    def modify(self, index: int, value: Any) -> None:
        """Set the entry at ``index`` to ``value``."""
        if not 0 <= index < self.n:
            raise IndexError(f"index {index} out of range for length {self.n}")
        buckets = self._buckets
        bucket_start = self._bucket_start(index)
        old_pos = bucket_start + self._bucket_count_less_than(bucket_start, self._values[index])
        new_pos = bucket_start + self._bucket_count_less_than(bucket_start, value)
        if old_pos < new_pos:
            buckets[old_pos:new_pos - 1] = buckets[old_pos + 1:new_pos]
            new_pos -= 1
        else:
            buckets[new_pos + 1:old_pos + 1] = buckets[new_pos:old_pos]
        buckets[new_pos] = value
        self._values[index] = value