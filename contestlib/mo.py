"""Offline range queries with Mo's ordering."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence


@dataclass(frozen=True)
class MoQuery:
    """A half-open range ``[start, end)``."""

    start: int = 0
    end: int = 0


class MoState(Protocol):
    def add_left(self, index: int) -> None: ...
    def add_right(self, index: int) -> None: ...
    def remove_left(self, index: int) -> None: ...
    def remove_right(self, index: int) -> None: ...
    def answer(self) -> Any: ...


class PowerSumState:
    """Maintains the sum of ``count(x) ** 2 * x`` over the values in the window."""

    def __init__(self, values: Sequence[int]) -> None:
        self.values = values
        self.freq: Counter[int] = Counter()
        self.total = 0

    def add_left(self, index: int) -> None:
        x = self.values[index]
        self.total += (2 * self.freq[x] + 1) * x
        self.freq[x] += 1

    def add_right(self, index: int) -> None:
        self.add_left(index)

    def remove_left(self, index: int) -> None:
        x = self.values[index]
        self.freq[x] -= 1
        self.total -= (2 * self.freq[x] + 1) * x

    def remove_right(self, index: int) -> None:
        self.remove_left(index)

    def answer(self) -> int:
        return self.total


def _move(state: MoState, first: MoQuery, second: MoQuery) -> None:
    if max(first.start, second.start) >= min(first.end, second.end):
        for i in range(first.start, first.end):
            state.remove_left(i)
        for i in range(second.start, second.end):
            state.add_right(i)
        return
    for i in range(first.start - 1, second.start - 1, -1):
        state.add_left(i)
    for i in range(first.end, second.end):
        state.add_right(i)
    for i in range(first.start, second.start):
        state.remove_left(i)
    for i in range(first.end - 1, second.end - 1, -1):
        state.remove_right(i)


def solve_queries(
    values: Sequence[Any],
    queries: Sequence[MoQuery],
    state_factory: Callable[[Sequence[Any]], MoState] = PowerSumState,
) -> list[Any]:
    """Answer every query in input order using a state built by ``state_factory``."""
    n = len(values)
    for q in queries:
        if not 0 <= q.start <= q.end <= n:
            raise IndexError(f"invalid range [{q.start}, {q.end}) for length {n}")
    block_size = int(1.5 * n / math.sqrt(max(len(queries), 1)) + 1)

    def key(i: int) -> tuple[int, int]:
        q = queries[i]
        block = q.start // block_size
        return block, q.end if block % 2 == 0 else -q.end

    state = state_factory(values)
    last = MoQuery()
    answers: list[Any] = [None] * len(queries)
    for i in sorted(range(len(queries)), key=key):
        q = queries[i]
        _move(state, last, q)
        answers[i] = state.answer()
        last = q
    return answers