"""Parent arrays of Cartesian trees built with a monotonic stack."""

from __future__ import annotations

import operator
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")


def build_cartesian_tree(
    values: Sequence[T], compare: Callable[[T, T], bool] = operator.lt
) -> list[int]:
    """Return the parent of each index (``-1`` for the root).

    Use ``operator.lt`` for a min heap and ``operator.gt`` for a max heap.
    On ties the left value becomes the parent of the right one.
    """
    parent = [-1] * len(values)
    stack: list[int] = []
    for i, value in enumerate(values):
        erased = -1
        while stack and compare(value, values[stack[-1]]):
            erased = stack.pop()
        parent[i] = stack[-1] if stack else -1
        if erased >= 0:
            parent[erased] = i
        stack.append(i)
    return parent