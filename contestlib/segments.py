"""Segment summaries and range changes used by the segment tree."""

from __future__ import annotations

from dataclasses import dataclass

INT_LOWEST = -(2**31)


@dataclass(frozen=True, slots=True)
class SegmentChange:
    """A change to a range: assign ``to_set`` (if given), then add ``to_add``."""

    to_add: int = 0
    to_set: int | None = None

    def has_set(self) -> bool:
        return self.to_set is not None

    def has_change(self) -> bool:
        return self.has_set() or self.to_add != 0

    def combine(self, other: SegmentChange) -> SegmentChange:
        """The change equal to applying ``self`` and then ``other``."""
        if other.has_set():
            return other
        return SegmentChange(self.to_add + other.to_add, self.to_set)


IDENTITY_CHANGE = SegmentChange()


@dataclass(frozen=True, slots=True)
class Segment:
    """Summary of a run of numbers: maximum, sum, ends and largest neighbour gap.

    The default value is the empty segment, the identity for :meth:`join`.
    """

    maximum: int = INT_LOWEST
    sum: int = 0
    first: int = 0
    last: int = 0
    max_diff: int = -1

    @classmethod
    def of(cls, value: int) -> Segment:
        """The segment holding the single number ``value``."""
        return cls(value, value, value, value, 0)

    def empty(self) -> bool:
        return self.max_diff < 0

    def apply(self, change: SegmentChange, length: int = 1) -> Segment:
        """The segment after ``change`` is applied to all ``length`` numbers."""
        maximum, total = self.maximum, self.sum
        first, last, max_diff = self.first, self.last, self.max_diff
        if change.to_set is not None:
            maximum = first = last = change.to_set
            total = length * change.to_set
            max_diff = 0
        add = change.to_add
        return Segment(maximum + add, total + length * add, first + add, last + add, max_diff)

    def join(self, other: Segment) -> Segment:
        """The summary of ``self`` followed by ``other``."""
        if self.empty():
            return other
        if other.empty():
            return self
        return Segment(
            max(self.maximum, other.maximum),
            self.sum + other.sum,
            self.first,
            other.last,
            max(self.max_diff, other.max_diff, abs(self.last - other.first)),
        )