"""Interval algebra over closed integer ranges and domain boxes.

Responsibilities:
  - Intersect intervals and disjoint interval lists.
  - Complement an interval inside a bounded universe.
  - Count the values an interval, interval list or box denotes.

Invariants:
  - Empty intervals (low > high) are never returned.
  - Inputs that are pairwise disjoint produce outputs that are pairwise disjoint.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .enums import Attribute
from .models import DomainBox, Interval


def intersect(a: Interval, b: Interval) -> Optional[Interval]:
    candidate = Interval(max(a.low, b.low), min(a.high, b.high))
    return candidate if candidate.valid else None


def intersect_list(intervals: Iterable[Interval], other: Interval) -> list[Interval]:
    result = []
    for interval in intervals:
        overlap = intersect(interval, other)
        if overlap is not None:
            result.append(overlap)
    return result


def intersect_lists(intervals: Iterable[Interval], others: Sequence[Interval]) -> list[Interval]:
    result = []
    for interval in intervals:
        result.extend(intersect_list(others, interval))
    return result


def complement(interval: Interval, universe: Interval) -> list[Interval]:
    if not interval.valid:
        # Nothing excluded: the whole universe is the complement.
        return [universe] if universe.valid else []
    below = Interval(universe.low, min(interval.low - 1, universe.high))
    above = Interval(max(interval.high + 1, universe.low), universe.high)
    return [part for part in (below, above) if part.valid]


def cardinality(interval: Interval) -> int:
    return interval.high - interval.low + 1


def list_cardinality(intervals: Iterable[Interval]) -> int:
    return sum(cardinality(interval) for interval in intervals)


def box_volume(box: DomainBox) -> int:
    volume = 1
    for attribute in Attribute:
        volume *= list_cardinality(box[attribute])
        if volume == 0:
            return 0
    return volume


def intersect_boxes(a: DomainBox, b: DomainBox) -> DomainBox:
    return DomainBox.from_lists(intersect_lists(a[attr], b[attr]) for attr in Attribute)
