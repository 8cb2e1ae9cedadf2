"""Domain models for intervals, conditions, workflows and records.

Responsibilities:
  - Define immutable data carriers shared by the parser and both evaluators.
  - Conditions know how to test one value and how to express themselves as an interval.

Invariants:
  - Records and boxes are indexed by Attribute ordinal, never by name lookup.
  - A DomainBox holds exactly one interval tuple per Attribute.
  - Instances are never mutated; splitting a box produces new boxes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .enums import Attribute, Comparator


@dataclass(frozen=True)
class Interval:
    """Closed integer range; empty when low > high."""

    low: int
    high: int

    @property
    def valid(self) -> bool:
        return self.low <= self.high

    def __contains__(self, value: int) -> bool:
        return self.low <= value <= self.high


@dataclass(frozen=True)
class Record:
    values: tuple[int, int, int, int]

    @classmethod
    def of(cls, x: int, m: int, a: int, s: int) -> "Record":
        return cls(values=(x, m, a, s))

    def __getitem__(self, attribute: Attribute) -> int:
        return self.values[attribute]

    @property
    def rating(self) -> int:
        return sum(self.values)


@dataclass(frozen=True)
class DomainBox:
    intervals: tuple[tuple[Interval, ...], ...]

    @classmethod
    def full(cls, universe: Interval) -> "DomainBox":
        return cls(intervals=tuple((universe,) for _ in Attribute))

    @classmethod
    def from_lists(cls, lists: Iterable[Iterable[Interval]]) -> "DomainBox":
        intervals = tuple(tuple(items) for items in lists)
        if len(intervals) != len(Attribute):
            raise ValueError(f"DomainBox needs {len(Attribute)} interval lists, got {len(intervals)}")
        return cls(intervals=intervals)

    def __getitem__(self, attribute: Attribute) -> tuple[Interval, ...]:
        return self.intervals[attribute]

    def replace(self, attribute: Attribute, intervals: Iterable[Interval]) -> "DomainBox":
        updated = list(self.intervals)
        updated[attribute] = tuple(intervals)
        return DomainBox(intervals=tuple(updated))


@dataclass(frozen=True)
class Condition:
    attribute: Attribute
    comparator: Comparator
    threshold: int

    def satisfies(self, value: int) -> bool:
        if self.comparator is Comparator.LESS_THAN:
            return value < self.threshold
        return value > self.threshold

    def to_interval(self, universe: Interval) -> Interval:
        # Clamped to the universe; may come back empty (low > high).
        if self.comparator is Comparator.LESS_THAN:
            return Interval(universe.low, min(self.threshold - 1, universe.high))
        return Interval(max(self.threshold + 1, universe.low), universe.high)

    def __str__(self) -> str:
        return f"{self.attribute.tag}{self.comparator.value}{self.threshold}"


@dataclass(frozen=True)
class Rule:
    condition: Condition
    target: str


@dataclass(frozen=True)
class Workflow:
    name: str
    rules: tuple[Rule, ...]
    fallback: str

    def targets(self) -> list[str]:
        return [rule.target for rule in self.rules] + [self.fallback]
