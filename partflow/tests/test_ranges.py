"""Tests for interval algebra."""

from __future__ import annotations

from partflow.core.domain.enums import Attribute
from partflow.core.domain.models import DomainBox, Interval
from partflow.core.domain.ranges import (
    box_volume,
    cardinality,
    complement,
    intersect,
    intersect_boxes,
    intersect_list,
    intersect_lists,
    list_cardinality,
)

UNIVERSE = Interval(1, 4000)


def test_intersect_overlapping_and_disjoint() -> None:
    assert intersect(Interval(1, 10), Interval(5, 20)) == Interval(5, 10)
    assert intersect(Interval(1, 10), Interval(10, 20)) == Interval(10, 10)
    assert intersect(Interval(1, 10), Interval(11, 20)) is None


def test_intersect_list_drops_empty_results() -> None:
    intervals = [Interval(1, 5), Interval(10, 15), Interval(20, 25)]

    assert intersect_list(intervals, Interval(4, 12)) == [Interval(4, 5), Interval(10, 12)]
    assert intersect_list(intervals, Interval(6, 9)) == []
    assert intersect_list([], Interval(1, 100)) == []


def test_intersect_lists_keeps_pieces_disjoint() -> None:
    result = intersect_lists([Interval(1, 10), Interval(20, 30)], [Interval(5, 25)])

    assert result == [Interval(5, 10), Interval(20, 25)]


def test_complement_splits_around_interval() -> None:
    assert complement(Interval(100, 200), UNIVERSE) == [Interval(1, 99), Interval(201, 4000)]
    assert complement(Interval(1, 200), UNIVERSE) == [Interval(201, 4000)]
    assert complement(Interval(100, 4000), UNIVERSE) == [Interval(1, 99)]
    assert complement(UNIVERSE, UNIVERSE) == []


def test_complement_of_empty_interval_is_universe() -> None:
    assert complement(Interval(1, 0), UNIVERSE) == [UNIVERSE]
    assert complement(Interval(4001, 4000), UNIVERSE) == [UNIVERSE]


def test_complement_of_complement_reconstructs_interval() -> None:
    universe = Interval(1, 6)
    for low in range(1, 7):
        for high in range(low, 7):
            interval = Interval(low, high)
            rebuilt = [universe]
            for piece in complement(interval, universe):
                rebuilt = intersect_lists(rebuilt, complement(piece, universe))
            assert rebuilt == [interval]


def test_cardinality_and_list_cardinality() -> None:
    assert cardinality(Interval(1, 4000)) == 4000
    assert cardinality(Interval(7, 7)) == 1
    assert list_cardinality([Interval(1, 10), Interval(21, 25)]) == 15
    assert list_cardinality([]) == 0


def test_box_volume_multiplies_attribute_sums() -> None:
    assert box_volume(DomainBox.full(UNIVERSE)) == 4000**4

    box = DomainBox.from_lists(
        [
            [Interval(1, 10), Interval(21, 25)],
            [Interval(1, 2)],
            [Interval(5, 5)],
            [Interval(1, 3)],
        ]
    )
    assert box_volume(box) == 15 * 2 * 1 * 3


def test_box_volume_is_zero_when_any_attribute_is_empty() -> None:
    box = DomainBox.full(UNIVERSE).replace(Attribute.A, [])

    assert box_volume(box) == 0


def test_intersect_boxes_clips_to_universe() -> None:
    wide = DomainBox.from_lists([[Interval(-5, 10)], [Interval(3990, 5000)], [UNIVERSE], [Interval(1, 1)]])

    clipped = intersect_boxes(wide, DomainBox.full(UNIVERSE))

    assert clipped.intervals == (
        (Interval(1, 10),),
        (Interval(3990, 4000),),
        (UNIVERSE,),
        (Interval(1, 1),),
    )
