"""Range-splitting evaluation of domain boxes through the workflow graph.

Responsibilities:
  - Split a box at every rule of a workflow into a matched part and a carried remainder.
  - Walk the graph with an explicit worklist and total the volume reaching the accept sink.

Inputs/Outputs:
  - Inputs: WorkflowTable, EngineConfig (universe, entry, cycle policy), optional start box.
  - Outputs: RangeEvaluation with accepted/rejected volume and the accepted boxes.

Invariants:
  - The boxes emitted by split_workflow partition the input box exactly.
  - Boxes with zero volume are never pushed onto the worklist.
  - accepted_volume + rejected_volume == start_volume for every finished evaluation.
"""

from __future__ import annotations

from typing import Optional

from partflow.engine_config import DEFAULT_CONFIG, EngineConfig
from ..domain.errors import CyclicWorkflow
from ..domain.models import DomainBox, Interval, Workflow
from ..domain.ranges import box_volume, complement, intersect_boxes, intersect_list, intersect_lists
from ..domain.workflow_table import WorkflowTable
from .result import RangeEvaluation
from .trace import emit


def split_workflow(workflow: Workflow, box: DomainBox, universe: Interval) -> list[tuple[str, DomainBox]]:
    emitted: list[tuple[str, DomainBox]] = []
    remaining = box
    for rule in workflow.rules:
        attribute = rule.condition.attribute
        satisfying = rule.condition.to_interval(universe)

        matched = remaining.replace(attribute, intersect_list(remaining[attribute], satisfying))
        if box_volume(matched) > 0:
            emitted.append((rule.target, matched))
        else:
            emit(f"PRUNE workflow={workflow.name} condition={rule.condition} target={rule.target}")

        remaining = remaining.replace(
            attribute, intersect_lists(remaining[attribute], complement(satisfying, universe))
        )
        if box_volume(remaining) == 0:
            return emitted

    if box_volume(remaining) > 0:
        emitted.append((workflow.fallback, remaining))
    return emitted


def evaluate_ranges(
    table: WorkflowTable,
    config: EngineConfig = DEFAULT_CONFIG,
    box: Optional[DomainBox] = None,
) -> RangeEvaluation:
    universe = config.universe
    full = DomainBox.full(universe)
    start = full if box is None else intersect_boxes(box, full)
    start_volume = box_volume(start)

    accepted = 0
    rejected = 0
    accepted_boxes: list[DomainBox] = []
    visits = 0

    worklist: list[tuple[str, DomainBox, tuple[str, ...]]] = []
    if start_volume > 0:
        worklist.append((config.entry_name, start, ()))

    while worklist:
        name, current, path = worklist.pop()
        if name == table.reject_name:
            rejected += box_volume(current)
            continue
        if name == table.accept_name:
            accepted += box_volume(current)
            accepted_boxes.append(current)
            continue
        if config.detect_cycles and name in path:
            raise CyclicWorkflow(list(path) + [name])

        workflow = table.get_workflow(name)
        visits += 1
        for target, sub_box in split_workflow(workflow, current, universe):
            emit(f"PUSH from={name} to={target} volume={box_volume(sub_box)}")
            worklist.append((target, sub_box, path + (name,)))

    return RangeEvaluation(
        start_volume=start_volume,
        accepted_volume=accepted,
        rejected_volume=rejected,
        accepted_boxes=tuple(accepted_boxes),
        workflow_visits=visits,
    )


def count_accepted_combinations(
    table: WorkflowTable,
    config: EngineConfig = DEFAULT_CONFIG,
    box: Optional[DomainBox] = None,
) -> int:
    return evaluate_ranges(table, config, box).accepted_volume
