"""Vectorized concrete evaluation over arrays of records.

Responsibilities:
  - Route an (N, 4) integer array of records through the graph with numpy masks.
  - Enumerate a small universe for brute-force cross-checks of range counting.

Invariants:
  - Column order of the array follows Attribute ordinals (x, m, a, s).
  - Each row lands in exactly one sink; results agree row-for-row with concrete.classify.
"""

from __future__ import annotations

import numpy as np

from partflow.engine_config import DEFAULT_CONFIG, EngineConfig
from ..domain.enums import Attribute, Comparator
from ..domain.errors import CyclicWorkflow
from ..domain.models import Interval, Record
from ..domain.workflow_table import WorkflowTable

MAX_GRID_POINTS = 20_000_000


def records_to_array(records: list[Record]) -> np.ndarray:
    if not records:
        return np.empty((0, len(Attribute)), dtype=np.int64)
    return np.array([record.values for record in records], dtype=np.int64)


def accept_mask(table: WorkflowTable, values: np.ndarray, config: EngineConfig = DEFAULT_CONFIG) -> np.ndarray:
    if values.ndim != 2 or values.shape[1] != len(Attribute):
        raise ValueError(f"values must have shape (N, {len(Attribute)}), got {values.shape}")

    mask = np.zeros(values.shape[0], dtype=bool)
    worklist: list[tuple[str, np.ndarray, tuple[str, ...]]] = []
    if values.shape[0] > 0:
        worklist.append((config.entry_name, np.arange(values.shape[0]), ()))

    while worklist:
        name, rows, path = worklist.pop()
        if name == table.accept_name:
            mask[rows] = True
            continue
        if name == table.reject_name:
            continue
        if config.detect_cycles and name in path:
            raise CyclicWorkflow(list(path) + [name])

        workflow = table.get_workflow(name)
        remaining = rows
        for rule in workflow.rules:
            if remaining.size == 0:
                break
            condition = rule.condition
            column = values[remaining, condition.attribute]
            if condition.comparator is Comparator.LESS_THAN:
                hit = column < condition.threshold
            else:
                hit = column > condition.threshold
            if hit.any():
                worklist.append((rule.target, remaining[hit], path + (name,)))
            remaining = remaining[~hit]
        if remaining.size > 0:
            worklist.append((workflow.fallback, remaining, path + (name,)))

    return mask


def universe_grid(universe: Interval) -> np.ndarray:
    width = max(universe.high - universe.low + 1, 0)
    points = width ** len(Attribute)
    if points > MAX_GRID_POINTS:
        raise ValueError(f"Universe {universe.low}..{universe.high} too large to enumerate ({points} points)")
    axis = np.arange(universe.low, universe.high + 1, dtype=np.int64)
    grids = np.meshgrid(*([axis] * len(Attribute)), indexing="ij")
    return np.stack(grids, axis=-1).reshape(-1, len(Attribute))


def count_accepted_brute_force(table: WorkflowTable, config: EngineConfig = DEFAULT_CONFIG) -> int:
    grid = universe_grid(config.universe)
    return int(accept_mask(table, grid, config).sum())
