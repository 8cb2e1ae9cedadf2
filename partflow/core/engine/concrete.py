"""Concrete evaluation of single records through the workflow graph.

Responsibilities:
  - Route one fully-bound record from the entry workflow to a sink.
  - Record the visited workflow path for audits.

Inputs/Outputs:
  - Inputs: WorkflowTable, Record and EngineConfig (entry name, cycle policy).
  - Outputs: RecordVerdict; sum_accepted_ratings folds verdicts into one total.

Invariants:
  - The first matching rule wins; the fallback applies only when none match.
  - Unknown targets raise UnknownWorkflow; revisits raise CyclicWorkflow when enabled.
"""

from __future__ import annotations

from typing import Iterable

from partflow.engine_config import DEFAULT_CONFIG, EngineConfig
from ..domain.errors import CyclicWorkflow
from ..domain.models import Record, Workflow
from ..domain.workflow_table import WorkflowTable
from .result import RecordVerdict
from .trace import emit


def route(workflow: Workflow, record: Record) -> str:
    for rule in workflow.rules:
        condition = rule.condition
        if condition.satisfies(record[condition.attribute]):
            return rule.target
    return workflow.fallback


def classify(table: WorkflowTable, record: Record, config: EngineConfig = DEFAULT_CONFIG) -> RecordVerdict:
    path: list[str] = []
    stack = [config.entry_name]
    while stack:
        name = stack.pop()
        if table.is_sink(name):
            emit(f"CLASSIFY record={record.values} terminal={name} path={'>'.join(path)}")
            return RecordVerdict(
                record=record,
                accepted=name == table.accept_name,
                path=tuple(path),
                terminal=name,
            )
        if config.detect_cycles and name in path:
            raise CyclicWorkflow(path + [name])
        workflow = table.get_workflow(name)
        path.append(name)
        stack.append(route(workflow, record))
    raise AssertionError("unreachable: worklist emptied without reaching a sink")


def is_accepted(table: WorkflowTable, record: Record, config: EngineConfig = DEFAULT_CONFIG) -> bool:
    return classify(table, record, config).accepted


def sum_accepted_ratings(
    table: WorkflowTable, records: Iterable[Record], config: EngineConfig = DEFAULT_CONFIG
) -> int:
    total = 0
    for record in records:
        if is_accepted(table, record, config):
            total += record.rating
    return total
