"""Evaluation result payloads for concrete and range evaluation.

Responsibilities:
  - Capture verdicts, visited paths and accepted volume for callers and audits.

Inputs/Outputs:
  - Inputs: produced by concrete.classify and splitter.evaluate_ranges.
  - Outputs: immutable dataclasses consumed by the application facade.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.models import DomainBox, Record


@dataclass(frozen=True)
class RecordVerdict:
    record: Record
    accepted: bool
    path: tuple[str, ...]
    terminal: str


@dataclass(frozen=True)
class RangeEvaluation:
    start_volume: int
    accepted_volume: int
    rejected_volume: int
    accepted_boxes: tuple[DomainBox, ...]
    workflow_visits: int
