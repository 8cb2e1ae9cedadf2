from __future__ import annotations

from typing import Iterable, Optional

from partflow.core.domain.models import DomainBox, Record
from partflow.core.domain.workflow_table import WorkflowTable
from partflow.core.engine.concrete import classify, sum_accepted_ratings
from partflow.core.engine.result import RangeEvaluation, RecordVerdict
from partflow.core.engine.splitter import evaluate_ranges
from partflow.core.parsing.parser import parse_input
from partflow.engine_config import DEFAULT_CONFIG, EngineConfig


class PartflowApplication:
    def __init__(self, table: WorkflowTable, config: EngineConfig = DEFAULT_CONFIG) -> None:
        config.validate()
        if (table.accept_name, table.reject_name) != (config.accept_name, config.reject_name):
            raise ValueError(
                "WorkflowTable sink names "
                f"{table.accept_name!r}/{table.reject_name!r} do not match config "
                f"{config.accept_name!r}/{config.reject_name!r}"
            )
        self._table = table
        self._config = config

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], config: EngineConfig = DEFAULT_CONFIG
    ) -> tuple["PartflowApplication", list[Record]]:
        table, records = parse_input(lines, accept_name=config.accept_name, reject_name=config.reject_name)
        return cls(table, config), records

    @property
    def table(self) -> WorkflowTable:
        return self._table

    @property
    def config(self) -> EngineConfig:
        return self._config

    def classify(self, record: Record) -> RecordVerdict:
        return classify(self._table, record, self._config)

    def classify_all(self, records: Iterable[Record]) -> list[RecordVerdict]:
        return [classify(self._table, record, self._config) for record in records]

    def sum_accepted_ratings(self, records: Iterable[Record]) -> int:
        return sum_accepted_ratings(self._table, records, self._config)

    def evaluate_ranges(self, box: Optional[DomainBox] = None) -> RangeEvaluation:
        return evaluate_ranges(self._table, self._config, box)

    def count_accepted_combinations(self, box: Optional[DomainBox] = None) -> int:
        return self.evaluate_ranges(box).accepted_volume
