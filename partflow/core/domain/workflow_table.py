"""Read-only workflow graph keyed by workflow name.

Responsibilities:
  - Resolve workflow names and expose graph edges (rule targets + fallback).
  - Report dangling targets and cycles reachable from an entry workflow.

Invariants:
  - Built once; the mapping is never mutated after construction.
  - Sink names terminate traversal and never name a workflow.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .errors import CyclicWorkflow, MalformedWorkflow, UnknownWorkflow
from .models import Workflow

DEFAULT_ACCEPT = "A"
DEFAULT_REJECT = "R"


class WorkflowTable(Mapping[str, Workflow]):
    def __init__(
        self,
        workflows: Mapping[str, Workflow],
        accept_name: str = DEFAULT_ACCEPT,
        reject_name: str = DEFAULT_REJECT,
    ) -> None:
        for sink in (accept_name, reject_name):
            if sink in workflows:
                raise MalformedWorkflow(f"Workflow name collides with sink: {sink!r}")
        self._workflows = MappingProxyType(dict(workflows))
        self.accept_name = accept_name
        self.reject_name = reject_name

    @classmethod
    def from_workflows(
        cls,
        workflows: Iterable[Workflow],
        accept_name: str = DEFAULT_ACCEPT,
        reject_name: str = DEFAULT_REJECT,
    ) -> "WorkflowTable":
        by_name: dict[str, Workflow] = {}
        for workflow in workflows:
            if workflow.name in by_name:
                raise MalformedWorkflow(f"Duplicate workflow name: {workflow.name!r}")
            by_name[workflow.name] = workflow
        return cls(by_name, accept_name=accept_name, reject_name=reject_name)

    def __getitem__(self, name: str) -> Workflow:
        return self._workflows[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._workflows)

    def __len__(self) -> int:
        return len(self._workflows)

    @property
    def sinks(self) -> frozenset[str]:
        return frozenset((self.accept_name, self.reject_name))

    def is_sink(self, name: str) -> bool:
        return name == self.accept_name or name == self.reject_name

    def get_workflow(self, name: str) -> Workflow:
        workflow = self._workflows.get(name)
        if workflow is None:
            raise UnknownWorkflow(name)
        return workflow

    def names(self) -> list[str]:
        return list(self._workflows)

    def successors(self, name: str) -> list[str]:
        seen: list[str] = []
        for target in self.get_workflow(name).targets():
            if target not in seen:
                seen.append(target)
        return seen

    def unresolved_targets(self) -> list[tuple[str, str]]:
        missing = []
        for name, workflow in self._workflows.items():
            for target in workflow.targets():
                if not self.is_sink(target) and target not in self._workflows:
                    missing.append((name, target))
        return missing

    def topological_order(self, entry: str) -> list[str]:
        """Workflows reachable from ``entry``, each listed before its successors.

        Raises UnknownWorkflow for a dangling reachable target and
        CyclicWorkflow when a reachable workflow can reach itself.
        """
        if self.is_sink(entry):
            return []
        postorder: list[str] = []
        done: set[str] = set()
        on_path: list[str] = []
        stack: list[tuple[str, Iterator[str]]] = [(entry, iter(self.successors(entry)))]
        on_path.append(entry)
        while stack:
            name, pending = stack[-1]
            advanced = False
            for target in pending:
                if self.is_sink(target) or target in done:
                    continue
                if target in on_path:
                    cycle = on_path[on_path.index(target) :] + [target]
                    raise CyclicWorkflow(cycle)
                stack.append((target, iter(self.successors(target))))
                on_path.append(target)
                advanced = True
                break
            if not advanced:
                stack.pop()
                on_path.pop()
                done.add(name)
                postorder.append(name)
        postorder.reverse()
        return postorder
