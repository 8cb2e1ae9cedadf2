"""Closed error hierarchy for parsing and graph evaluation.

Every error carries its ErrorKind so callers can branch on the failure
category instead of the message text.
"""

from __future__ import annotations

from .enums import ERROR_METADATA, ErrorCategory, ErrorKind


class EngineError(ValueError):
    kind: ErrorKind

    @property
    def category(self) -> ErrorCategory:
        return ERROR_METADATA[self.kind]["category"]  # type: ignore[return-value]


class MalformedCondition(EngineError):
    kind = ErrorKind.MALFORMED_CONDITION


class MalformedWorkflow(EngineError):
    kind = ErrorKind.MALFORMED_WORKFLOW


class MalformedRecord(EngineError):
    kind = ErrorKind.MALFORMED_RECORD


class UnknownAttribute(EngineError):
    kind = ErrorKind.UNKNOWN_ATTRIBUTE


class UnknownComparator(EngineError):
    kind = ErrorKind.UNKNOWN_COMPARATOR


class UnknownWorkflow(EngineError):
    kind = ErrorKind.UNKNOWN_WORKFLOW

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown workflow: {name!r}")
        self.name = name


class CyclicWorkflow(EngineError):
    kind = ErrorKind.CYCLIC_WORKFLOW

    def __init__(self, path: list[str]) -> None:
        super().__init__(f"Cyclic workflow path: {' -> '.join(path)}")
        self.path = path
