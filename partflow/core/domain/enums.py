"""Domain enums for part attributes, comparators and error kinds.

Responsibilities:
  - Define the closed Attribute and Comparator tags used by conditions.
  - Provide stable error kinds and their audit metadata.

Invariants:
  - Attribute ordinals are fixed (x=0, m=1, a=2, s=3) and index records and boxes.
  - ErrorKind metadata must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class Attribute(IntEnum):
    X = 0
    M = 1
    A = 2
    S = 3

    @property
    def tag(self) -> str:
        return self.name.lower()


class Comparator(Enum):
    LESS_THAN = "<"
    GREATER_THAN = ">"


ATTRIBUTE_BY_TAG: dict[str, Attribute] = {attr.tag: attr for attr in Attribute}
COMPARATOR_BY_SYMBOL: dict[str, Comparator] = {comp.value: comp for comp in Comparator}


class ErrorCategory(Enum):
    INPUT = "INPUT"
    GRAPH = "GRAPH"


class ErrorKind(Enum):
    MALFORMED_CONDITION = "MALFORMED_CONDITION"
    MALFORMED_WORKFLOW = "MALFORMED_WORKFLOW"
    MALFORMED_RECORD = "MALFORMED_RECORD"
    UNKNOWN_ATTRIBUTE = "UNKNOWN_ATTRIBUTE"
    UNKNOWN_COMPARATOR = "UNKNOWN_COMPARATOR"
    UNKNOWN_WORKFLOW = "UNKNOWN_WORKFLOW"
    CYCLIC_WORKFLOW = "CYCLIC_WORKFLOW"


ERROR_METADATA: dict[ErrorKind, dict[str, object]] = {
    ErrorKind.MALFORMED_CONDITION: {
        "category": ErrorCategory.INPUT,
        "message": "Condition text is not of the form <attr><op><int>.",
    },
    ErrorKind.MALFORMED_WORKFLOW: {
        "category": ErrorCategory.INPUT,
        "message": "Workflow text is not of the form name{cond:target,...,fallback}.",
    },
    ErrorKind.MALFORMED_RECORD: {
        "category": ErrorCategory.INPUT,
        "message": "Record text is not of the form {x=..,m=..,a=..,s=..}.",
    },
    ErrorKind.UNKNOWN_ATTRIBUTE: {
        "category": ErrorCategory.INPUT,
        "message": "Attribute tag is not one of x, m, a, s.",
    },
    ErrorKind.UNKNOWN_COMPARATOR: {
        "category": ErrorCategory.INPUT,
        "message": "Comparator is not '<' or '>'.",
    },
    ErrorKind.UNKNOWN_WORKFLOW: {
        "category": ErrorCategory.GRAPH,
        "message": "Target name has no workflow and is not a sink.",
    },
    ErrorKind.CYCLIC_WORKFLOW: {
        "category": ErrorCategory.GRAPH,
        "message": "Workflow graph revisits a workflow on one evaluation path.",
    },
}


_missing = [kind for kind in ErrorKind if kind not in ERROR_METADATA]
if _missing:
    raise RuntimeError(f"Missing ERROR_METADATA for: {[m.value for m in _missing]}")

_extra = [k for k in ERROR_METADATA.keys() if k not in set(ErrorKind)]
if _extra:
    raise RuntimeError(f"Extra ERROR_METADATA keys: {[e.value for e in _extra]}")
