"""Text parsers for workflow and record lines.

Responsibilities:
  - Turn already-read lines into Workflow, Condition and Record models.
  - Raise the specific EngineError subclass for each structural defect.
Must not:
  - Open files or read streams; callers hand in lines.
"""

from __future__ import annotations

import re
from typing import Iterable

from partflow.core.domain.enums import ATTRIBUTE_BY_TAG, COMPARATOR_BY_SYMBOL, Attribute
from partflow.core.domain.errors import (
    MalformedCondition,
    MalformedRecord,
    MalformedWorkflow,
    UnknownAttribute,
    UnknownComparator,
)
from partflow.core.domain.models import Condition, Record, Rule, Workflow
from partflow.core.domain.workflow_table import DEFAULT_ACCEPT, DEFAULT_REJECT, WorkflowTable

_INT_RE = re.compile(r"^-?[0-9]+$")
_WORKFLOW_RE = re.compile(r"^([^{}]*)\{([^{}]*)\}$")
_NAME_RE = re.compile(r"^[A-Za-z0-9_]+$")


def _parse_attribute(tag: str) -> Attribute:
    attribute = ATTRIBUTE_BY_TAG.get(tag)
    if attribute is None:
        raise UnknownAttribute(f"Unknown attribute: {tag!r}")
    return attribute


def parse_condition(text: str) -> Condition:
    if not text:
        raise MalformedCondition("Empty condition")
    attribute = _parse_attribute(text[0])
    if len(text) < 2:
        raise MalformedCondition(f"Missing comparator in condition: {text!r}")
    comparator = COMPARATOR_BY_SYMBOL.get(text[1])
    if comparator is None:
        raise UnknownComparator(f"Unknown comparator {text[1]!r} in condition: {text!r}")
    threshold = text[2:]
    if not _INT_RE.match(threshold):
        raise MalformedCondition(f"Threshold is not an integer in condition: {text!r}")
    return Condition(attribute=attribute, comparator=comparator, threshold=int(threshold))


def _parse_target(name: str, source: str) -> str:
    if not _NAME_RE.match(name):
        raise MalformedWorkflow(f"Invalid target name {name!r} in workflow: {source!r}")
    return name


def parse_workflow(text: str) -> Workflow:
    match = _WORKFLOW_RE.match(text.strip())
    if match is None:
        raise MalformedWorkflow(f"Missing braces in workflow: {text!r}")
    name, body = match.group(1), match.group(2)
    if not _NAME_RE.match(name):
        raise MalformedWorkflow(f"Invalid workflow name in: {text!r}")

    parts = body.split(",")
    *rule_parts, fallback = parts
    if ":" in fallback:
        raise MalformedWorkflow(f"Missing fallback in workflow: {text!r}")

    rules = []
    for part in rule_parts:
        pieces = part.split(":")
        if len(pieces) != 2:
            raise MalformedWorkflow(f"Rule {part!r} is not <condition>:<target> in workflow: {text!r}")
        condition_text, target = pieces
        rules.append(Rule(condition=parse_condition(condition_text), target=_parse_target(target, text)))

    return Workflow(name=name, rules=tuple(rules), fallback=_parse_target(fallback, text))


def parse_record(text: str) -> Record:
    stripped = text.strip()
    if not (stripped.startswith("{") and stripped.endswith("}")):
        raise MalformedRecord(f"Missing braces in record: {text!r}")

    values: dict[Attribute, int] = {}
    for pair in stripped[1:-1].split(","):
        if "=" not in pair:
            raise MalformedRecord(f"Missing '=' in record field {pair!r}")
        tag, raw = pair.split("=", 1)
        if not tag:
            raise MalformedRecord(f"Missing attribute in record field {pair!r}")
        attribute = _parse_attribute(tag)
        if attribute in values:
            raise MalformedRecord(f"Duplicate attribute {tag!r} in record: {text!r}")
        if not _INT_RE.match(raw):
            raise MalformedRecord(f"Value is not an integer in record field {pair!r}")
        values[attribute] = int(raw)

    missing = [attr.tag for attr in Attribute if attr not in values]
    if missing:
        raise MalformedRecord(f"Missing attributes {missing} in record: {text!r}")
    return Record(values=tuple(values[attr] for attr in Attribute))  # type: ignore[arg-type]


def parse_input(
    lines: Iterable[str],
    accept_name: str = DEFAULT_ACCEPT,
    reject_name: str = DEFAULT_REJECT,
) -> tuple[WorkflowTable, list[Record]]:
    workflows: list[Workflow] = []
    records: list[Record] = []
    in_records = False
    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            # First blank line after the workflows separates the two sections.
            in_records = in_records or bool(workflows)
            continue
        if in_records:
            records.append(parse_record(line))
        else:
            workflows.append(parse_workflow(line))
    table = WorkflowTable.from_workflows(workflows, accept_name=accept_name, reject_name=reject_name)
    return table, records
