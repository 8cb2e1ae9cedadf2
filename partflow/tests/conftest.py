from __future__ import annotations

import pytest

from partflow.core.domain.models import Record
from partflow.core.domain.workflow_table import WorkflowTable
from partflow.core.engine.trace import set_evaluator_debug
from partflow.core.parsing.parser import parse_input

WORKFLOW_LINES = [
    "px{a<2006:qkq,m>2090:A,rfg}",
    "pv{a>1716:R,A}",
    "lnx{m>1548:A,A}",
    "rfg{s<537:gd,x>2440:R,A}",
    "qs{s>3448:A,lnx}",
    "qkq{x<1416:A,crn}",
    "crn{x>2662:A,R}",
    "in{s<1351:px,qqz}",
    "qqz{s>2770:qs,m<1801:hdj,R}",
    "gd{a>3333:R,R}",
    "hdj{m>838:A,pv}",
]

RECORD_LINES = [
    "{x=787,m=2655,a=1222,s=2876}",
    "{x=1679,m=44,a=2067,s=496}",
    "{x=2036,m=264,a=79,s=2244}",
    "{x=2461,m=1339,a=466,s=291}",
    "{x=2127,m=1623,a=2188,s=1013}",
]

SMALL_WORKFLOW_LINES = [
    "in{x<4:lo,m>7:A,hi}",
    "lo{a>5:R,s<3:A,mid}",
    "mid{x>2:A,m<5:R,A}",
    "hi{s>5:A,a<2:R,x>8:A,R}",
]


@pytest.fixture
def canonical_lines() -> list[str]:
    return WORKFLOW_LINES + [""] + RECORD_LINES


@pytest.fixture
def canonical_table() -> WorkflowTable:
    table, _ = parse_input(WORKFLOW_LINES)
    return table


@pytest.fixture
def canonical_records() -> list[Record]:
    _, records = parse_input(WORKFLOW_LINES + [""] + RECORD_LINES)
    return records


@pytest.fixture
def small_table() -> WorkflowTable:
    table, _ = parse_input(SMALL_WORKFLOW_LINES)
    return table


@pytest.fixture
def debug_messages():
    messages: list[str] = []
    set_evaluator_debug(messages.append)
    try:
        yield messages
    finally:
        set_evaluator_debug(None)
