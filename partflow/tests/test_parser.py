"""Tests for workflow and record line parsing."""

from __future__ import annotations

import pytest

from partflow.core.domain.enums import Attribute, Comparator, ErrorKind
from partflow.core.domain.errors import (
    EngineError,
    MalformedCondition,
    MalformedRecord,
    MalformedWorkflow,
    UnknownAttribute,
    UnknownComparator,
)
from partflow.core.domain.models import Condition, Record, Rule, Workflow
from partflow.core.parsing.parser import parse_condition, parse_input, parse_record, parse_workflow


def test_parse_condition() -> None:
    assert parse_condition("a<2006") == Condition(Attribute.A, Comparator.LESS_THAN, 2006)
    assert parse_condition("m>2090") == Condition(Attribute.M, Comparator.GREATER_THAN, 2090)


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("", MalformedCondition),
        ("x", MalformedCondition),
        ("x<", MalformedCondition),
        ("x<12a", MalformedCondition),
        ("q<5", UnknownAttribute),
        ("x=5", UnknownComparator),
    ],
)
def test_parse_condition_errors(text: str, error: type) -> None:
    with pytest.raises(error):
        parse_condition(text)


def test_parse_workflow() -> None:
    workflow = parse_workflow("px{a<2006:qkq,m>2090:A,rfg}")

    assert workflow == Workflow(
        name="px",
        rules=(
            Rule(Condition(Attribute.A, Comparator.LESS_THAN, 2006), "qkq"),
            Rule(Condition(Attribute.M, Comparator.GREATER_THAN, 2090), "A"),
        ),
        fallback="rfg",
    )


def test_parse_workflow_with_only_fallback() -> None:
    workflow = parse_workflow("fin{A}")

    assert workflow.rules == ()
    assert workflow.fallback == "A"


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("px a<2006:qkq,rfg", MalformedWorkflow),
        ("px{a<2006:qkq,rfg", MalformedWorkflow),
        ("{a<2006:qkq,rfg}", MalformedWorkflow),
        ("px{}", MalformedWorkflow),
        ("px{a<2006,rfg}", MalformedWorkflow),
        ("px{a<2006:,rfg}", MalformedWorkflow),
        ("px{a<2006:qkq,m>2090:A}", MalformedWorkflow),
        ("px{b<2006:qkq,rfg}", UnknownAttribute),
        ("px{a!2006:qkq,rfg}", UnknownComparator),
        ("px{a<x:qkq,rfg}", MalformedCondition),
    ],
)
def test_parse_workflow_errors(text: str, error: type) -> None:
    with pytest.raises(error):
        parse_workflow(text)


def test_parse_record() -> None:
    assert parse_record("{x=787,m=2655,a=1222,s=2876}") == Record.of(x=787, m=2655, a=1222, s=2876)
    assert parse_record("{s=4,a=3,m=2,x=1}") == Record.of(x=1, m=2, a=3, s=4)


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("x=1,m=2,a=3,s=4", MalformedRecord),
        ("{x=1,m=2,a=3}", MalformedRecord),
        ("{x=1,m=2,a=3,s=4,x=5}", MalformedRecord),
        ("{x=1,m=two,a=3,s=4}", MalformedRecord),
        ("{x=1,m2,a=3,s=4}", MalformedRecord),
        ("{x=1,m=2,a=3,q=4}", UnknownAttribute),
    ],
)
def test_parse_record_errors(text: str, error: type) -> None:
    with pytest.raises(error):
        parse_record(text)


def test_parse_input_sections(canonical_lines: list[str]) -> None:
    table, records = parse_input(canonical_lines + ["", ""])

    assert len(table) == 11
    assert table["in"].fallback == "qqz"
    assert len(records) == 5
    assert records[0] == Record.of(x=787, m=2655, a=1222, s=2876)


def test_parse_input_rejects_duplicate_workflow_names() -> None:
    with pytest.raises(MalformedWorkflow):
        parse_input(["in{x<5:A,R}", "in{R}"])


def test_parse_errors_expose_kind() -> None:
    with pytest.raises(EngineError) as excinfo:
        parse_record("{x=1,m=2,a=3,z=4}")

    assert excinfo.value.kind is ErrorKind.UNKNOWN_ATTRIBUTE
    assert isinstance(excinfo.value, ValueError)
