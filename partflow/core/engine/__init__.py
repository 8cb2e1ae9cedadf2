"""Workflow graph evaluation utilities.

Responsibilities:
  - Provide the concrete, range-splitting and vectorized evaluators plus result types.
  - Must not parse text; consumes an already-built WorkflowTable.
"""
