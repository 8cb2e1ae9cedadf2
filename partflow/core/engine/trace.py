"""Debug hook shared by the evaluators.

Messages are single-line KEY=value traces; nothing is emitted unless a hook
is installed with set_evaluator_debug.
"""

from __future__ import annotations

from typing import Callable

_DEBUG_FN: Callable[[str], None] | None = None


def set_evaluator_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def debug_enabled() -> bool:
    return _DEBUG_FN is not None


def emit(msg: str) -> None:
    if _DEBUG_FN is not None:
        _DEBUG_FN(msg)
