from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from selector_list.ops import Op, apply_op
from selector_list.selector import SelectorList


@dataclass(frozen=True)
class StepTrace:
    step: int
    op: Op
    # AFTER the op was applied
    items: tuple[str, ...]
    current_index: int
    current_item: str
    # Only set for REMOVE
    removed: str | None = None


def snapshot_step(step: int, op: Op, selector: SelectorList[str], removed: str | None = None) -> StepTrace:
    """
    Create a trace snapshot of selector after op was applied.

    This function does not modify the selector.
    """
    return StepTrace(
        step=step,
        op=op,
        items=selector.all_items(),
        current_index=selector.current_index(),
        current_item=selector.current_item(),
        removed=removed,
    )


def run_ops_with_trace(selector: SelectorList[str], ops: Iterable[Op]) -> list[StepTrace]:
    """
    Apply ops in order, returning a per-step trace log (steps numbered from 1).

    Notes:
    - Uses ops.apply_op() for behavior (same rules) + observability.
    - Stops at the first failing op and lets its error propagate; steps
      already applied stay applied.
    """
    log: list[StepTrace] = []
    for step, op in enumerate(ops, start=1):
        removed = apply_op(selector, op)
        log.append(snapshot_step(step, op, selector, removed))
    return log
