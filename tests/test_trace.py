from __future__ import annotations

import pytest

from selector_list import IndexOutOfRangeError, SelectorList
from selector_list.ops import parse_op
from selector_list.trace import run_ops_with_trace


def test_trace_records_state_after_each_step() -> None:
    sl = SelectorList(["A", "B", "C"])
    ops = [parse_op(t) for t in ["select:2", "append:D", "insert:0:X", "remove:0"]]

    log = run_ops_with_trace(sl, ops)

    assert [e.step for e in log] == [1, 2, 3, 4]
    assert [e.current_index for e in log] == [2, 2, 3, 3]
    assert [e.current_item for e in log] == ["C", "C", "C", "D"]
    assert log[2].items == ("X", "A", "B", "C", "D")
    assert log[3].removed == "X"
    assert all(e.removed is None for e in log[:3])
    assert log[-1].op == ops[-1]


def test_trace_stops_at_first_failure() -> None:
    """
    Steps before the failing op stay applied; the failing op itself
    changes nothing.
    """
    sl = SelectorList(["A", "B"])
    ops = [parse_op(t) for t in ["append:C", "select:9", "append:D"]]

    with pytest.raises(IndexOutOfRangeError):
        run_ops_with_trace(sl, ops)

    assert sl.all_items() == ("A", "B", "C")
    assert sl.current_index() == 0


def test_empty_op_list_yields_empty_trace() -> None:
    sl = SelectorList(["A"])
    assert run_ops_with_trace(sl, []) == []
    assert sl.all_items() == ("A",)
