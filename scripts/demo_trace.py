from __future__ import annotations

from selector_list.ops import parse_op
from selector_list.selector import SelectorList
from selector_list.trace import run_ops_with_trace


def main() -> None:
    selector = SelectorList(["A", "B", "C"])
    ops = [parse_op(t) for t in ["select:2", "append:D", "insert:0:X", "remove:0"]]

    print(f"Step  0 | {'start':<10s} | current={selector.current_item()} (index {selector.current_index()})")

    log = run_ops_with_trace(selector, ops)

    for entry in log:
        removed = f"  removed={entry.removed}" if entry.removed is not None else ""
        print(
            f"Step {entry.step:2d} | {str(entry.op):<10s} | "
            f"current={entry.current_item} (index {entry.current_index}){removed}"
        )
        for idx, item in enumerate(entry.items):
            # Mark the current item
            marker = "*" if idx == entry.current_index else " "
            print(f"  {marker} {idx}: {item}")


if __name__ == "__main__":
    main()
