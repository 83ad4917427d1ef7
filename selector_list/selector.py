from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from selector_list.errors import (
    CannotRemoveLastItemError,
    EmptyInputError,
    IndexOutOfRangeError,
)

T = TypeVar("T")


class SelectorList(Generic[T]):
    """
    An ordered row of items where exactly one item is "current" at any time,
    like a row of buttons with exactly one pressed.

        modes = SelectorList(["On", "Off", "Auto"])      # current is "On"
        modes = SelectorList(["On", "Off"], start_index=1)
        modes.select_index(2)
        modes.insert_at(1, "Eco")
        removed = modes.remove_at(0)

    Rules:
    - The item list is never empty and the cursor always names a valid item.
    - Every bound check happens before any mutation, so a failed call leaves
      the list unchanged.
    - Negative indices are out of range (no wraparound).
    """

    __slots__ = ("_items", "_cursor")

    def __init__(self, items: Iterable[T], start_index: int = 0) -> None:
        materialized: list[T] = list(items)
        if not materialized:
            raise EmptyInputError("SelectorList: must supply at least one item")
        if not 0 <= start_index < len(materialized):
            raise IndexOutOfRangeError(
                f"SelectorList: start_index {start_index} out of bounds (len={len(materialized)})"
            )
        self._items = materialized
        self._cursor = start_index

    @classmethod
    def create_at(cls, items: Iterable[T], start_index: int) -> SelectorList[T]:
        """Same as the constructor with an explicit starting cursor."""
        return cls(items, start_index=start_index)

    # ----------------------------
    # Inspection
    # ----------------------------

    def current_item(self) -> T:
        return self._items[self._cursor]

    def current_index(self) -> int:
        return self._cursor

    def all_items(self) -> tuple[T, ...]:
        """Read-only snapshot of the items, in current order."""
        return tuple(self._items)

    def length(self) -> int:
        return len(self._items)

    def to_display_string(self) -> str:
        return f"items={self._items!r}, current_index={self._cursor}, current={self.current_item()}"

    # ----------------------------
    # Mutation
    # ----------------------------

    def select_index(self, i: int) -> None:
        """Make item i current. Raises IndexOutOfRangeError if i is not in range(len)."""
        self._check_index("select_index", i, len(self._items))
        self._cursor = i

    def append(self, item: T) -> None:
        # Nothing before the cursor moves, so it still names the same item.
        self._items.append(item)

    def insert_at(self, i: int, item: T) -> None:
        """
        Insert item so it becomes element i (i == len appends).

        Inserting at or before the cursor bumps the cursor forward so the
        same item stays current.
        """
        self._check_index("insert_at", i, len(self._items) + 1)
        self._items.insert(i, item)
        if i <= self._cursor:
            self._cursor += 1

    def remove_at(self, i: int) -> T:
        """
        Remove and return item i.

        The cursor is only clamped when it falls past the end; removing an
        item before the cursor leaves it numerically unchanged, so a different
        item becomes current.
        """
        self._check_index("remove_at", i, len(self._items))
        if len(self._items) == 1:
            raise CannotRemoveLastItemError(
                "SelectorList.remove_at: cannot remove the only remaining item"
            )
        removed = self._items.pop(i)
        if self._cursor >= len(self._items):
            self._cursor = len(self._items) - 1
        return removed

    # ----------------------------
    # Python protocol
    # ----------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, start_index={self._cursor})"

    @staticmethod
    def _check_index(op: str, i: int, limit: int) -> None:
        if not 0 <= i < limit:
            raise IndexOutOfRangeError(f"SelectorList.{op}: index {i} out of bounds (limit={limit})")
