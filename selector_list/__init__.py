"""
Selector List

Core modules:
- selector: SelectorList, an ordered item list with exactly one current item
- errors: exceptions raised by SelectorList operations
- ops: textual operation vocabulary for scripting a SelectorList
- trace: helpers for producing human-readable step traces (no behavior changes)
"""
from selector_list.errors import (
    CannotRemoveLastItemError,
    EmptyInputError,
    IndexOutOfRangeError,
    SelectorListError,
)
from selector_list.selector import SelectorList

__all__ = [
    "SelectorList",
    "SelectorListError",
    "EmptyInputError",
    "IndexOutOfRangeError",
    "CannotRemoveLastItemError",
]
