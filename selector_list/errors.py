from __future__ import annotations


class SelectorListError(Exception):
    """Base class for errors raised by SelectorList operations."""


class EmptyInputError(SelectorListError, ValueError):
    """Raised when a SelectorList is constructed from zero items."""


class IndexOutOfRangeError(SelectorListError, IndexError):
    """Raised when an index-taking operation is given an index outside its bound."""


class CannotRemoveLastItemError(SelectorListError, ValueError):
    """Raised when removal would leave the SelectorList empty."""
