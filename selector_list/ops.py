from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from selector_list.selector import SelectorList


class OperationFormatError(ValueError):
    """Raised when an operation token or Op fails validation."""


class OpKind(str, Enum):
    """
    Textual mutation vocabulary for scripting a SelectorList.
    Mirrors the mutating operations one-to-one.
    """

    SELECT = "SELECT"
    APPEND = "APPEND"
    INSERT = "INSERT"
    REMOVE = "REMOVE"


@dataclass(frozen=True, slots=True)
class Op:
    kind: OpKind
    index: int | None = None
    item: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, OpKind):
            raise OperationFormatError(f"unknown operation kind: {self.kind!r}")
        needs_index = self.kind != OpKind.APPEND
        needs_item = self.kind in (OpKind.APPEND, OpKind.INSERT)
        name = self.kind.value.lower()
        if needs_index != (self.index is not None):
            raise OperationFormatError(
                f"{name}: index is {'required' if needs_index else 'not allowed'} (got {self.index!r})"
            )
        if needs_index and (isinstance(self.index, bool) or not isinstance(self.index, int)):
            raise OperationFormatError(f"{name}: index must be an int (got {self.index!r})")
        if needs_item != (self.item is not None):
            raise OperationFormatError(
                f"{name}: item is {'required' if needs_item else 'not allowed'} (got {self.item!r})"
            )
        if needs_item and not isinstance(self.item, str):
            raise OperationFormatError(f"{name}: item must be a str (got {self.item!r})")

    def __str__(self) -> str:
        parts = [self.kind.value.lower()]
        if self.index is not None:
            parts.append(str(self.index))
        if self.item is not None:
            parts.append(self.item)
        return ":".join(parts)


def _parse_index(token: str, raw: str) -> int:
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        raise OperationFormatError(f"{token!r}: index must be a non-negative integer (got {raw!r})")
    return int(raw)


def parse_op(token: str) -> Op:
    """Parse one operation token.

    Supported forms:
      select:<i>
      append:<item>
      insert:<i>:<item>
      remove:<i>

    The item is taken verbatim after the last required colon, so it may
    itself contain colons.
    """
    if not isinstance(token, str) or ":" not in token:
        raise OperationFormatError(f"{token!r}: expected '<kind>:<args>'")

    head, rest = token.split(":", 1)
    try:
        kind = OpKind(head.strip().upper())
    except ValueError:
        raise OperationFormatError(
            f"{token!r}: unknown operation {head!r} (expected select, append, insert or remove)"
        ) from None

    if kind == OpKind.APPEND:
        if not rest:
            raise OperationFormatError(f"{token!r}: append requires an item")
        return Op(kind, item=rest)

    if kind == OpKind.INSERT:
        if ":" not in rest:
            raise OperationFormatError(f"{token!r}: expected 'insert:<i>:<item>'")
        raw_index, item = rest.split(":", 1)
        if not item:
            raise OperationFormatError(f"{token!r}: insert requires an item")
        return Op(kind, index=_parse_index(token, raw_index), item=item)

    return Op(kind, index=_parse_index(token, rest))


def apply_op(selector: SelectorList[str], op: Op) -> str | None:
    """
    Apply op to selector in place.
    Returns the removed item for REMOVE, otherwise None.
    SelectorListError from the underlying operation propagates unchanged.
    """
    if op.kind == OpKind.SELECT:
        selector.select_index(op.index)
        return None
    if op.kind == OpKind.APPEND:
        selector.append(op.item)
        return None
    if op.kind == OpKind.INSERT:
        selector.insert_at(op.index, op.item)
        return None
    return selector.remove_at(op.index)
