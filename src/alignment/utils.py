from typing import TypeVar, List, NamedTuple, Optional, Callable, Sequence
from enum import Enum

T = TypeVar('T')

Equality = Callable[[T, T], bool]


class EditScriptError(ValueError):
    """Raised when an edit script breaks the ordering/coverage contract."""


class OpType(str, Enum):
    EQUAL = 'equal'
    DELETE = 'delete'
    INSERT = 'insert'
    REPLACE = 'replace'


class EditOp(NamedTuple):
    """One edit-script operation over 0-based half-open index ranges.

    ``old_index`` of an INSERT and ``new_index`` of a DELETE are optional:
    the operation covers an empty range on that side, and the position is
    implied by the preceding operations.
    """
    op: OpType
    old_index: Optional[int]
    old_length: int
    new_index: Optional[int]
    new_length: int

    @property
    def old_end(self) -> Optional[int]:
        if self.old_index is None:
            return None
        return self.old_index + self.old_length

    @property
    def new_end(self) -> Optional[int]:
        if self.new_index is None:
            return None
        return self.new_index + self.new_length

    def __repr__(self) -> str:
        if self.op == OpType.EQUAL:
            return f"Equal({self.old_index}, {self.new_index}, {self.old_length})"
        if self.op == OpType.DELETE:
            return f"Delete({self.old_index}, {self.old_length})"
        if self.op == OpType.INSERT:
            return f"Insert({self.new_index}, {self.new_length})"
        return (f"Replace({self.old_index}, {self.old_length}, "
                f"{self.new_index}, {self.new_length})")


EditScript = List[EditOp]


def make_equal(old_index: int, new_index: int, length: int) -> EditOp:
    return EditOp(OpType.EQUAL, old_index, length, new_index, length)


def make_delete(old_index: int, length: int, new_index: Optional[int] = None) -> EditOp:
    return EditOp(OpType.DELETE, old_index, length, new_index, 0)


def make_insert(new_index: int, length: int, old_index: Optional[int] = None) -> EditOp:
    return EditOp(OpType.INSERT, old_index, 0, new_index, length)


def make_replace(old_index: int, old_length: int, new_index: int, new_length: int) -> EditOp:
    return EditOp(OpType.REPLACE, old_index, old_length, new_index, new_length)


def default_eq(a, b) -> bool:
    return a == b


def ignore_case(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def ignore_whitespace(a: str, b: str) -> bool:
    return a.strip() == b.strip()


def validate_script(script: Sequence[EditOp], old_length: int, new_length: int) -> None:
    """Check that ``script`` exactly covers ``[0, old_length)`` and ``[0, new_length)``."""
    old_pos = 0
    new_pos = 0
    for n, action in enumerate(script):
        if action.old_length < 0 or action.new_length < 0:
            raise EditScriptError(f"Negative length in operation {n}: {action!r}")
        if action.old_index is not None and action.old_index != old_pos:
            raise EditScriptError(
                f"Operation {n} starts at old index {action.old_index}, expected {old_pos}")
        if action.new_index is not None and action.new_index != new_pos:
            raise EditScriptError(
                f"Operation {n} starts at new index {action.new_index}, expected {new_pos}")
        old_pos += action.old_length
        new_pos += action.new_length
    if old_pos != old_length or new_pos != new_length:
        raise EditScriptError(
            f"Script covers {old_pos} of {old_length} old and {new_pos} of {new_length} new elements")


def tokenize_lines(text: str) -> List[str]:
    if not text:
        return []
    return text.splitlines()


def tokenize_chars(text: str) -> List[str]:
    # str iteration yields code points, never partial UTF-8 sequences
    return list(text)
