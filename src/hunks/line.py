from typing import NamedTuple, Optional, Any
from enum import Enum


class LineKind(str, Enum):
    REMOVED = 'removed'
    INSERTED = 'inserted'
    REPLACE_REMOVED = 'replace_removed'
    REPLACE_INSERTED = 'replace_inserted'
    UNCHANGED = 'unchanged'

    def invert(self) -> 'LineKind':
        return _INVERTED.get(self, self)

    @property
    def sign(self) -> str:
        if self.is_insertion:
            return '+'
        if self.is_removal:
            return '-'
        return ' '

    @property
    def is_replaced(self) -> bool:
        return self in (LineKind.REPLACE_REMOVED, LineKind.REPLACE_INSERTED)

    @property
    def is_insertion(self) -> bool:
        return self in (LineKind.INSERTED, LineKind.REPLACE_INSERTED)

    @property
    def is_removal(self) -> bool:
        return self in (LineKind.REMOVED, LineKind.REPLACE_REMOVED)


_INVERTED = {
    LineKind.REMOVED: LineKind.INSERTED,
    LineKind.INSERTED: LineKind.REMOVED,
    LineKind.REPLACE_REMOVED: LineKind.REPLACE_INSERTED,
    LineKind.REPLACE_INSERTED: LineKind.REPLACE_REMOVED,
}


class LineRecord(NamedTuple):
    """One element of a hunk.

    ``content`` is the element object taken from the caller's sequence, not
    a copy. Positions are 0-based; a side that does not exist is ``None``.
    """
    kind: LineKind
    content: Any
    old_pos: Optional[int]
    new_pos: Optional[int]

    @classmethod
    def unchanged(cls, old_pos: int, new_pos: int, content: Any) -> 'LineRecord':
        return cls(LineKind.UNCHANGED, content, old_pos, new_pos)

    @classmethod
    def inserted(cls, new_pos: int, content: Any) -> 'LineRecord':
        return cls(LineKind.INSERTED, content, None, new_pos)

    @classmethod
    def removed(cls, old_pos: int, content: Any) -> 'LineRecord':
        return cls(LineKind.REMOVED, content, old_pos, None)

    @classmethod
    def replace_inserted(cls, old_pos: Optional[int], new_pos: int, content: Any) -> 'LineRecord':
        return cls(LineKind.REPLACE_INSERTED, content, old_pos, new_pos)

    @classmethod
    def replace_removed(cls, old_pos: int, new_pos: Optional[int], content: Any) -> 'LineRecord':
        return cls(LineKind.REPLACE_REMOVED, content, old_pos, new_pos)

    @property
    def sign(self) -> str:
        return self.kind.sign

    def with_content(self, content: Any) -> 'LineRecord':
        return self._replace(content=content)

    def __repr__(self) -> str:
        return f"LineRecord({self.kind.value}, {self.content!r}, old={self.old_pos}, new={self.new_pos})"
