from typing import Dict, Iterator, Optional, Tuple

from hunks.hunk import Hunk
from hunks.line import LineKind, LineRecord

PairKey = Tuple[int, LineKind]


def pair_key(line: LineRecord) -> Optional[PairKey]:
    """Key of a replaced line, or ``None`` if it cannot take part in a pair.

    Both halves of a pair carry the old position of the removed line, so
    ``(old_pos, kind)`` identifies a line and ``(old_pos, kind.invert())``
    its counterpart.
    """
    if not line.kind.is_replaced or line.old_pos is None:
        return None
    return line.old_pos, line.kind


def inverted_key(line: LineRecord) -> Optional[PairKey]:
    key = pair_key(line)
    if key is None:
        return None
    pos, kind = key
    return pos, kind.invert()


class ReplacePairing:
    def __init__(self, lines: Dict[PairKey, LineRecord]):
        self._lines = lines

    @classmethod
    def from_hunk(cls, hunk: Hunk) -> 'ReplacePairing':
        lines: Dict[PairKey, LineRecord] = {}
        for line in hunk.lines:
            key = pair_key(line)
            if key is not None:
                lines[key] = line
        return cls(lines)

    def partner(self, line: LineRecord) -> Optional[LineRecord]:
        key = inverted_key(line)
        if key is None:
            return None
        return self._lines.get(key)

    def pairs(self) -> Iterator[Tuple[LineRecord, LineRecord]]:
        for (pos, kind), line in self._lines.items():
            if kind != LineKind.REPLACE_REMOVED:
                continue
            other = self._lines.get((pos, LineKind.REPLACE_INSERTED))
            if other is not None:
                yield line, other

    def __len__(self) -> int:
        return sum(1 for _ in self.pairs())
