from collections import deque
from typing import Deque, Optional

from hunks.hunk import Hunk
from hunks.line import LineKind, LineRecord


class ContextAccumulator:
    """Working state of the hunk being assembled.

    ``equaled``, ``removed`` and ``inserted`` count only what this
    accumulator holds. ``trailing`` is the number of unchanged records
    buffered since the last change.
    """

    def __init__(self, start: Optional[int] = None):
        self.start = start
        self.lines: Deque[LineRecord] = deque()
        self.changed = False
        self.equaled = 0
        self.removed = 0
        self.inserted = 0
        self.trailing = 0

    def __len__(self) -> int:
        return len(self.lines)

    def push_context(self, line: LineRecord):
        if self.start is None:
            self.start = line.old_pos
        self.lines.append(line)
        self.equaled += 1
        if self.changed:
            self.trailing += 1

    def drop_front(self):
        line = self.lines.popleft()
        if line.kind != LineKind.UNCHANGED:
            raise AssertionError(f"Only context can be dropped from the front, got {line!r}")
        self.equaled -= 1
        self.start = line.old_pos + 1

    def push_change(self, line: LineRecord):
        self.lines.append(line)
        self.changed = True
        self.trailing = 0
        if line.kind.is_removal:
            self.removed += 1
        elif line.kind.is_insertion:
            self.inserted += 1

    def trim_trailing(self, keep: int) -> Deque[LineRecord]:
        """Cut trailing context down to ``keep`` records and return the cut ones."""
        cut: Deque[LineRecord] = deque()
        while self.trailing > keep:
            cut.appendleft(self.lines.pop())
            self.trailing -= 1
            self.equaled -= 1
        return cut

    def close(self, total_removed: int, total_inserted: int) -> Optional[Hunk]:
        """Turn the buffered records into a hunk, draining the queue.

        ``total_removed``/``total_inserted`` are the changed-line totals of
        every hunk emitted before this one; they translate the old-side
        start into the new side.
        """
        if self.start is None or not self.changed:
            return None
        lines = list(self.lines)
        self.lines.clear()
        return Hunk(
            old_index=self.start,
            new_index=self.start + total_inserted - total_removed,
            removed=self.equaled + self.removed,
            inserted=self.equaled + self.inserted,
            lines=lines,
        )

    def __repr__(self) -> str:
        return (f"ContextAccumulator(start={self.start}, changed={self.changed}, "
                f"equaled={self.equaled}, removed={self.removed}, inserted={self.inserted}, "
                f"buffered={len(self.lines)})")
