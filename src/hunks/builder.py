import logging
from enum import Enum
from typing import List, Sequence, Iterable, Any

from alignment.utils import EditOp, EditScriptError, OpType
from hunks.context import ContextAccumulator
from hunks.hunk import Hunk, CompareResult
from hunks.line import LineRecord

logger = logging.getLogger(__name__)


class BuilderState(str, Enum):
    GATHERING = 'gathering'
    IN_CHANGE = 'in_change'


class HunkBuilder:
    """Assembles an edit script into bounded-context hunks.

    Each call to :meth:`apply` consumes one operation and returns the
    hunks that operation completed, so every state transition can be
    observed from the outside. :meth:`finish` closes the last hunk.

    While gathering, at most ``context_radius`` unchanged lines are kept
    as leading context. After a change, up to ``2 * context_radius``
    unchanged lines are buffered; one more forces a split where the first
    ``context_radius`` lines close the hunk and the last
    ``context_radius`` become the next hunk's leading context.
    """

    def __init__(self, left: Sequence[Any], right: Sequence[Any], context_radius: int = 3):
        if context_radius < 0:
            raise ValueError(f"context_radius must be >= 0, got {context_radius}")
        self.left = left
        self.right = right
        self.radius = context_radius
        self.accumulator = ContextAccumulator()
        self.hunks: List[Hunk] = []
        self.total_removed = 0
        self.total_inserted = 0
        self.old_cursor = 0
        self.new_cursor = 0
        self._finished = False
        self._handlers = {
            OpType.EQUAL: self._equal,
            OpType.DELETE: self._delete,
            OpType.INSERT: self._insert,
            OpType.REPLACE: self._replace,
        }

    @property
    def state(self) -> BuilderState:
        return BuilderState.IN_CHANGE if self.accumulator.changed else BuilderState.GATHERING

    @property
    def finished(self) -> bool:
        return self._finished

    def apply(self, action: EditOp) -> List[Hunk]:
        if self._finished:
            raise EditScriptError(f"Operation {action!r} applied after finish()")
        handler = self._handlers.get(action.op)
        if handler is None:
            raise EditScriptError(f"Unknown edit operation: {action.op!r}")
        self._check(action)
        emitted = handler(action)
        self.old_cursor += action.old_length
        self.new_cursor += action.new_length
        self.hunks.extend(emitted)
        return emitted

    def finish(self) -> List[Hunk]:
        if self._finished:
            raise EditScriptError("finish() called twice")
        if self.old_cursor != len(self.left) or self.new_cursor != len(self.right):
            raise EditScriptError(
                f"Script stopped at old {self.old_cursor}/{len(self.left)}, "
                f"new {self.new_cursor}/{len(self.right)}")
        self._finished = True
        self.accumulator.trim_trailing(self.radius)
        emitted = self._close()
        self.accumulator = ContextAccumulator()
        self.hunks.extend(emitted)
        return emitted

    def build(self, script: Iterable[EditOp]) -> CompareResult:
        for action in script:
            self.apply(action)
        self.finish()
        return CompareResult(self.hunks, self.left, self.right)

    def _check(self, action: EditOp):
        if action.old_length < 0 or action.new_length < 0:
            raise EditScriptError(f"Negative length in {action!r}")
        if action.op == OpType.EQUAL and action.old_length != action.new_length:
            raise EditScriptError(f"Unbalanced equal run {action!r}")
        if action.old_index is not None and action.old_index != self.old_cursor:
            raise EditScriptError(
                f"{action!r} starts at old index {action.old_index}, expected {self.old_cursor}")
        if action.new_index is not None and action.new_index != self.new_cursor:
            raise EditScriptError(
                f"{action!r} starts at new index {action.new_index}, expected {self.new_cursor}")
        if self.old_cursor + action.old_length > len(self.left):
            raise EditScriptError(f"{action!r} runs past the end of the old sequence")
        if self.new_cursor + action.new_length > len(self.right):
            raise EditScriptError(f"{action!r} runs past the end of the new sequence")

    def _mark_change_start(self):
        if self.accumulator.start is None:
            self.accumulator.start = self.old_cursor

    def _equal(self, action: EditOp) -> List[Hunk]:
        emitted: List[Hunk] = []
        for k in range(action.old_length):
            i = self.old_cursor + k
            j = self.new_cursor + k
            acc = self.accumulator
            acc.push_context(LineRecord.unchanged(i, j, self.left[i]))
            if not acc.changed:
                if acc.equaled > self.radius:
                    acc.drop_front()
            elif acc.trailing > 2 * self.radius:
                emitted.extend(self._split(next_old=i + 1))
        return emitted

    def _delete(self, action: EditOp) -> List[Hunk]:
        self._mark_change_start()
        for i in range(self.old_cursor, self.old_cursor + action.old_length):
            self.accumulator.push_change(LineRecord.removed(i, self.left[i]))
        return []

    def _insert(self, action: EditOp) -> List[Hunk]:
        self._mark_change_start()
        for j in range(self.new_cursor, self.new_cursor + action.new_length):
            self.accumulator.push_change(LineRecord.inserted(j, self.right[j]))
        return []

    def _replace(self, action: EditOp) -> List[Hunk]:
        self._mark_change_start()
        old, new = self.old_cursor, self.new_cursor
        old_len, new_len = action.old_length, action.new_length
        for k in range(old_len):
            paired = new + k if k < new_len else None
            self.accumulator.push_change(LineRecord.replace_removed(old + k, paired, self.left[old + k]))
        for k in range(new_len):
            paired = old + k if k < old_len else None
            self.accumulator.push_change(LineRecord.replace_inserted(paired, new + k, self.right[new + k]))
        return []

    def _split(self, next_old: int) -> List[Hunk]:
        cut = self.accumulator.trim_trailing(self.radius)
        emitted = self._close()
        retained = list(cut)[len(cut) - self.radius:] if self.radius else []
        fresh = ContextAccumulator(start=next_old - len(retained))
        for line in retained:
            fresh.push_context(line)
        logger.debug("Split at old index %d, %d lines carried as leading context",
                     next_old, len(retained))
        self.accumulator = fresh
        return emitted

    def _close(self) -> List[Hunk]:
        acc = self.accumulator
        hunk = acc.close(self.total_removed, self.total_inserted)
        self.total_removed += acc.removed
        self.total_inserted += acc.inserted
        if hunk is None:
            return []
        logger.debug("Emitted %r", hunk)
        return [hunk]
