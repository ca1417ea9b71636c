from typing import TypeVar, List, Dict, Optional, Sequence
from .utils import (
    EditScript, Equality, OpType, default_eq,
    make_equal, make_delete, make_insert, make_replace
)

T = TypeVar('T')


class MyersDiff:
    """Greedy O(ND) shortest edit script between two sequences.

    Elements are compared with ``eq`` so the same engine serves lines and
    single code points. Runs of deletions and insertions that sit between
    two matches are coalesced into one REPLACE operation.
    """

    def __init__(self, original: Sequence[T], modified: Sequence[T],
                 eq: Optional[Equality] = None):
        self.original = original
        self.modified = modified
        self.eq = eq or default_eq
        self.n = len(original)
        self.m = len(modified)
        self._trace: List[Dict[int, int]] = []

    def compute(self) -> EditScript:
        if self.n == 0 and self.m == 0:
            return []
        if self.n == 0:
            return [make_insert(0, self.m, old_index=0)]
        if self.m == 0:
            return [make_delete(0, self.n, new_index=0)]
        self._trace = self._find_path()
        return coalesce_steps(self._trace_path())

    def _find_path(self) -> List[Dict[int, int]]:
        n, m = self.n, self.m
        max_d = n + m
        v: Dict[int, int] = {1: 0}
        trace: List[Dict[int, int]] = []
        for d in range(max_d + 1):
            trace.append(v.copy())
            for k in range(-d, d + 1, 2):
                if k == -d or (k != d and v.get(k - 1, 0) < v.get(k + 1, 0)):
                    x = v.get(k + 1, 0)
                else:
                    x = v.get(k - 1, 0) + 1
                y = x - k
                while x < n and y < m and self.eq(self.original[x], self.modified[y]):
                    x += 1
                    y += 1
                v[k] = x
                if x >= n and y >= m:
                    return trace
        return trace

    def _trace_path(self) -> List[OpType]:
        x, y = self.n, self.m
        steps_reversed: List[OpType] = []
        for d in range(len(self._trace) - 1, -1, -1):
            v = self._trace[d]
            k = x - y
            if k == -d or (k != d and v.get(k - 1, 0) < v.get(k + 1, 0)):
                prev_k = k + 1
            else:
                prev_k = k - 1
            prev_x = v.get(prev_k, 0)
            prev_y = prev_x - prev_k
            while x > prev_x and y > prev_y:
                x -= 1
                y -= 1
                steps_reversed.append(OpType.EQUAL)
            if d > 0:
                if x == prev_x:
                    y -= 1
                    steps_reversed.append(OpType.INSERT)
                else:
                    x -= 1
                    steps_reversed.append(OpType.DELETE)
        steps_reversed.reverse()
        return steps_reversed


def coalesce_steps(steps: Sequence[OpType]) -> EditScript:
    """Group single-element steps into range operations."""
    script: EditScript = []
    old = new = 0
    i = 0
    while i < len(steps):
        if steps[i] == OpType.EQUAL:
            start = i
            while i < len(steps) and steps[i] == OpType.EQUAL:
                i += 1
            script.append(make_equal(old, new, i - start))
            old += i - start
            new += i - start
            continue
        deleted = inserted = 0
        while i < len(steps) and steps[i] != OpType.EQUAL:
            if steps[i] == OpType.DELETE:
                deleted += 1
            else:
                inserted += 1
            i += 1
        if deleted and inserted:
            script.append(make_replace(old, deleted, new, inserted))
        elif deleted:
            script.append(make_delete(old, deleted, new_index=new))
        else:
            script.append(make_insert(new, inserted, old_index=old))
        old += deleted
        new += inserted
    return script


def align(original: Sequence[T], modified: Sequence[T],
          eq: Optional[Equality] = None) -> EditScript:
    return MyersDiff(original, modified, eq).compute()
