from typing import List, Tuple, Sequence, Iterator, Optional, Any

from hunks.line import LineKind, LineRecord


class Hunk:
    """A group of changed lines with bounded unchanged context.

    ``old_index``/``new_index`` are 0-based; ``old_start``/``new_start``
    are the 1-based line numbers used in headers. ``removed`` and
    ``inserted`` count context plus changed lines on each side, the way a
    unified diff header does.
    """

    __slots__ = ('old_index', 'new_index', 'removed', 'inserted', 'lines')

    def __init__(
        self,
        old_index: int,
        new_index: int,
        removed: int,
        inserted: int,
        lines: Sequence[LineRecord]
    ):
        self.old_index = old_index
        self.new_index = new_index
        self.removed = removed
        self.inserted = inserted
        self.lines: Tuple[LineRecord, ...] = tuple(lines)

    @property
    def old_start(self) -> int:
        return self.old_index + 1

    @property
    def new_start(self) -> int:
        return self.new_index + 1

    @property
    def old_end(self) -> int:
        return self.old_index + self.removed

    @property
    def new_end(self) -> int:
        return self.new_index + self.inserted

    @property
    def deletions(self) -> int:
        return sum(1 for line in self.lines if line.kind.is_removal)

    @property
    def additions(self) -> int:
        return sum(1 for line in self.lines if line.kind.is_insertion)

    def old_lines(self) -> List[Any]:
        return [line.content for line in self.lines if not line.kind.is_insertion]

    def new_lines(self) -> List[Any]:
        return [line.content for line in self.lines if not line.kind.is_removal]

    def has_changes(self) -> bool:
        return any(line.kind != LineKind.UNCHANGED for line in self.lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hunk):
            return NotImplemented
        return (self.old_index, self.new_index, self.removed, self.inserted, self.lines) == \
            (other.old_index, other.new_index, other.removed, other.inserted, other.lines)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Hunk(@@ -{self.old_start},{self.removed} +{self.new_start},{self.inserted} @@)"


class CompareResult:
    """Ordered, non-overlapping hunks of one comparison.

    Keeps references to the compared sequences: records point at their
    elements, so the result must not outlive (or see mutation of) them.
    """

    def __init__(self, hunks: Sequence[Hunk], left: Optional[Sequence] = None,
                 right: Optional[Sequence] = None):
        self.hunks: Tuple[Hunk, ...] = tuple(hunks)
        self.left = left
        self.right = right

    def is_empty(self) -> bool:
        return len(self.hunks) == 0

    def __len__(self) -> int:
        return len(self.hunks)

    def __iter__(self) -> Iterator[Hunk]:
        return iter(self.hunks)

    def __getitem__(self, index: int) -> Hunk:
        return self.hunks[index]

    def __repr__(self) -> str:
        return f"CompareResult({list(self.hunks)!r})"

    def display(self, options=None) -> str:
        from renderers.display import DisplayRenderer
        return DisplayRenderer(options).render(self)

    def patch(self, left_name: str, left_timestamp, right_name: str,
              right_timestamp, options=None) -> str:
        from renderers.patch import PatchRenderer
        renderer = PatchRenderer(left_name, left_timestamp, right_name, right_timestamp, options)
        return renderer.render(self)
