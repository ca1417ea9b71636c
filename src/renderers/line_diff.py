from typing import List, Optional, Tuple

from alignment.utils import Equality, tokenize_chars
from hunks.comparison import Comparison
from hunks.hunk import Hunk
from hunks.line import LineKind, LineRecord
from renderers.base import ColorScheme


class SubLineDiffer:
    """Highlights what changed inside one line of a replace pair.

    Both contents are split into code points and fed through the same
    comparison pipeline as whole lines. The radius is the longer line's
    length, so the result never splits: it is empty or a single hunk.
    """

    def __init__(self, colors: Optional[ColorScheme] = None, eq: Optional[Equality] = None):
        self.colors = colors or ColorScheme()
        self.eq = eq

    def diff(self, left: LineRecord, right: LineRecord) -> Optional[Hunk]:
        old = tokenize_chars(str(left.content))
        new = tokenize_chars(str(right.content))
        radius = max(len(old), len(new))
        result = Comparison(old, new, context_radius=radius, eq=self.eq).compare()
        if result.is_empty():
            return None
        if len(result) != 1:
            raise AssertionError(f"Sub-line comparison split into {len(result)} hunks")
        return result.hunks[0]

    def segments(self, hunk: Hunk) -> List[Tuple[LineKind, str]]:
        """Runs of code points the right-hand line keeps, grouped by kind."""
        runs: List[Tuple[LineKind, str]] = []
        for letter in hunk.lines:
            if letter.kind.is_removal:
                continue
            kind = LineKind.UNCHANGED if letter.kind == LineKind.UNCHANGED else LineKind.INSERTED
            if runs and runs[-1][0] == kind:
                runs[-1] = (kind, runs[-1][1] + letter.content)
            else:
                runs.append((kind, letter.content))
        return runs

    def highlight(self, left: LineRecord, right: LineRecord) -> Optional[str]:
        hunk = self.diff(left, right)
        if hunk is None:
            return None
        parts = []
        for kind, text in self.segments(hunk):
            if kind == LineKind.UNCHANGED:
                parts.append(self.colors.paint(text, self.colors.dim))
            else:
                parts.append(self.colors.paint(text, self.colors.reverse))
        return "".join(parts)
