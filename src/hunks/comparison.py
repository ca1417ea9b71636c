import logging
from typing import Any, Callable, List, Optional, Sequence

from alignment.myers import align
from alignment.utils import EditScript, Equality, default_eq
from hunks.builder import HunkBuilder
from hunks.hunk import CompareResult, Hunk

logger = logging.getLogger(__name__)

Aligner = Callable[[Sequence[Any], Sequence[Any], Equality], EditScript]


class Comparison:
    """Compares two sequences and groups the differences into hunks.

    ``aligner`` produces the edit script (Myers by default); anything it
    raises propagates out of :meth:`compare` untouched, so an empty result
    always means "no differences" and never "comparison failed".
    """

    def __init__(
        self,
        left: Sequence[Any],
        right: Sequence[Any],
        context_radius: int = 3,
        eq: Optional[Equality] = None,
        aligner: Optional[Aligner] = None
    ):
        if context_radius < 0:
            raise ValueError(f"context_radius must be >= 0, got {context_radius}")
        self.left = left
        self.right = right
        self.context_radius = context_radius
        self.eq = eq or default_eq
        self.aligner = aligner or align

    def edit_script(self) -> EditScript:
        return self.aligner(self.left, self.right, self.eq)

    def compare(self) -> CompareResult:
        logger.debug("Comparing %d and %d elements, radius %d",
                     len(self.left), len(self.right), self.context_radius)
        try:
            script = self.edit_script()
        except Exception:
            logger.debug("Alignment failed", exc_info=True)
            raise
        result = HunkBuilder(self.left, self.right, self.context_radius).build(script)
        logger.debug("Comparison produced %d hunk(s)", len(result))
        return result

    def display(self, options=None) -> str:
        return self.compare().display(options)


def diff_hunks(left: Sequence[Any], right: Sequence[Any], context_radius: int = 3) -> List[Hunk]:
    return list(Comparison(left, right, context_radius).compare().hunks)
