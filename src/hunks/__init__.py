from hunks.line import LineKind, LineRecord
from hunks.hunk import Hunk, CompareResult
from hunks.context import ContextAccumulator
from hunks.builder import HunkBuilder, BuilderState
from hunks.pairing import ReplacePairing, pair_key, inverted_key
from hunks.comparison import Comparison, diff_hunks


__all__ = [
    "LineKind", "LineRecord", "Hunk", "CompareResult", "ContextAccumulator",
    "HunkBuilder", "BuilderState", "ReplacePairing", "pair_key", "inverted_key",
    "Comparison", "diff_hunks",
]
