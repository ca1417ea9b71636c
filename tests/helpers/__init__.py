from helpers.reference import (
    NaiveLCS,
    HunkVerifier,
    naive_align,
    lcs_length,
    context_runs,
    interior_runs,
)


__all__ = [
    "NaiveLCS",
    "HunkVerifier",
    "naive_align",
    "lcs_length",
    "context_runs",
    "interior_runs",
]
