from alignment.utils import (
    OpType, EditOp, EditScript, EditScriptError, Equality,
    make_equal, make_delete, make_insert, make_replace,
    default_eq, ignore_case, ignore_whitespace,
    validate_script, tokenize_lines, tokenize_chars
)
from alignment.myers import MyersDiff, align, coalesce_steps


__all__ = [
    "OpType", "EditOp", "EditScript", "EditScriptError", "Equality",
    "make_equal", "make_delete", "make_insert", "make_replace",
    "default_eq", "ignore_case", "ignore_whitespace",
    "validate_script", "tokenize_lines", "tokenize_chars",
    "MyersDiff", "align", "coalesce_steps",
]
