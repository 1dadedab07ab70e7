"""
listshape: generic shaping operations over nested sequences.

Three operations:
    - flatten: collapse nesting, fully or a fixed number of levels
    - transpose: turn rows into columns, with defined ragged-row behavior
    - ensure_size: pad a mutable sequence with None

ARCHITECTURAL GUARANTEE:
------------------------
flatten and transpose never mutate their input and always return a new list.
ensure_size is the only operation that modifies its argument.

Element kinds are decided by the first element of each sequence.
Mixing kinds inside one sequence is the caller's responsibility to avoid.
"""

from .kinds import ElementKind, UnreachableKindError, classify, classify_element
from .flatten import flatten, unwrap_once
from .transpose import RaggedTransposeWarning, transpose
from .resize import ensure_size
from .analyzer import ShapeReport, depth, describe, is_ragged, row_lengths

__version__ = "0.1.0"

__all__ = [
    "ElementKind",
    "RaggedTransposeWarning",
    "ShapeReport",
    "UnreachableKindError",
    "classify",
    "classify_element",
    "depth",
    "describe",
    "ensure_size",
    "flatten",
    "is_ragged",
    "row_lengths",
    "transpose",
    "unwrap_once",
]
