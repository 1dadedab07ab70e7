"""
Transpose: turn an i-by-j container into a j-by-i list.

Rectangular input transposes exactly. Ragged input follows a
prefix-contiguity rule:

    - The number of output columns is len(seq[0]).
    - Column j is built by walking rows from the top and stops at the
      first row that is too short to have a cell at index j.
      Rows below that point never contribute to column j,
      even if they are long enough.

Example:
    transpose([[1, 2, 3], [4, 5], [6, 7, 8]])
    -> [[1, 4, 6], [2, 5, 7], [3]]

    The 8 in the last row is not carried over, because column 2 stops at
    the second row. A RaggedTransposeWarning reports such losses.

DO NOT:
    "Fix" the early exit to gather all available cells.
    The column shape is part of the contract.
"""

from __future__ import annotations

import warnings
from typing import Any, List

from listshape.kinds import ElementKind, classify, common_dtype, new_scalar_array


class RaggedTransposeWarning(UserWarning):
    """Issued when transposing ragged rows leaves cells out of the result."""
    pass


def _warn_if_dropped(seq: Any, carried: int) -> None:
    total = sum(len(row) for row in seq)
    dropped = total - carried
    if dropped > 0:
        warnings.warn(
            f"Ragged input: {dropped} of {total} cell(s) not carried into the transposed result",
            RaggedTransposeWarning,
            stacklevel=4,
        )


def _transpose_scalar_arrays(seq: Any) -> List[Any]:
    rows = len(seq)
    columns = len(seq[0])
    transposed: List[Any] = []
    carried = 0
    dtype = common_dtype(seq)

    for j in range(columns):
        column = new_scalar_array(seq[0], rows, dtype)
        transposed.append(column)
        for i in range(rows):
            if len(seq[i]) <= j:
                break
            column[i] = seq[i][j]
            carried += 1

    _warn_if_dropped(seq, carried)
    return transposed


def _transpose_rows(seq: Any) -> List[List[Any]]:
    rows = len(seq)
    columns = len(seq[0])
    transposed: List[List[Any]] = []
    carried = 0

    for j in range(columns):
        column: List[Any] = []
        transposed.append(column)
        for i in range(rows):
            if len(seq[i]) <= j:
                break
            column.append(seq[i][j])
        carried += len(column)

    _warn_if_dropped(seq, carried)
    return transposed


def transpose(seq: Any) -> List[Any]:
    """
    Return the matrix transposition of a two-level sequence.

    Args:
        seq: Sequence or array of rows. Rows may be lists, tuples,
            numpy arrays or array.array buffers.

    Returns:
        New list of columns. Rows that are scalar arrays produce columns
        that are scalar arrays of the rows' common element type, each of length
        len(seq); cells past a column's early stop keep the zero value.
        Empty or one-dimensional input comes back as list(seq).

    Raises:
        IndexError: Propagated from the container for malformed input.

    Warns:
        RaggedTransposeWarning: If any input cell is not carried over.
    """
    kind = classify(seq)

    if kind is ElementKind.SCALAR:
        return list(seq)

    if kind is ElementKind.SCALAR_ARRAY:
        return _transpose_scalar_arrays(seq)

    return _transpose_rows(seq)
