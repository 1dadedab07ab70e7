"""
Flatten: collapse nested sequences into one flat list.

Each pass is a single "unwrap": the contents of every child element are
concatenated, in order, into a new list. Passes repeat until the list
holds scalars, is empty, or holds scalar arrays.

Scalar arrays are terminal. They are never widened into individual
elements; instead all of them are joined into one scalar array, which is
returned as the only element of a one-element list:

    flatten([np.array([1, 2, 3]), np.array([4, 5])])
    -> [array([1, 2, 3, 4, 5])]

IMPORTANT:
    Inputs are never mutated. Every call returns a new list.
"""

from __future__ import annotations

from typing import Any, List, Optional

from listshape.kinds import (
    ElementKind,
    UnreachableKindError,
    classify,
    concat_scalar_arrays,
)


def unwrap_once(seq: Any) -> List[Any]:
    """
    Remove one level of nesting from seq.

    Args:
        seq: list, tuple, numpy array or array.array

    Returns:
        New list. For scalar content this is just list(seq); for scalar
        arrays it is a one-element list holding their concatenation.

    Raises:
        UnreachableKindError: If the classifier returns a kind this step
            has no rule for.
    """
    kind = classify(seq)

    if kind is ElementKind.SCALAR:
        return list(seq)

    if kind is ElementKind.SCALAR_ARRAY:
        return [concat_scalar_arrays(list(seq))]

    if kind is ElementKind.NESTED_SEQUENCE or kind is ElementKind.OBJECT_ARRAY:
        flat: List[Any] = []
        for child in seq:
            flat.extend(child)
        return flat

    raise UnreachableKindError(f"Should never happen: unhandled element kind {kind!r}")


def flatten(seq: Any, level: Optional[int] = None) -> List[Any]:
    """
    Return a new flattened list.

    Args:
        seq: Input sequence or array
        level: Maximum number of unwraps. None (the default) flattens
            until the result is one-dimensional. 0 returns list(seq).

    Returns:
        Flattened list. A list of scalar arrays ends up as a list holding
        one concatenated scalar array, whatever level budget is left.

    Examples:
        >>> flatten([[[1], [2]], [[3], [4]]])
        [1, 2, 3, 4]
        >>> flatten([[[1], [2]], [[3], [4]]], 1)
        [[1], [2], [3], [4]]
    """
    current = list(seq)
    remaining = level

    while remaining != 0:
        kind = classify(current)
        if kind is ElementKind.SCALAR:
            break
        current = unwrap_once(current)
        if kind is ElementKind.SCALAR_ARRAY:
            break
        if remaining is not None:
            remaining -= 1

    return current
