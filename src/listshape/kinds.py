"""
Element-Kind Classifier

Every flatten and transpose step starts by deciding what kind of thing
the elements of a sequence are. That decision is made here, once per
level, by looking at the FIRST element only.

Kinds:
    - SCALAR: an atomic value (numbers, text, None, mappings, ...)
    - NESTED_SEQUENCE: a growable/generic sequence (list, range, UserList)
    - SCALAR_ARRAY: a packed buffer of one scalar type
      (1-D numpy array with a non-object dtype, or array.array)
    - OBJECT_ARRAY: a fixed-length array of references
      (tuple, object-dtype numpy array, or an ndarray with ndim >= 2)

ARCHITECTURAL RULE:
    Classification never scans the whole sequence.
    Homogeneous kind is a caller precondition, not something we repair.
"""

from __future__ import annotations

from array import array
from collections.abc import Sequence
from enum import Enum
from functools import reduce
from typing import Any, List, Optional

import numpy as np


class UnreachableKindError(AssertionError):
    """Raised when a step reaches an element kind it cannot handle."""
    pass


class ElementKind(Enum):
    """
    The four element kinds a sequence can hold.

    The value strings are stable and used in serialized reports.
    """

    SCALAR = "scalar"
    NESTED_SEQUENCE = "nested_sequence"
    SCALAR_ARRAY = "scalar_array"
    OBJECT_ARRAY = "object_array"


# Sequences that Python treats as atomic values.
_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def is_scalar_array(value: Any) -> bool:
    """Return True for a 1-D non-object numpy array or an array.array."""
    if isinstance(value, np.ndarray):
        return value.ndim == 1 and value.dtype != np.dtype(object)
    return isinstance(value, array)


def is_object_array(value: Any) -> bool:
    """Return True for tuples and numpy arrays whose items are references or rows."""
    if isinstance(value, np.ndarray):
        return value.ndim >= 1 and not is_scalar_array(value)
    return isinstance(value, tuple)


def classify_element(value: Any) -> ElementKind:
    """
    Classify a single value.

    Order matters: tuple is a Sequence and array.array is indexable like
    one, so the array checks must run first.
    """
    if is_scalar_array(value):
        return ElementKind.SCALAR_ARRAY
    if is_object_array(value):
        return ElementKind.OBJECT_ARRAY
    if isinstance(value, _TEXT_TYPES):
        return ElementKind.SCALAR
    if isinstance(value, Sequence):
        return ElementKind.NESTED_SEQUENCE
    return ElementKind.SCALAR


def classify(seq: Any) -> ElementKind:
    """
    Classify a sequence by its first element.

    Args:
        seq: Any sized, indexable container

    Returns:
        ElementKind.SCALAR for an empty sequence, otherwise the kind of seq[0]
    """
    if len(seq) == 0:
        return ElementKind.SCALAR
    return classify_element(seq[0])


def common_dtype(arrays: Any) -> Optional[np.dtype]:
    """
    The numpy dtype every array in arrays fits into without truncation.

    Returns None when the arrays are array.array buffers, which carry a
    single typecode instead.
    """
    if isinstance(arrays, np.ndarray):
        return arrays.dtype
    if not isinstance(arrays[0], np.ndarray):
        return None
    return reduce(np.promote_types, (arr.dtype for arr in arrays))


def new_scalar_array(template: Any, length: int, dtype: Optional[np.dtype] = None) -> Any:
    """
    Allocate a zero-filled scalar array with the same element type as template.

    Zero means the type's default: 0, 0.0, False, '' or b''.
    For numpy templates, dtype overrides the template's own dtype.
    """
    if isinstance(template, np.ndarray):
        return np.zeros(length, dtype=template.dtype if dtype is None else dtype)
    if isinstance(template, array):
        return array(template.typecode, bytes(template.itemsize * length))
    raise UnreachableKindError(
        f"Should never happen: {type(template).__name__} is not a scalar array"
    )


def concat_scalar_arrays(arrays: List[Any]) -> Any:
    """
    Concatenate scalar arrays into one newly allocated scalar array.

    numpy arrays are joined with their common dtype, so wider strings or
    larger integers in later arrays are kept intact. array.array buffers
    keep the first buffer's typecode. The length is the sum of all input
    lengths.
    """
    first = arrays[0]
    if isinstance(first, np.ndarray):
        return np.concatenate(arrays)
    if isinstance(first, array):
        joined = array(first.typecode)
        for arr in arrays:
            joined.extend(arr)
        return joined
    raise UnreachableKindError(
        f"Should never happen: {type(first).__name__} is not a scalar array"
    )
