"""Resize helper: the one operation in this package that mutates its argument."""

from __future__ import annotations

from typing import Any


def ensure_size(seq: Any, size: int) -> None:
    """
    Ensure len(seq) is at least size, padding with None.

    Existing elements are left untouched. Nothing happens if seq is already
    long enough.

    Args:
        seq: Mutable sequence supporting append (list, UserList, deque, ...)
        size: Required length

    Raises:
        ValueError: If seq is bounded (deque with maxlen) below size.
            Appending to a full bounded deque discards its oldest items.
    """
    missing = size - len(seq)
    if missing <= 0:
        return
    maxlen = getattr(seq, "maxlen", None)
    if maxlen is not None and size > maxlen:
        raise ValueError(f"Cannot grow a sequence bounded at {maxlen} to size {size}")
    if isinstance(seq, list):
        seq.extend([None] * missing)
        return
    while len(seq) < size:
        seq.append(None)
