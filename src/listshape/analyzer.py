"""
Shape Analyzer: read-only diagnostics for nested inputs.

This module answers questions about an input before (or instead of)
reshaping it:
    - What kind of elements does it hold?
    - How many unwraps would flatten perform?
    - Are the rows ragged, and would transpose lose cells?
    - Does the first element misrepresent the rest?

IMPORTANT: Nothing here modifies its input.
It only produces reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from listshape.flatten import unwrap_once
from listshape.kinds import ElementKind, classify, classify_element


def depth(seq: Any) -> int:
    """
    Number of unwraps flatten(seq) performs before it stops.

    A list of scalars (or an empty list) has depth 0. A list of scalar
    arrays has depth 1, since the arrays are joined but never opened.
    """
    levels = 0
    current = seq
    while True:
        kind = classify(current)
        if kind is ElementKind.SCALAR:
            return levels
        levels += 1
        if kind is ElementKind.SCALAR_ARRAY:
            return levels
        current = unwrap_once(current)


def row_lengths(seq: Any) -> List[int]:
    """Lengths of each row of a two-level input; [] when there are no rows."""
    if classify(seq) is ElementKind.SCALAR:
        return []
    return [len(row) for row in seq]


def is_ragged(seq: Any) -> bool:
    """True when the rows of seq do not all have the same length."""
    return len(set(row_lengths(seq))) > 1


def _transposed_cell_count(lengths: List[int]) -> int:
    """Cells transpose copies, walking each column down to its first short row."""
    carried = 0
    for j in range(lengths[0]):
        for length in lengths:
            if length <= j:
                break
            carried += 1
    return carried


@dataclass
class ShapeReport:
    """Shape diagnostics for one input."""

    kind: ElementKind
    length: int = 0
    depth: int = 0

    # Two-level structure
    rows: int = 0
    columns: int = 0
    row_lengths: List[int] = field(default_factory=list)
    ragged: bool = False
    transpose_dropped_cells: int = 0

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def describe(seq: Any) -> ShapeReport:
    """
    Analyze an input without reshaping it.

    Checks for:
    - Element kind and flatten depth
    - Row lengths and raggedness
    - Cells transpose would leave behind
    - Elements whose kind differs from the first element's

    Returns a ShapeReport with metrics and warnings.
    """
    report = ShapeReport(kind=classify(seq), length=len(seq))

    # =========================================================================
    # 1. KIND CONSISTENCY
    # =========================================================================

    # Mixed kinds make every other metric undefined, so stop here.
    kinds = {classify_element(element) for element in seq}
    if len(kinds) > 1:
        names = ", ".join(sorted(k.value for k in kinds))
        report.add_warning(f"Mixed element kinds: {names}")
        return report

    report.depth = depth(seq)
    if report.kind is ElementKind.SCALAR:
        return report

    # =========================================================================
    # 2. ROW STRUCTURE
    # =========================================================================

    report.row_lengths = row_lengths(seq)
    report.rows = len(report.row_lengths)
    report.columns = report.row_lengths[0]
    report.ragged = len(set(report.row_lengths)) > 1

    if report.ragged:
        report.transpose_dropped_cells = (
            sum(report.row_lengths) - _transposed_cell_count(report.row_lengths)
        )

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.ragged:
        report.add_warning(
            f"Ragged rows: lengths range from {min(report.row_lengths)} to {max(report.row_lengths)}"
        )

    if report.transpose_dropped_cells:
        report.add_warning(
            f"Transpose drops {report.transpose_dropped_cells} cell(s)"
        )

    return report
