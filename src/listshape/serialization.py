"""
Serialization helpers for reshaped results and ShapeReport objects.

Results may hold numpy arrays, array.array buffers, tuples and numpy
scalars. These are converted to plain lists and Python scalars first, so
the JSON and YAML dumps stay readable and stable.
"""
from __future__ import annotations

import json
from array import array
from enum import Enum
from typing import Any, Dict

import numpy as np
import yaml

from listshape.analyzer import ShapeReport
from listshape.kinds import ElementKind


def to_builtin(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return to_builtin(value.tolist())
    if isinstance(value, array):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple, range)):
        return [to_builtin(item) for item in value]
    if isinstance(value, dict):
        return {str(k): to_builtin(v) for k, v in value.items()}
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    raise TypeError(f"Unsupported value type: {type(value)}")


def report_to_dict(r: ShapeReport) -> Dict[str, Any]:
    return {
        "kind": r.kind.value,
        "length": r.length,
        "depth": r.depth,
        "rows": r.rows,
        "columns": r.columns,
        "row_lengths": list(r.row_lengths),
        "ragged": r.ragged,
        "transpose_dropped_cells": r.transpose_dropped_cells,
        "warnings": list(r.warnings),
    }


def report_from_dict(d: Dict[str, Any]) -> ShapeReport:
    return ShapeReport(
        kind=ElementKind(d["kind"]),
        length=d.get("length", 0),
        depth=d.get("depth", 0),
        rows=d.get("rows", 0),
        columns=d.get("columns", 0),
        row_lengths=d.get("row_lengths", []),
        ragged=d.get("ragged", False),
        transpose_dropped_cells=d.get("transpose_dropped_cells", 0),
        warnings=d.get("warnings", []),
    )


def report_to_json(r: ShapeReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_to_yaml(r: ShapeReport) -> str:
    return yaml.safe_dump(report_to_dict(r))


def report_from_yaml(s: str) -> ShapeReport:
    d = yaml.safe_load(s)
    return report_from_dict(d)


def dump_json(value: Any) -> str:
    return json.dumps(to_builtin(value))


def dump_yaml(value: Any) -> str:
    return yaml.safe_dump(to_builtin(value))
