"""
Example inputs for demos and smoke tests.

Each entry is a small nested input that exercises one behavior of
flatten or transpose: plain nesting, deeper nesting, packed scalar
arrays, tuples, and the ragged-row early exit.
"""
from array import array
from typing import Any, Dict

import numpy as np


def build_examples() -> Dict[str, Any]:
    return {
        # 2 x 2 list of lists
        "square": [[1, 2], [3, 4]],
        # Three levels deep
        "deep": [[[1], [2]], [[3], [4]]],
        # 2 x 3, rectangular
        "rectangular": [[1, 2, 3], [4, 5, 6]],
        # Column 2 stops at the second row, so the 8 is left behind
        "ragged": [[1, 2, 3], [4, 5], [6, 7, 8]],
        # Tuples are fixed-length object arrays
        "tuples": [(1, 2), (3, 4), (5, 6)],
        # Packed numpy rows are joined, never opened
        "numpy_rows": [np.array([1, 2, 3]), np.array([4, 5])],
        # Same with stdlib buffers
        "buffers": [array("i", [1, 2, 3]), array("i", [4, 5])],
        "empty": [],
    }
