#!/usr/bin/env python3
"""
Demo: flatten, transpose and describe every example input.

Shows, for each example:
1. The input
2. flatten() and flatten(level=1)
3. transpose()
4. The shape report as YAML
"""

import warnings

from listshape.analyzer import describe
from listshape.examples import build_examples
from listshape.flatten import flatten
from listshape.serialization import dump_json, report_to_yaml
from listshape.transpose import transpose


def print_example(name, value):
    print("=" * 70)
    print(f"EXAMPLE: {name}")
    print("=" * 70)
    print(f"  Input:              {dump_json(value)}")
    print(f"  flatten:            {dump_json(flatten(value))}")
    print(f"  flatten(level=1):   {dump_json(flatten(value, 1))}")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        transposed = transpose(value)
    print(f"  transpose:          {dump_json(transposed)}")
    for w in caught:
        print(f"    ⚠️  {w.message}")

    print()
    print("  Shape report:")
    for line in report_to_yaml(describe(value)).splitlines():
        print(f"    {line}")
    print()


if __name__ == "__main__":
    for name, value in build_examples().items():
        print_example(name, value)
