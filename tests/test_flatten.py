"""
Tests for flatten and unwrap_once.

These tests verify:
    - Full and level-bounded flattening of nested lists
    - Tuples and numpy arrays as nested containers
    - The scalar-array terminal (arrays joined, never opened)
    - Order preservation, idempotence and input immutability
"""

import copy
import importlib
from array import array

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from listshape.analyzer import depth
from listshape.flatten import flatten, unwrap_once
from listshape.kinds import UnreachableKindError


class TestFlattenNested:
    """Test unbounded flattening of nested lists."""

    def test_two_levels(self):
        """[[1,2],[3,4]] flattens to [1,2,3,4]."""
        assert flatten([[1, 2], [3, 4]]) == [1, 2, 3, 4]

    def test_three_levels(self):
        """Deeper nesting is unwrapped until scalars remain."""
        assert flatten([[[1], [2]], [[3], [4]]]) == [1, 2, 3, 4]

    def test_empty(self):
        """An empty input flattens to an empty list."""
        assert flatten([]) == []

    def test_already_flat(self):
        """A flat list comes back as an equal new list."""
        original = [1, 2, 3]
        result = flatten(original)
        assert result == [1, 2, 3]
        assert result is not original

    def test_order_is_depth_first(self):
        """Output order is the left-to-right traversal order."""
        nested = [[["a", "b"], ["c"]], [["d"], ["e", "f"]]]
        assert flatten(nested) == ["a", "b", "c", "d", "e", "f"]

    def test_strings_are_not_split(self):
        """Strings are scalar values."""
        assert flatten([["ab", "cd"], ["ef"]]) == ["ab", "cd", "ef"]

    def test_empty_children(self):
        """Empty child lists contribute nothing."""
        assert flatten([[], [1, 2], []]) == [1, 2]
        assert flatten([[], [[1]]]) == [1]

    def test_input_not_mutated(self):
        """flatten never modifies its input."""
        nested = [[[1], [2]], [[3], [4]]]
        before = copy.deepcopy(nested)
        flatten(nested)
        assert nested == before

    def test_idempotent(self):
        """Flattening a flat result changes nothing."""
        nested = [[[1], [2]], [[3, 5], [4]]]
        once = flatten(nested)
        assert flatten(once) == once


class TestFlattenArrays:
    """Test tuples and numpy arrays as input forms."""

    def test_tuple_rows(self):
        """Tuples are unwrapped like lists."""
        assert flatten([(1, 2), (3, 4)]) == [1, 2, 3, 4]

    def test_tuple_outer(self):
        """A tuple input produces a list."""
        assert flatten(((1, 2), (3,))) == [1, 2, 3]

    def test_object_dtype_rows(self):
        """Object-dtype arrays are unwrapped element by element."""
        rows = [np.array([1, "a"], dtype=object), np.array([None], dtype=object)]
        assert flatten(rows) == [1, "a", None]

    def test_flat_numpy_array(self):
        """A 1-D numeric array is already flat."""
        result = flatten(np.array([1, 2, 3]))
        assert isinstance(result, list)
        assert result == [1, 2, 3]


class TestScalarArrayTerminal:
    """Test that scalar arrays are joined, never opened."""

    def test_numpy_rows_are_joined(self):
        """Two int arrays become one list holding one joined array."""
        result = flatten([np.array([1, 2, 3]), np.array([4, 5])])
        assert len(result) == 1
        assert_array_equal(result[0], [1, 2, 3, 4, 5])

    def test_string_rows_of_different_widths(self):
        """Wider strings in later arrays are not truncated."""
        result = flatten([np.array(["a", "b"]), np.array(["hello"])])
        assert len(result) == 1
        assert result[0].tolist() == ["a", "b", "hello"]

    def test_integer_rows_of_different_widths(self):
        """Values that do not fit the first array's dtype are kept."""
        result = flatten([np.array([1], dtype=np.int8), np.array([300])])
        assert result[0].tolist() == [1, 300]

    def test_stdlib_rows_are_joined(self):
        """array.array rows are joined the same way."""
        result = flatten([array("i", [1, 2, 3]), array("i", [4, 5])])
        assert result == [array("i", [1, 2, 3, 4, 5])]

    def test_two_dimensional_array(self):
        """A 2-D array is a sequence of scalar-array rows."""
        result = flatten(np.array([[1, 2], [3, 4]]))
        assert len(result) == 1
        assert_array_equal(result[0], [1, 2, 3, 4])

    def test_arrays_inside_lists(self):
        """Lists of arrays are unwrapped first, then the arrays are joined."""
        nested = [[np.array([1, 2])], [np.array([3])]]
        result = flatten(nested)
        assert len(result) == 1
        assert_array_equal(result[0], [1, 2, 3])

    def test_joined_array_is_new(self):
        """The joined array does not share memory with the inputs."""
        first = np.array([1, 2])
        result = flatten([first, np.array([3])])
        result[0][0] = 99
        assert first[0] == 1

    def test_terminal_ignores_remaining_level(self):
        """The join happens once, whatever level budget is left."""
        rows = [np.array([1]), np.array([2])]
        for level in (1, 5):
            result = flatten(rows, level)
            assert len(result) == 1
            assert_array_equal(result[0], [1, 2])


class TestFlattenLevel:
    """Test level-bounded flattening."""

    def test_level_one(self):
        """One level removes only the outermost nesting."""
        nested = [[[1], [2]], [[3], [4]]]
        assert flatten(nested, 1) == [[1], [2], [3], [4]]

    def test_level_two(self):
        """Two levels reach scalars for a three-level input."""
        assert flatten([[[1], [2]], [[3], [4]]], 2) == [1, 2, 3, 4]

    def test_level_zero(self):
        """Level 0 returns the input as a new list."""
        nested = [[1], [2]]
        result = flatten(nested, 0)
        assert result == nested
        assert result is not nested

    def test_level_zero_keeps_arrays_separate(self):
        """Level 0 does not join scalar arrays."""
        rows = (np.array([1]), np.array([2]))
        result = flatten(rows, 0)
        assert isinstance(result, list)
        assert len(result) == 2

    def test_level_stops_before_arrays_join(self):
        """One level unwraps the lists but leaves the arrays alone."""
        nested = [[np.array([1, 2])], [np.array([3])]]
        result = flatten(nested, 1)
        assert len(result) == 2
        assert_array_equal(result[0], [1, 2])
        assert_array_equal(result[1], [3])

    @pytest.mark.parametrize("level", [0, 1, 2, 10])
    def test_empty_for_any_level(self, level):
        """An empty input stays empty."""
        assert flatten([], level) == []

    def test_large_level_equals_unbounded(self):
        """A level beyond the depth is the same as no level."""
        nested = [[[1], [2]], [[3], [4]]]
        assert flatten(nested, 10) == flatten(nested)

    def test_depth_is_non_increasing(self):
        """Each extra level leaves the result no deeper than before."""
        nested = [[[[1, 2]], [[3]]], [[[4]]]]
        depths = [depth(flatten(nested, k)) for k in range(5)]
        assert depths == sorted(depths, reverse=True)
        assert depths[0] == depth(nested)
        assert depths[-1] == 0


class TestUnwrapOnce:
    """Test a single unwrap step."""

    def test_nested(self):
        """Children are concatenated in order."""
        assert unwrap_once([[1, 2], [3]]) == [1, 2, 3]

    def test_scalar(self):
        """Scalars come back as a list."""
        assert unwrap_once((1, 2)) == [1, 2]

    def test_scalar_arrays(self):
        """Scalar arrays are joined into a one-element list."""
        result = unwrap_once([np.array([1.5]), np.array([2.5])])
        assert len(result) == 1
        assert_array_equal(result[0], [1.5, 2.5])

    def test_unhandled_kind(self, monkeypatch):
        """An unknown kind is a logic error, not a silent fallback."""
        module = importlib.import_module("listshape.flatten")
        monkeypatch.setattr(module, "classify", lambda seq: "bogus")
        with pytest.raises(UnreachableKindError, match="Should never happen"):
            unwrap_once([[1]])
