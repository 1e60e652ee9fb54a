"""
Tests for fixed-length Arrays.

These tests verify:
    - Allocation and length clamping
    - Get/set semantics
    - The fail-fast bounds contract
"""

import dataclasses

import pytest

from oruntime.array import array_get, array_length, array_new, array_set
from oruntime.fatal import FatalCondition, RuntimeAbort
from oruntime.model import Array


class TestArrayNew:
    """Test Array allocation."""

    @pytest.mark.parametrize("length", [0, 1, 5, 1000])
    def test_length_matches_request(self, length):
        """Should allocate exactly the requested number of slots."""
        assert array_length(array_new(length)) == length

    @pytest.mark.parametrize("length", [-1, -3, -(2**31)])
    def test_negative_length_clamped_to_zero(self, length):
        """Should clamp negative lengths to zero without error."""
        array = array_new(length)
        assert array_length(array) == 0
        assert list(array) == []

    def test_slots_start_empty(self):
        """Should initialise every slot to None."""
        array = array_new(4)
        assert [array_get(array, i) for i in range(4)] == [None] * 4

    def test_length_cannot_be_rebound(self):
        """Should refuse to change length after creation."""
        array = array_new(3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            array.length = 10

    def test_python_len_and_iteration(self):
        """Should expose len() and iteration over its slots."""
        array = array_new(2)
        array_set(array, 1, "x")
        assert len(array) == 2
        assert list(array) == [None, "x"]


class TestArrayLength:
    """Test array_length."""

    def test_null_array_has_length_zero(self):
        """Should treat a null array as the empty array."""
        assert array_length(None) == 0


class TestArrayGetSet:
    """Test element access."""

    def test_get_returns_last_value_set(self):
        """Should return the most recent value stored at an index."""
        array = array_new(3)
        array_set(array, 1, "first")
        array_set(array, 1, "second")
        assert array_get(array, 1) == "second"
        assert array_get(array, 0) is None
        assert array_get(array, 2) is None

    def test_set_returns_none(self):
        """Should not produce a value from set."""
        array = array_new(1)
        assert array_set(array, 0, 42) is None

    def test_elements_are_stored_by_reference(self):
        """Should hand back the very object that was stored."""
        payload = {"boxed": 7}
        array = array_new(1)
        array_set(array, 0, payload)
        assert array_get(array, 0) is payload

    def test_boundary_indices(self):
        """Should accept index 0 and index length - 1."""
        array = array_new(5)
        array_set(array, 0, "lo")
        array_set(array, 4, "hi")
        assert array_get(array, 0) == "lo"
        assert array_get(array, 4) == "hi"

    def test_set_does_not_change_length(self):
        """Should keep the length fixed across writes."""
        array = array_new(2)
        array_set(array, 0, 1)
        array_set(array, 1, 2)
        assert array_length(array) == 2


class TestArrayBoundsContract:
    """Test fatal handling of out-of-contract access."""

    @pytest.mark.parametrize("index", [-1, 3, 4, 100])
    def test_get_out_of_bounds_is_fatal(self, index):
        """Should abort on get outside [0, length)."""
        array = array_new(3)
        with pytest.raises(RuntimeAbort) as excinfo:
            array_get(array, index)
        assert excinfo.value.condition is FatalCondition.INDEX_OUT_OF_BOUNDS

    @pytest.mark.parametrize("index", [-1, 3])
    def test_set_out_of_bounds_is_fatal(self, index):
        """Should abort on set outside [0, length)."""
        array = array_new(3)
        with pytest.raises(RuntimeAbort) as excinfo:
            array_set(array, index, "x")
        assert excinfo.value.condition is FatalCondition.INDEX_OUT_OF_BOUNDS

    def test_any_access_to_empty_array_is_fatal(self):
        """Should abort on index 0 of a zero-length array."""
        with pytest.raises(RuntimeAbort):
            array_get(array_new(0), 0)

    def test_get_on_null_array_is_fatal(self):
        """Should abort on get through a null handle."""
        with pytest.raises(RuntimeAbort) as excinfo:
            array_get(None, 0)
        assert excinfo.value.condition is FatalCondition.NULL_ARRAY_ACCESS

    def test_set_on_null_array_is_fatal(self):
        """Should abort on set through a null handle."""
        with pytest.raises(RuntimeAbort) as excinfo:
            array_set(None, 0, "x")
        assert excinfo.value.condition is FatalCondition.NULL_ARRAY_ACCESS

    def test_non_integer_index_is_fatal(self):
        """Should abort when the index is not an integer."""
        with pytest.raises(RuntimeAbort):
            array_get(array_new(3), 1.0)

    def test_failed_set_leaves_array_untouched(self):
        """Should not write anything when set aborts."""
        array = array_new(2)
        with pytest.raises(RuntimeAbort):
            array_set(array, 2, "x")
        assert list(array) == [None, None]

    def test_fatal_is_not_an_exception(self):
        """Should not be swallowed by an ordinary except Exception block."""
        array = array_new(1)
        with pytest.raises(RuntimeAbort):
            try:
                array_get(array, 5)
            except Exception:
                pytest.fail("fatal condition was caught as an Exception")


def test_array_is_model_instance():
    """array_new should hand back an Array handle."""
    assert isinstance(array_new(1), Array)
