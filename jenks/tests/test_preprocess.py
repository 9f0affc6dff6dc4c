"""
Tests for sorting and deduplication helpers.
"""

import numpy as np

from jenks._jenks_core import count_unique_values, deduplicate, sort_data


class TestSortData:
    """Tests for sort_data."""

    def test_already_sorted_returns_same_array(self):
        """Sorted input is returned without a copy."""
        data = np.array([1.0, 2.0, 2.0, 5.0])
        assert sort_data(data) is data

    def test_unsorted_returns_sorted_copy(self):
        """Unsorted input is sorted into a new array."""
        data = np.array([3.0, 1.0, 2.0])
        result = sort_data(data)

        assert np.array_equal(result, [1.0, 2.0, 3.0])
        # Caller's array is untouched
        assert np.array_equal(data, [3.0, 1.0, 2.0])

    def test_single_element(self):
        """A single value is trivially sorted."""
        data = np.array([4.2])
        assert sort_data(data) is data


class TestDeduplicate:
    """Tests for deduplicate."""

    def test_removes_repeats(self):
        """Repeated values appear once, in ascending order."""
        data = np.array([1.1, 1.1, 1.1, 1.2, 1.2, 1.3])
        assert np.array_equal(deduplicate(data), [1.1, 1.2, 1.3])

    def test_no_duplicates(self):
        """Distinct values are returned as they are."""
        data = np.array([1.0, 2.0, 3.0])
        assert np.array_equal(deduplicate(data), data)

    def test_empty(self):
        """Empty input gives empty output."""
        assert len(deduplicate(np.array([]))) == 0

    def test_does_not_modify_input(self):
        """The input array is left unchanged."""
        data = np.array([1.0, 1.0, 2.0])
        deduplicate(data)
        assert np.array_equal(data, [1.0, 1.0, 2.0])


class TestCountUniqueValues:
    """Tests for count_unique_values."""

    def test_counts_transitions(self):
        """Counts one per run of equal values."""
        data = np.array([1.0, 1.0, 2.0, 5.0, 5.0, 5.0, 7.0])
        assert count_unique_values(data) == 4

    def test_all_equal(self):
        """Constant data has one unique value."""
        assert count_unique_values(np.full(10, 3.0)) == 1

    def test_empty(self):
        """Empty data has no unique values."""
        assert count_unique_values(np.array([])) == 0

    def test_matches_deduplicate(self, random_values):
        """Agrees with the length of the deduplicated data."""
        sorted_data = np.sort(random_values)
        assert count_unique_values(sorted_data) == len(deduplicate(sorted_data))
