"""
Utility functions for testing the jenks implementation.
"""

from typing import Sequence

import numpy as np
from sklearn.metrics import adjusted_rand_score


def same_partition(labels: np.ndarray, other: np.ndarray, min_ari: float = 0.99) -> bool:
    """
    Whether two class labelings split the values the same way.

    Class numbers may differ between the labelings (k-means numbers its
    clusters arbitrarily), so they are compared by adjusted Rand index.
    """
    if len(labels) != len(other):
        return False
    return adjusted_rand_score(labels, other) >= min_ari


def assert_float_equal(actual: float, expected: float, name: str = "value", rtol: float = 1e-10, atol: float = 1e-12):
    """Fail with both values and their difference unless they agree within tolerance."""
    if not np.isclose(actual, expected, rtol=rtol, atol=atol):
        raise AssertionError(f"{name} is {actual}, expected {expected} (off by {abs(actual - expected)})")


def check_breaks_properties(breaks: Sequence[float], data: np.ndarray):
    """
    Check that breaks have the expected properties.

    Properties checked:
        - Breaks are strictly increasing
        - The first break is the data minimum
        - Every break is one of the data values

    Raises:
        AssertionError: If breaks don't have expected properties
    """
    breaks = np.asarray(breaks)
    assert len(breaks) > 0, "Breaks should not be empty"
    assert np.all(np.diff(breaks) > 0), f"Breaks should be strictly increasing, got {breaks}"
    assert breaks[0] == np.min(data), f"First break should be {np.min(data)}, got {breaks[0]}"
    assert np.all(np.isin(breaks, data)), f"Breaks should be data values, got {breaks}"


def check_labels_properties(labels: np.ndarray, n_classes: int):
    """
    Check that class labels are contiguous 1-indexed integers.

    Raises:
        AssertionError: If labels don't have expected properties
    """
    assert labels.dtype in [np.int32, np.int64], f"Labels should be int, got {labels.dtype}"
    unique_labels = np.unique(labels)
    expected_labels = np.arange(1, n_classes + 1)
    assert np.array_equal(unique_labels, expected_labels), \
        f"Labels should be 1, 2, ..., {n_classes}, got {unique_labels}"
