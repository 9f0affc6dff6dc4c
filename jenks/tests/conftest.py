"""
Pytest configuration and fixtures for jenks tests.
"""

import numpy as np
import pytest


@pytest.fixture
def four_groups():
    """Four tight groups of three integers."""
    return np.array([1, 2, 3, 12, 13, 14, 21, 22, 23, 27, 28, 29], dtype=np.float64)


@pytest.fixture
def five_values():
    """Small example from real-statistics.com (example 2)."""
    return np.array([5, 8, 9, 12, 15], dtype=np.float64)


@pytest.fixture
def exam_scores():
    """Larger example from real-statistics.com (example 1), already sorted."""
    return np.array([
        28.9, 33.5, 36.1, 38.6, 40.7, 42.7, 43.6, 45.8, 48.2, 48.6, 49.0, 51.0,
        52.1, 52.2, 52.2, 52.4, 53.6, 54.2, 55.8, 55.8, 56.4, 56.8, 56.8, 57.7,
        57.9, 58.2, 58.3, 58.4, 60.1, 60.1, 60.2, 61.1, 61.4, 61.9, 62.1, 62.5,
        62.7, 63.1, 63.6, 64.2, 64.3, 64.4, 64.6, 64.7, 64.7, 64.8, 65.4, 65.8,
        65.9, 66.2, 66.4, 66.6, 66.8, 67.0, 67.0, 67.1, 67.2, 67.2, 67.4, 68.2,
        68.2, 68.3, 69.4, 69.5, 69.8, 70.2, 70.3, 70.5, 70.6, 71.2, 71.2, 71.2,
        71.2, 71.8, 71.9, 72.0, 72.0, 72.0, 72.3, 72.5, 72.6, 73.0, 73.0, 73.0,
        73.0, 73.2, 73.4, 73.4, 73.4, 74.0, 74.2, 74.4, 74.4, 74.9, 74.9, 75.4,
        75.6, 76.0, 76.3, 76.3, 76.3, 76.4, 76.7, 77.2, 77.3, 77.6, 77.7, 78.3,
        78.5, 78.5, 78.6, 78.7, 78.9, 79.2, 79.2, 79.2, 79.8, 79.8, 79.9, 80.7,
        80.7, 81.2, 81.4, 81.5, 81.8, 82.0, 82.1, 82.2, 82.3, 82.4, 82.8, 83.0,
        83.1, 83.3, 83.4, 83.6, 83.8, 83.8, 84.0, 84.2, 85.2, 85.4, 85.8, 86.1,
        86.3, 87.1, 87.5, 87.7, 87.7, 87.8, 88.3, 88.9, 89.3, 90.3, 93.1, 94.2,
        94.7, 95.7, 97.8, 99.2,
    ])


@pytest.fixture
def random_values():
    """Unsorted values with duplicates, rounded to two decimals."""
    np.random.seed(42)
    return np.round(np.random.randn(80) * 10 + 50, 2)


@pytest.fixture
def mixed_sign_values():
    """Unsorted values on both sides of zero."""
    np.random.seed(43)
    samples = np.concatenate([
        np.random.randn(30) * 2 - 25,
        np.random.randn(30) * 2 - 3,
        np.random.randn(30) * 2 + 18,
    ])
    np.random.shuffle(samples)
    return np.round(samples, 3)


@pytest.fixture
def three_groups_1d():
    """Three well-separated 1D Gaussians, shuffled."""
    np.random.seed(101)
    samples = np.concatenate([
        np.random.randn(100) - 10.0,
        np.random.randn(100),
        np.random.randn(100) + 10.0,
    ])
    true_labels = np.array([1] * 100 + [2] * 100 + [3] * 100)
    order = np.random.permutation(len(samples))
    return samples[order], true_labels[order]
