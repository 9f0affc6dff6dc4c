"""
Core building blocks for the Jenks natural breaks implementation.

This package contains the low-level functions used by the public NumPy
entry points in :mod:`jenks.jenks_numpy`. They assume validated, sorted
input.
"""

from .breaks import (
    classify,
    extract_all_breaks,
    extract_breaks,
    iter_class_limits,
)
from .errors import JenksInvariantError
from .goodness import (
    best_breaks_for_threshold,
    class_slices,
    goodness_of_variance_fit,
    sum_of_square_deviations,
)
from .matrices import JenksMatrices, compute_matrices
from .preprocess import count_unique_values, deduplicate, sort_data
from .rounding import round_breaks, round_value

__all__ = [
    "JenksInvariantError",
    "JenksMatrices",
    "best_breaks_for_threshold",
    "class_slices",
    "classify",
    "compute_matrices",
    "count_unique_values",
    "deduplicate",
    "extract_all_breaks",
    "extract_breaks",
    "goodness_of_variance_fit",
    "iter_class_limits",
    "round_breaks",
    "round_value",
    "sort_data",
    "sum_of_square_deviations",
]
