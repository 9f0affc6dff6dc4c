"""
Dynamic-programming matrices for Jenks natural breaks.

Builds the two tables from which the optimal classing of every data prefix,
for every class count up to a maximum, can be read back.

Based on the classic Fortran recipe by Jenks as popularised in
simple-statistics, where the tables are called LC and OP.
"""

import logging
from typing import NamedTuple

import numpy as np

__all__ = ["JenksMatrices", "compute_matrices"]

logger = logging.getLogger(__name__)


class JenksMatrices(NamedTuple):
    """
    Optimal lower class limits and variance combinations.

    Both arrays have shape (N + 1, K + 1) and are addressed as
    ``[prefix_length, class_count]``. Row 0 and column 0 are padding so
    that both indices are 1-based.

    Attributes
    ----------
    lower_class_limits : np.ndarray
        1-based index into the sorted data at which the last class of the
        optimal ``(prefix_length, class_count)`` classing begins ('LC').
    variance_combinations : np.ndarray
        Minimal total within-class sum of squared deviations for that
        classing ('OP').
    """

    lower_class_limits: np.ndarray
    variance_combinations: np.ndarray


def compute_matrices(sorted_data: np.ndarray, n_classes: int) -> JenksMatrices:
    """
    Compute the matrices required for Jenks breaks.

    The matrices can be used for any classing of the data into
    ``classes <= n_classes``, so one call serves every smaller class count.

    Parameters
    ----------
    sorted_data : np.ndarray
        Data sorted in ascending order, shape (N,)
    n_classes : int
        Maximum number of classes K

    Returns
    -------
    JenksMatrices
        ``lower_class_limits`` (int64) and ``variance_combinations``
        (float64), each of shape (N + 1, K + 1)

    Notes
    -----
    For each prefix length ``l`` the data is swept backwards from element
    ``l`` to element 1, growing a trailing segment one value at a time. The
    segment's sum of squared deviations is kept incrementally as
    ``sum_sq - sum**2 / count``. For every class count ``j >= 2`` the segment
    is tried as the last class on top of the best ``j - 1`` classing of the
    data before it; a candidate that is no worse than the current best
    replaces it, so ties resolve to the segment found last (the longest one).

    Each row only reads rows above it, so all columns of a row are relaxed
    together as one vector operation.

    Runs in O(N^2 * K) time and O(N * K) memory.

    Examples
    --------
    >>> data = np.array([1.0, 2.0, 10.0, 11.0])
    >>> lcl, _ = compute_matrices(data, 2)
    >>> int(lcl[4, 2])  # second class of the 2-classing starts at 10.0
    3
    """
    n_data = len(sorted_data)
    n_rows = n_data + 1
    n_cols = n_classes + 1
    logger.debug("Computing Jenks matrices for %d values and %d classes", n_data, n_classes)

    lower_class_limits = np.zeros((n_rows, n_cols), dtype=np.int64)
    variance_combinations = np.zeros((n_rows, n_cols), dtype=np.float64)

    # A single value is always its own class with zero variance
    lower_class_limits[1, 1:] = 1
    variance_combinations[2:, 1:] = np.inf

    values = sorted_data.astype(np.float64).tolist()

    for l in range(2, n_rows):
        # Views onto the columns 2..K of this row, updated in place
        lcl_row = lower_class_limits[l, 2:]
        vc_row = variance_combinations[l, 2:]

        sum_vals = 0.0
        sum_squares = 0.0
        variance = 0.0

        for m in range(1, l + 1):
            lower_class_limit = l - m + 1
            current_index = lower_class_limit - 1
            val = values[current_index]

            sum_vals += val
            sum_squares += val * val
            variance = sum_squares - (sum_vals * sum_vals) / m

            if current_index != 0:
                # Best (j - 1)-classing of everything before this segment
                candidates = variance_combinations[current_index, 1:-1] + variance
                improved = vc_row >= candidates
                lcl_row[improved] = lower_class_limit
                vc_row[improved] = candidates[improved]

        lower_class_limits[l, 1] = 1
        variance_combinations[l, 1] = variance

    return JenksMatrices(lower_class_limits, variance_combinations)
