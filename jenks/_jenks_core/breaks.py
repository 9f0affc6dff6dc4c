"""
Boundary extraction from the Jenks matrices.

The second half of the Jenks recipe: backtrack through the lower class
limits to recover the boundaries of an optimal classing, and assign
observations to the resulting classes.
"""

from typing import Iterator, List, Tuple

import numpy as np

from .preprocess import deduplicate

__all__ = [
    "classify",
    "extract_all_breaks",
    "extract_breaks",
    "iter_class_limits",
]


def iter_class_limits(
    lower_class_limits: np.ndarray, n_data: int, n_classes: int
) -> Iterator[Tuple[int, int]]:
    """
    Walk the optimal classing from the last class back to the first.

    The lower class limits matrix is used as indices into itself: the limit
    of class ``j`` in the full-data row gives the prefix whose optimal
    ``j - 1`` classing precedes it.

    Parameters
    ----------
    lower_class_limits : np.ndarray
        Lower class limits matrix of shape (N + 1, K + 1)
    n_data : int
        Number of observations N
    n_classes : int
        Number of classes to recover, at most K

    Yields
    ------
    class_index : int
        1-based class number, from ``n_classes`` down to 1
    boundary_index : int
        0-based index into the sorted data of the first value of the class
    """
    row = n_data
    for class_index in range(n_classes, 1, -1):
        boundary_index = int(lower_class_limits[row, class_index]) - 1
        yield class_index, boundary_index
        row = boundary_index
    yield 1, 0


def extract_breaks(
    sorted_data: np.ndarray, lower_class_limits: np.ndarray, n_classes: int
) -> List[float]:
    """
    Derive the ``n_classes`` lower boundaries of the optimal classing.

    The first boundary is always the data minimum. The upper bound of the
    data is not included.

    Parameters
    ----------
    sorted_data : np.ndarray
        Data sorted in ascending order, shape (N,)
    lower_class_limits : np.ndarray
        Lower class limits matrix from :func:`compute_matrices`
    n_classes : int
        Number of classes, at most the K the matrix was built for

    Returns
    -------
    list of float
        Ascending boundary values, one per class
    """
    class_boundaries = [0.0] * n_classes
    for class_index, boundary_index in iter_class_limits(
        lower_class_limits, len(sorted_data), n_classes
    ):
        class_boundaries[class_index - 1] = float(sorted_data[boundary_index])
    return class_boundaries


def extract_all_breaks(
    sorted_data: np.ndarray,
    lower_class_limits: np.ndarray,
    max_classes: int,
    n_unique: int,
) -> List[List[float]]:
    """
    Extract the boundaries for every class count from 2 to ``max_classes``.

    Class counts above ``n_unique`` are skipped; the classing with exactly
    ``n_unique`` classes is the deduplicated data itself.

    Returns
    -------
    list of list of float
        Entry ``i`` holds the boundaries for ``i + 2`` classes
    """
    all_breaks = []
    for n_classes in range(2, min(max_classes, n_unique) + 1):
        if n_classes == n_unique:
            all_breaks.append(deduplicate(sorted_data).tolist())
        else:
            all_breaks.append(extract_breaks(sorted_data, lower_class_limits, n_classes))
    return all_breaks


def classify(values: np.ndarray, breaks: np.ndarray) -> np.ndarray:
    """
    Assign each value to the class whose lower boundary it reaches.

    Parameters
    ----------
    values : np.ndarray
        Values to classify, shape (N,), in any order
    breaks : np.ndarray
        Ascending class boundaries, shape (K,)

    Returns
    -------
    np.ndarray
        Class labels of shape (N,). Labels are 1-indexed; values below the
        first boundary are put in class 1.

    Examples
    --------
    >>> classify(np.array([1.0, 5.0, 12.0, 30.0]), np.array([1.0, 12.0, 21.0]))
    array([1, 1, 2, 3], dtype=int32)
    """
    labels = np.searchsorted(breaks, values, side="right")
    return np.maximum(labels, 1).astype(np.int32)
