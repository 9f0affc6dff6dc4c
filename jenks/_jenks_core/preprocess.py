"""
Sorting and deduplication helpers.

Every other component of the Jenks computation expects its input sorted in
ascending order; these helpers produce that input without touching the
caller's array.
"""

import numpy as np

__all__ = ["count_unique_values", "deduplicate", "sort_data"]


def sort_data(data: np.ndarray) -> np.ndarray:
    """
    Return data sorted in ascending order.

    If the array is already sorted it is returned unchanged, avoiding a copy
    in the common pre-sorted case. Otherwise a sorted copy is returned; the
    input is never sorted in place.

    Parameters
    ----------
    data : np.ndarray
        Input array of shape (N,)

    Returns
    -------
    np.ndarray
        Ascending array of shape (N,)

    Examples
    --------
    >>> sort_data(np.array([3.0, 1.0, 2.0]))
    array([1., 2., 3.])
    """
    if len(data) < 2 or np.all(data[:-1] <= data[1:]):
        return data
    return np.sort(data)


def deduplicate(sorted_data: np.ndarray) -> np.ndarray:
    """
    Return the distinct values of a sorted array, in ascending order.

    Examples
    --------
    >>> deduplicate(np.array([1.1, 1.1, 1.2, 1.3, 1.3]))
    array([1.1, 1.2, 1.3])
    """
    if len(sorted_data) == 0:
        return sorted_data.copy()
    keep = np.empty(len(sorted_data), dtype=bool)
    keep[0] = True
    np.not_equal(sorted_data[1:], sorted_data[:-1], out=keep[1:])
    return sorted_data[keep]


def count_unique_values(sorted_data: np.ndarray) -> int:
    """
    Count distinct values in a sorted array without allocating them.

    Used to decide whether the requested class count is degenerate before
    paying for :func:`deduplicate`.

    Examples
    --------
    >>> count_unique_values(np.array([1.0, 1.0, 2.0, 5.0]))
    3
    """
    if len(sorted_data) == 0:
        return 0
    return int(np.count_nonzero(sorted_data[1:] != sorted_data[:-1])) + 1
