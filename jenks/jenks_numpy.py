"""
Jenks natural breaks classification - NumPy implementation.

Public entry points. Each one validates its arguments, sorts its own copy of
the data and hands over to the core functions in :mod:`jenks._jenks_core`.
"""

import logging
from typing import List, Sequence

import numpy as np

from ._jenks_core import (
    best_breaks_for_threshold,
    compute_matrices,
    count_unique_values,
    deduplicate,
    extract_all_breaks,
    extract_breaks,
    sort_data,
)
from ._jenks_core import classify as _classify
from ._jenks_core import goodness_of_variance_fit as _goodness_of_variance_fit
from ._jenks_core import round_breaks as _round_breaks

__all__ = [
    "all_natural_breaks",
    "best_natural_breaks",
    "classify",
    "goodness_of_variance_fit",
    "natural_breaks",
    "round_breaks",
]

logger = logging.getLogger(__name__)


def _as_data(data) -> np.ndarray:
    """Convert observations to a sorted 1-D float64 array, checking them."""
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"data must be one-dimensional, got shape {arr.shape}")
    if len(arr) == 0:
        raise ValueError("data must contain at least one value")
    if not np.all(np.isfinite(arr)):
        raise ValueError("data must not contain NaN or infinite values")
    return sort_data(arr)


def _as_breaks(breaks) -> np.ndarray:
    arr = np.asarray(breaks, dtype=np.float64)
    if arr.ndim != 1 or len(arr) == 0:
        raise ValueError("breaks must be a non-empty one-dimensional sequence")
    if np.any(np.diff(arr) <= 0):
        raise ValueError(f"breaks must be strictly increasing, got {arr.tolist()}")
    return arr


def _check_breaks_fit(breaks: np.ndarray, sorted_data: np.ndarray):
    """Check that every break starts its own non-empty class of the data."""
    if np.any(breaks[1:] <= sorted_data[0]):
        raise ValueError(
            f"breaks after the first must be above the data minimum {sorted_data[0]}, "
            f"got {breaks.tolist()}"
        )
    if breaks[-1] > sorted_data[-1]:
        raise ValueError(
            f"breaks must not exceed the data maximum {sorted_data[-1]}, got {breaks.tolist()}"
        )
    starts = np.searchsorted(sorted_data, breaks, side="left")
    if np.any(np.diff(starts) <= 0):
        raise ValueError(
            f"each break must start a separate class, but some share a gap "
            f"between data values: {breaks.tolist()}"
        )


def natural_breaks(data: Sequence[float], n_classes: int) -> List[float]:
    """
    Find the Jenks natural breaks of the data.

    Groups the values into ``n_classes`` contiguous classes so that the
    total within-class sum of squared deviations is minimal.

    Parameters
    ----------
    data : array-like
        Observations of shape (N,), in any order, duplicates allowed
    n_classes : int
        Number of classes, at least 1

    Returns
    -------
    list of float
        Ascending lower boundary of each class; the first is ``min(data)``.
        If ``n_classes`` is at least the number of distinct values, the
        distinct values are returned instead, so the result can be shorter
        than ``n_classes``.

    Raises
    ------
    ValueError
        If ``data`` is empty or not finite, or ``n_classes < 1``

    Examples
    --------
    >>> natural_breaks([1, 2, 3, 12, 13, 14, 21, 22, 23, 27, 28, 29], 4)
    [1.0, 12.0, 21.0, 27.0]
    >>> natural_breaks([1.1, 1.1, 1.3, 1.3, 1.2, 1.2], 4)
    [1.1, 1.2, 1.3]
    """
    if n_classes < 1:
        raise ValueError(f"n_classes must be at least 1, got {n_classes}")
    sorted_data = _as_data(data)

    if n_classes >= count_unique_values(sorted_data):
        logger.debug("%d classes requested, returning the distinct values", n_classes)
        return deduplicate(sorted_data).tolist()

    lower_class_limits, _ = compute_matrices(sorted_data, n_classes)
    return extract_breaks(sorted_data, lower_class_limits, n_classes)


def all_natural_breaks(data: Sequence[float], max_classes: int) -> List[List[float]]:
    """
    Find the natural breaks for every class count from 2 to ``max_classes``.

    The matrices are computed once, for the largest class count, and reused
    for the smaller ones.

    Parameters
    ----------
    data : array-like
        Observations of shape (N,)
    max_classes : int
        Largest class count, at least 2. Capped at the number of distinct
        values.

    Returns
    -------
    list of list of float
        Entry ``i`` holds the breaks for ``i + 2`` classes, so that
        ``all_natural_breaks(data, m)[k - 2] == natural_breaks(data, k)``.

    Examples
    --------
    >>> all_natural_breaks([5, 8, 9, 12, 15], 3)
    [[5.0, 12.0], [5.0, 8.0, 12.0]]
    """
    if max_classes < 2:
        raise ValueError(f"max_classes must be at least 2, got {max_classes}")
    sorted_data = _as_data(data)

    n_unique = count_unique_values(sorted_data)
    max_classes = min(max_classes, n_unique)
    if max_classes < 2:
        return []

    lower_class_limits, _ = compute_matrices(sorted_data, max_classes)
    return extract_all_breaks(sorted_data, lower_class_limits, max_classes, n_unique)


def best_natural_breaks(
    data: Sequence[float], max_classes: int, min_gvf: float
) -> List[float]:
    """
    Find the natural breaks for the fewest classes that fit well enough.

    Tries class counts from 2 upwards and stops at the first one whose
    goodness of variance fit reaches ``min_gvf``.

    Parameters
    ----------
    data : array-like
        Observations of shape (N,)
    max_classes : int
        Largest class count to try, at least 2
    min_gvf : float
        Acceptable goodness of variance fit, in (0, 1]

    Returns
    -------
    list of float
        Breaks of the chosen classing. When no class count up to
        ``max_classes`` reaches ``min_gvf``, the best one found is used.

    Examples
    --------
    >>> best_natural_breaks([1, 2, 3, 12, 13, 14, 21, 22, 23, 27, 28, 29], 6, 0.9)
    [1.0, 12.0, 21.0]
    """
    if max_classes < 2:
        raise ValueError(f"max_classes must be at least 2, got {max_classes}")
    if not 0 < min_gvf <= 1:
        raise ValueError(f"min_gvf must be in (0, 1], got {min_gvf}")
    sorted_data = _as_data(data)
    return best_breaks_for_threshold(sorted_data, max_classes, min_gvf)


def goodness_of_variance_fit(data: Sequence[float], breaks: Sequence[float]) -> float:
    """
    Goodness of variance fit of a classing of the data.

    Parameters
    ----------
    data : array-like
        Observations of shape (N,)
    breaks : sequence of float
        Strictly increasing class boundaries, e.g. from
        :func:`natural_breaks`

    Returns
    -------
    float
        GVF in (0, 1]; higher means the classes explain more variance
    """
    sorted_data = _as_data(data)
    breaks = _as_breaks(breaks)
    _check_breaks_fit(breaks, sorted_data)
    return _goodness_of_variance_fit(sorted_data, breaks.tolist())


def round_breaks(breaks: Sequence[float], data: Sequence[float]) -> List[float]:
    """
    Round breaks as much as possible without changing class membership.

    For example 111.11 may be rounded to 111.1, 111, 110, 100 or 0,
    whichever is the coarsest value that still sits above every data value
    of the class below.

    Parameters
    ----------
    breaks : sequence of float
        Strictly increasing class boundaries derived from ``data``
    data : array-like
        Observations of shape (N,)

    Returns
    -------
    list of float
        Rounded breaks, same length and order

    Raises
    ------
    ValueError
        If the breaks are not strictly increasing, or a break after the
        first is at or below the data minimum

    Notes
    -----
    Rounding only removes digits, which moves negative breaks towards
    zero and into the class above, so breaks below zero are returned
    unchanged.

    Examples
    --------
    >>> round_breaks([1.01, 2.01, 2.51], [1.01, 1.11, 1.12, 2.01, 2.11, 2.12, 2.51, 2.61, 2.72])
    [1.0, 2.0, 2.5]
    """
    sorted_data = _as_data(data)
    breaks = _as_breaks(breaks)
    if np.any(breaks[1:] <= sorted_data[0]):
        raise ValueError(
            f"breaks after the first must be above the data minimum {sorted_data[0]}, "
            f"got {breaks.tolist()}"
        )
    return _round_breaks(breaks.tolist(), sorted_data)


def classify(data: Sequence[float], breaks: Sequence[float]) -> np.ndarray:
    """
    Label each observation with its class.

    Parameters
    ----------
    data : array-like
        Observations of shape (N,), in any order; labels follow this order
    breaks : sequence of float
        Strictly increasing class boundaries

    Returns
    -------
    np.ndarray
        Class labels of shape (N,), 1-indexed
    """
    values = np.asarray(data, dtype=np.float64)
    if values.ndim != 1:
        raise ValueError(f"data must be one-dimensional, got shape {values.shape}")
    return _classify(values, _as_breaks(breaks))
