"""
Goodness of variance fit for a classing.

The GVF is the share of the total squared deviation that a classing
explains. It ranges over (0, 1] and is used to choose the number of classes
automatically.
"""

import logging
from typing import List, Sequence

import numpy as np

from .breaks import extract_breaks
from .errors import JenksInvariantError
from .matrices import compute_matrices
from .preprocess import count_unique_values, deduplicate

__all__ = [
    "best_breaks_for_threshold",
    "class_slices",
    "goodness_of_variance_fit",
    "sum_of_square_deviations",
]

logger = logging.getLogger(__name__)


def sum_of_square_deviations(values: np.ndarray) -> float:
    """
    Sum of squared deviations from the arithmetic mean.

    Returns 0.0 for an empty array.

    Examples
    --------
    >>> sum_of_square_deviations(np.array([1.0, 2.0, 3.0]))
    2.0
    """
    if len(values) == 0:
        return 0.0
    return float(np.sum((values - np.mean(values)) ** 2))


def class_slices(sorted_data: np.ndarray, breaks: Sequence[float]) -> List[slice]:
    """
    Locate each class of a classing within the sorted data.

    Parameters
    ----------
    sorted_data : np.ndarray
        Data sorted in ascending order, shape (N,)
    breaks : sequence of float
        Ascending lower boundaries of the classes

    Returns
    -------
    list of slice
        One slice into ``sorted_data`` per class

    Raises
    ------
    JenksInvariantError
        If a boundary lies beyond the data, or two boundaries map to the
        same or a decreasing start index. Either means the boundaries were
        not produced from this data.
    """
    n_data = len(sorted_data)
    starts = np.searchsorted(sorted_data, np.asarray(breaks, dtype=np.float64), side="left")

    if len(starts) == 0 or np.any(starts >= n_data):
        raise JenksInvariantError(
            f"Boundary index out of range for {n_data} values: {starts.tolist()}",
            breaks=list(breaks),
        )
    if np.any(np.diff(starts) <= 0):
        raise JenksInvariantError(
            f"Boundary indices are not strictly increasing: {starts.tolist()}",
            breaks=list(breaks),
        )

    # The first class also holds anything below its boundary
    starts[0] = 0
    ends = np.append(starts[1:], n_data)
    return [slice(int(start), int(end)) for start, end in zip(starts, ends)]


def goodness_of_variance_fit(sorted_data: np.ndarray, breaks: Sequence[float]) -> float:
    """
    Compute the goodness of variance fit (GVF) of a classing.

    Parameters
    ----------
    sorted_data : np.ndarray
        Data sorted in ascending order, shape (N,)
    breaks : sequence of float
        Ascending lower boundaries of the classes

    Returns
    -------
    float
        ``(SDAM - SDCM) / SDAM``, where SDAM is the sum of squared
        deviations from the array mean and SDCM the sum of squared
        deviations from each class mean. Higher is better; 1.0 means every
        class is internally constant.

    Notes
    -----
    Data made of a single repeated value has SDAM == 0; any classing of it
    is perfect, so 1.0 is returned.

    Examples
    --------
    >>> data = np.array([1.0, 2.0, 3.0, 12.0, 13.0, 14.0])
    >>> round(goodness_of_variance_fit(data, [1.0, 12.0]), 4)
    0.9784
    """
    sdam = sum_of_square_deviations(sorted_data)
    sdcm = sum(
        sum_of_square_deviations(sorted_data[class_slice])
        for class_slice in class_slices(sorted_data, breaks)
    )
    if sdam == 0:
        return 1.0
    return (sdam - sdcm) / sdam


def best_breaks_for_threshold(
    sorted_data: np.ndarray, max_classes: int, min_gvf: float
) -> List[float]:
    """
    Find the smallest class count whose GVF reaches a threshold.

    One matrix is built for ``max_classes`` and reused for every smaller
    class count.

    Parameters
    ----------
    sorted_data : np.ndarray
        Data sorted in ascending order, shape (N,)
    max_classes : int
        Largest class count to try
    min_gvf : float
        GVF that is good enough, in (0, 1]

    Returns
    -------
    list of float
        Boundaries for the first class count whose GVF is at least
        ``min_gvf``, or for the class count with the best GVF seen if the
        threshold is never reached.
    """
    n_unique = count_unique_values(sorted_data)
    max_classes = min(max_classes, n_unique)
    if max_classes < 2:
        return deduplicate(sorted_data).tolist()

    lower_class_limits, _ = compute_matrices(sorted_data, max_classes)

    best_breaks: List[float] = []
    best_gvf = -np.inf
    for n_classes in range(2, max_classes + 1):
        if n_classes == n_unique:
            breaks = deduplicate(sorted_data).tolist()
        else:
            breaks = extract_breaks(sorted_data, lower_class_limits, n_classes)
        gvf = goodness_of_variance_fit(sorted_data, breaks)
        if gvf > best_gvf:
            best_gvf = gvf
            best_breaks = breaks
        if gvf >= min_gvf:
            logger.debug("GVF %.6f reached with %d classes", gvf, n_classes)
            return breaks

    logger.info(
        "GVF threshold %.6f not reached with up to %d classes, best was %.6f",
        min_gvf,
        max_classes,
        best_gvf,
    )
    return best_breaks
