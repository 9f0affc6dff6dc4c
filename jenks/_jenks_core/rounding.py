"""
Rounding of class boundaries for display.

Boundaries are rounded as far as possible without changing which class any
observation belongs to, e.g. 111.11 becomes 111.1, then 111, then 110, then
100, then 0, stopping before the value reaches the class below.
"""

from typing import List, Sequence

import numpy as np

__all__ = ["round_breaks", "round_value"]


def round_value(value: float, floor: float) -> float:
    """
    Round a value by zeroing its digits while it stays above a floor.

    Digits are replaced by ``0`` from right to left in the fixed-point
    rendering of the value. Each step is kept only if the result is still
    strictly greater than ``floor`` and not greater than ``value``.

    Parameters
    ----------
    value : float
        Value to round
    floor : float
        Exclusive lower bound the result must stay above

    Returns
    -------
    float
        The most heavily rounded acceptable value, or ``value`` itself

    Examples
    --------
    >>> round_value(12.1, 3.1)
    10.0
    >>> round_value(2.51, 2.12)
    2.5
    """
    digits = list(("%f" % value).strip("0"))
    rounded = value
    for i in range(len(digits) - 1, -1, -1):
        if digits[i] == ".":
            continue
        digits[i] = "0"
        try:
            candidate = float("".join(digits))
        except ValueError:
            return rounded
        # Zeroing digits of a negative value moves it up, towards the class above
        if candidate <= floor or candidate > value:
            return rounded
        rounded = candidate
    return rounded


def round_breaks(breaks: Sequence[float], sorted_data: np.ndarray) -> List[float]:
    """
    Round class boundaries without changing class membership.

    Parameters
    ----------
    breaks : sequence of float
        Ascending class boundaries derived from ``sorted_data``
    sorted_data : np.ndarray
        Data sorted in ascending order, shape (N,)

    Returns
    -------
    list of float
        Rounded boundaries, same length and order as ``breaks``

    Notes
    -----
    Each boundary must stay above the largest value strictly below it. The
    lowest boundary has no data below it, so it must stay above
    ``data[0] - (breaks[1] - breaks[0])``; this keeps it from collapsing
    far below the data. With a single boundary the data range is used as
    the spread instead.

    Negative boundaries are left as they are: zeroing their digits would
    raise them past the smallest value of their own class.

    Examples
    --------
    >>> data = np.array([1.1, 2.1, 3.1, 12.1, 13.1, 14.1, 21.1, 22.1, 23.1, 27.1, 28.1, 29.1])
    >>> round_breaks([1.1, 12.1, 21.1, 27.1], data)
    [0.0, 10.0, 20.0, 27.0]
    """
    rounded = []
    for break_index, value in enumerate(breaks):
        data_index = int(np.searchsorted(sorted_data, value, side="left"))
        if data_index == 0:
            if len(breaks) > 1:
                spread = breaks[break_index + 1] - value
            else:
                spread = sorted_data[-1] - sorted_data[0]
            floor = sorted_data[0] - spread
        else:
            floor = sorted_data[data_index - 1]
        rounded.append(round_value(float(value), float(floor)))
    return rounded
