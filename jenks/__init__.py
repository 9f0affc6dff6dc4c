"""
Jenks natural breaks classification.

Exact dynamic-programming implementation of the Jenks natural breaks
optimisation for one-dimensional data, with goodness of variance fit and
membership-preserving rounding of the resulting class boundaries.
"""

from ._jenks_core import JenksInvariantError
from .jenks_numpy import (
    all_natural_breaks,
    best_natural_breaks,
    classify,
    goodness_of_variance_fit,
    natural_breaks,
    round_breaks,
)

__version__ = "0.1.0"

__all__ = [
    "JenksInvariantError",
    "all_natural_breaks",
    "best_natural_breaks",
    "classify",
    "goodness_of_variance_fit",
    "natural_breaks",
    "round_breaks",
]
