"""
Population statistics over numeric sample sequences.

The reference buffer curve is treated as ground truth rather than a sample,
so variance and covariance divide by N, not N - 1.
"""

from collections.abc import Iterable

import numpy as np

from caliph.core.exceptions import SeriesLengthError


def as_array(values: Iterable[float]) -> np.ndarray:
    """Flat float array from any iterable of numbers."""
    if not isinstance(values, np.ndarray):
        values = list(values)
    return np.asarray(values, dtype=float).ravel()


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    arr = as_array(values)
    if arr.size == 0:
        return 0.0
    if arr.size == 1:
        return float(arr[0])
    return float(arr.sum() / arr.size)


def variance(values: Iterable[float]) -> float:
    """Population variance; 0.0 for an empty sequence."""
    arr = as_array(values)
    if arr.size == 0:
        return 0.0
    return float(np.sum((arr - mean(arr)) ** 2) / arr.size)


def covariance(x: Iterable[float], y: Iterable[float]) -> float:
    """Population covariance of two paired sequences.

    Raises:
        SeriesLengthError: If x and y differ in length.
    """
    x_arr = as_array(x)
    y_arr = as_array(y)
    if x_arr.size != y_arr.size:
        raise SeriesLengthError(x_arr.size, y_arr.size)
    if x_arr.size == 0:
        return 0.0
    return float(np.sum((x_arr - mean(x_arr)) * (y_arr - mean(y_arr))) / x_arr.size)
