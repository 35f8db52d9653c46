"""
Numerical building blocks: population statistics and linear least squares.
"""

from caliph.calculations.fit import (
    FitEvaluation,
    evaluate,
    fit,
    predict,
    r_squared,
    root_mean_squared_error,
)
from caliph.calculations.stats import covariance, mean, variance

__all__ = [
    "FitEvaluation",
    "covariance",
    "evaluate",
    "fit",
    "mean",
    "predict",
    "r_squared",
    "root_mean_squared_error",
    "variance",
]
