"""
Ordinary least-squares line fitting with goodness-of-fit evaluation.

Fits `y = slope * x + offset` in closed form from the population statistics
in `caliph.calculations.stats`. With two points the fit passes exactly
through both, which is the two-point buffer calibration case.

Note on R-squared: `evaluate` reports `1 - rms / variance(y)`. This is not
the textbook coefficient of determination (`1 - SS_res / SS_tot`). When y is
constant the formula is still followed: -inf for a nonzero RMS, NaN for zero.
"""

import math
from collections.abc import Iterable, Sequence
from typing import Any, NamedTuple, Union

import numpy as np

from caliph.calculations.stats import as_array, covariance, mean, variance
from caliph.core.exceptions import SeriesLengthError
from caliph.core.logging import get_logger
from caliph.core.models import CalibrationModel

logger = get_logger(__name__)

ModelLike = Union[CalibrationModel, Sequence[float]]


class FitEvaluation(NamedTuple):
    """Goodness-of-fit metrics for a linear model."""

    rms: float
    r_squared: float


def _coefficients(model: ModelLike) -> tuple[float, float]:
    """Extract (slope, offset) from a model or a two-element sequence."""
    if isinstance(model, CalibrationModel):
        return model.coefficients
    slope, offset = model
    return float(slope), float(offset)


def fit(x: Iterable[float], y: Iterable[float]) -> CalibrationModel:
    """Fit a straight line through paired samples by ordinary least squares.

    Args:
        x: Independent values (measured pH).
        y: Dependent values (reference pH).

    Returns:
        CalibrationModel without fit metrics. When all x are identical the
        slope is undefined and both coefficients are NaN.

    Raises:
        SeriesLengthError: If x and y differ in length.
    """
    x = as_array(x)
    y = as_array(y)

    cov_xy = covariance(x, y)
    var_x = variance(x)

    if var_x == 0.0:
        logger.warning(
            "Degenerate fit: x has zero variance, slope and offset are undefined",
            extra={"n_points": int(x.size)},
        )
        return CalibrationModel(slope=math.nan, offset=math.nan)

    slope = cov_xy / var_x
    offset = mean(y) - slope * mean(x)
    return CalibrationModel(slope=slope, offset=offset)


def predict(x: Any, model: ModelLike) -> Any:
    """Evaluate `slope * x + offset` for a scalar or a numpy array."""
    slope, offset = _coefficients(model)
    if isinstance(x, (list, tuple)):
        x = np.asarray(x, dtype=float)
    return x * slope + offset


def root_mean_squared_error(actual: Iterable[float], predicted: Iterable[float]) -> float:
    """Root of the mean squared difference between two paired sequences.

    Returns NaN for empty input.
    """
    actual = as_array(actual)
    predicted = as_array(predicted)
    if actual.size != predicted.size:
        raise SeriesLengthError(actual.size, predicted.size)
    if actual.size == 0:
        return math.nan
    return float(math.sqrt(np.sum((predicted - actual) ** 2) / actual.size))


def r_squared(y: Iterable[float], rms: float) -> float:
    """Goodness of fit as `1 - rms / variance(y)`.

    With constant y the ratio is taken as IEEE division: a positive RMS gives
    -inf and a zero or NaN RMS gives NaN.
    """
    var_y = variance(y)
    if math.isnan(rms):
        return math.nan
    if var_y == 0.0:
        return -math.inf if rms > 0.0 else math.nan
    return 1.0 - rms / var_y


def evaluate(x: Iterable[float], y: Iterable[float], model: ModelLike) -> FitEvaluation:
    """Compute RMS error and R-squared of a model against paired samples.

    Args:
        x: Independent values fed to the model.
        y: Observed values the predictions are compared with.
        model: Model to evaluate.

    Returns:
        FitEvaluation(rms, r_squared). Empty input gives (NaN, NaN).

    Raises:
        SeriesLengthError: If x and y differ in length.
    """
    x = as_array(x)
    y = as_array(y)
    if x.size != y.size:
        raise SeriesLengthError(x.size, y.size)

    y_predicted = predict(x, model)
    rms = root_mean_squared_error(y, y_predicted)
    return FitEvaluation(rms=rms, r_squared=r_squared(y, rms))
