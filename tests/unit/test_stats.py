"""
Tests for population statistics.
"""

import numpy as np
import pytest

from caliph.calculations.stats import covariance, mean, variance
from caliph.core.exceptions import SeriesLengthError


class TestMean:
    """Tests for mean."""

    def test_mean(self):
        assert mean([1.0, 2.0, 3.0, 4.0]) == pytest.approx(2.5)

    def test_mean_empty(self):
        """Empty input has a mean of zero rather than NaN."""
        assert mean([]) == 0.0

    def test_mean_single(self):
        assert mean([2.0]) == 2.0

    def test_mean_accepts_numpy_and_tuples(self):
        assert mean(np.array([1.0, 3.0])) == pytest.approx(2.0)
        assert mean((1, 2, 3)) == pytest.approx(2.0)

    def test_mean_returns_python_float(self):
        assert type(mean(np.array([1.0, 2.0]))) is float


class TestVariance:
    """Tests for population variance."""

    def test_variance(self):
        """Divides by N, not N - 1."""
        assert variance([1.0, 2.0, 3.0, 4.0]) == pytest.approx(1.25)

    def test_variance_empty(self):
        assert variance([]) == 0.0

    def test_variance_single(self):
        assert variance([7.5]) == 0.0

    def test_variance_constant(self):
        assert variance([3.0, 3.0, 3.0]) == 0.0


class TestCovariance:
    """Tests for population covariance."""

    def test_covariance(self):
        x = [1.0, 2.0, 3.0, 4.0]
        y = [3.0, 4.0, 5.0, 6.0]
        assert covariance(x, y) == pytest.approx(1.25)

    def test_covariance_negative(self):
        assert covariance([1.0, 2.0], [2.0, 1.0]) == pytest.approx(-0.25)

    def test_covariance_empty(self):
        assert covariance([], []) == 0.0

    def test_covariance_single(self):
        assert covariance([2.0], [1.0]) == 0.0

    def test_covariance_with_itself_is_variance(self):
        values = [0.5, 1.5, 4.0, 9.0]
        assert covariance(values, values) == pytest.approx(variance(values))

    def test_covariance_wrong_lengths(self):
        with pytest.raises(SeriesLengthError, match="equal length"):
            covariance([1.0, 2.0, 3.0, 4.0], [3.0, 4.0, 5.0])

    def test_length_error_is_not_recoverable(self):
        with pytest.raises(ValueError) as exc_info:
            covariance([1.0], [])

        error = exc_info.value
        assert isinstance(error, SeriesLengthError)
        assert error.recoverable is False
        assert error.details == {"len_x": 1, "len_y": 0}
