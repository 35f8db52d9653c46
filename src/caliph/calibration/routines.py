"""
Two-point pH meter calibration and conversion of raw readings.

Calibration:
    1. Look up the pH of both buffers at the measurement temperature.
    2. Fit a line mapping the raw readings onto those reference values.
    3. Evaluate the fit and return the model with its metrics.

Conversion applies an existing model to a new raw reading.

If the measurement temperature lies outside a buffer's reference table,
the buffer's nominal pH (4.01 or 10.01) is used instead and a warning is
logged.
"""

from collections.abc import Sequence
from typing import Optional, Union

from caliph.calculations.fit import ModelLike, evaluate, fit, predict
from caliph.config import get_settings
from caliph.core.logging import LoggingMixin, log_operation
from caliph.core.models import CalibrationModel, MeasurementPair
from caliph.core.types import BufferStandard
from caliph.curves.reference import ReferenceCurveSet, get_reference_curves, interpolate

MeasuredLike = Union[MeasurementPair, Sequence[float]]


class PhCalibrator(LoggingMixin):
    """Calibrates and converts pH readings against a set of buffer curves."""

    def __init__(self, curves: Optional[ReferenceCurveSet] = None):
        """
        Args:
            curves: Buffer reference curves. Defaults to the standard tables.
        """
        self.curves = curves or get_reference_curves()

    def reference_ph(self, buffer: BufferStandard, temperature: float) -> float:
        """Buffer pH at the given temperature, falling back to the nominal value."""
        curve = self.curves.for_buffer(buffer)
        value = interpolate(curve, temperature)
        if value is None:
            self.logger.warning(
                f"Temperature {temperature} C is outside the {buffer.value} reference table "
                f"({curve.min_temperature}-{curve.max_temperature} C); "
                f"using nominal pH {curve.nominal_ph}",
                extra={"buffer": buffer.value, "temperature": temperature},
            )
            return curve.nominal_ph
        return value

    def reference_values(self, temperature: float) -> tuple[float, float]:
        """Reference pH of both buffers, ordered (pH 4, pH 10)."""
        return (
            self.reference_ph(BufferStandard.PH4, temperature),
            self.reference_ph(BufferStandard.PH10, temperature),
        )

    def calibrate(
        self,
        measured: MeasuredLike,
        temperature: Optional[float] = None,
    ) -> CalibrationModel:
        """Derive a calibration model from two buffer readings.

        Args:
            measured: Raw readings in the pH 4 and pH 10 buffers.
            temperature: Measurement temperature in degrees C. Defaults to the
                configured calibration temperature.

        Returns:
            CalibrationModel with RMS and R-squared populated.
        """
        if not isinstance(measured, MeasurementPair):
            measured = MeasurementPair.from_sequence(measured)
        if temperature is None:
            temperature = get_settings().calibration.default_temperature

        self.log_method_call("calibrate", measured=measured.as_tuple(), temperature=temperature)

        with log_operation(self.logger, "ph_calibration"):
            x = measured.as_tuple()
            y = self.reference_values(temperature)

            model = fit(x, y)
            metrics = evaluate(x, y, model)
            result = model.model_copy(update={"rms": metrics.rms, "r_squared": metrics.r_squared})

        if not result.is_finite:
            self.logger.warning(
                "Calibration is undefined: both buffer readings are identical",
                extra={"ph4": measured.ph4, "ph10": measured.ph10},
            )
        else:
            self.logger.info(f"Calibrated at {temperature} C: {result.summary()}")
        return result

    def convert(self, measured_ph: float, model: ModelLike) -> float:
        """Correct a raw reading with a calibration model."""
        return float(predict(measured_ph, model))


def ph_calibration(
    measured: MeasuredLike,
    temperature: Optional[float] = 25.0,
    curves: Optional[ReferenceCurveSet] = None,
) -> CalibrationModel:
    """Calibrate from readings in the pH 4 and pH 10 buffers at one temperature.

    Args:
        measured: Readings ordered (pH 4 buffer, pH 10 buffer).
        temperature: Degrees C; None uses the configured default.
        curves: Optional custom buffer curves.

    Returns:
        CalibrationModel with fit metrics.
    """
    return PhCalibrator(curves).calibrate(measured, temperature)


def ph_convert(measured_ph: float, model: ModelLike) -> float:
    """Correct a raw pH reading: slope * measured_ph + offset."""
    return float(predict(measured_ph, model))


def reference_ph(
    temperature: float,
    curves: Optional[ReferenceCurveSet] = None,
) -> tuple[float, float]:
    """Reference pH of both buffers at a temperature, ordered (pH 4, pH 10)."""
    return PhCalibrator(curves).reference_values(temperature)
