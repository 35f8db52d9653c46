"""
Temperature dependence of the pH 4.01 and pH 10.01 calibration buffers.

Each buffer is described by a table of (temperature, pH) control points.
Values between control points are found by straight-line interpolation
between the two bracketing points; there is no smoothing. Outside the
tabulated range there is no result and `interpolate` returns None.

The standard tables cover 0 to 95 degrees C in 5 degree steps and are built
once per process by `get_reference_curves`. Callers with their own buffer
data can build a `ReferenceCurveSet` and pass it to the calibrator instead.
"""

import math
from typing import Optional, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from caliph.core.types import BufferStandard

STANDARD_TEMPERATURES: tuple[float, ...] = (
    0.0, 5.0, 10.0, 15.0, 20.0, 25.0, 30.0, 35.0, 40.0, 45.0,
    50.0, 55.0, 60.0, 65.0, 70.0, 75.0, 80.0, 85.0, 90.0, 95.0,
)  # fmt: skip

STANDARD_PH4: tuple[float, ...] = (
    4.01, 4.00, 4.00, 4.00, 4.00, 4.01, 4.02, 4.03, 4.04, 4.05,
    4.06, 4.07, 4.09, 4.11, 4.12, 4.14, 4.16, 4.17, 4.19, 4.20,
)  # fmt: skip

STANDARD_PH10: tuple[float, ...] = (
    10.32, 10.25, 10.18, 10.12, 10.06, 10.01, 9.96, 9.92, 9.88, 9.85,
    9.82, 9.79, 9.77, 9.76, 9.75, 9.74, 9.73, 9.74, 9.75, 9.76,
)  # fmt: skip


class ReferenceCurve(BaseModel):
    """pH of one buffer solution as a function of temperature."""

    model_config = ConfigDict(frozen=True)

    buffer: BufferStandard
    temperatures: tuple[float, ...] = Field(..., min_length=2, description="Degrees C")
    ph_values: tuple[float, ...] = Field(..., min_length=2)
    nominal_ph: float = Field(..., gt=0.0, lt=14.0, description="Value used outside the table")

    @model_validator(mode="after")
    def validate_control_points(self) -> "ReferenceCurve":
        """Ensure the table is well formed."""
        if len(self.temperatures) != len(self.ph_values):
            raise ValueError("temperatures and ph_values must have the same length")
        if not all(math.isfinite(v) for v in self.temperatures + self.ph_values):
            raise ValueError("control points must be finite")
        if any(b <= a for a, b in zip(self.temperatures, self.temperatures[1:])):
            raise ValueError("temperatures must be strictly increasing")
        return self

    @property
    def min_temperature(self) -> float:
        return self.temperatures[0]

    @property
    def max_temperature(self) -> float:
        return self.temperatures[-1]

    def covers(self, temperature: float) -> bool:
        """True if the temperature lies inside the tabulated range (inclusive)."""
        return self.min_temperature <= temperature <= self.max_temperature

    def interpolate(self, temperature: float) -> Optional[float]:
        """Buffer pH at the given temperature, or None outside the table."""
        return interpolate(self, temperature)


class ReferenceCurveSet(BaseModel):
    """The pair of buffer curves used for two-point calibration."""

    model_config = ConfigDict(frozen=True)

    ph4: ReferenceCurve
    ph10: ReferenceCurve

    @model_validator(mode="after")
    def validate_buffers(self) -> "ReferenceCurveSet":
        """Ensure each curve sits in the slot for its buffer."""
        if self.ph4.buffer is not BufferStandard.PH4 or self.ph10.buffer is not BufferStandard.PH10:
            raise ValueError("ph4 and ph10 curves must describe the matching buffers")
        return self

    @classmethod
    def standard(cls) -> "ReferenceCurveSet":
        """Curves for the common pH 4.01 / pH 10.01 buffer pair, 0 to 95 degrees C."""
        return cls(
            ph4=ReferenceCurve(
                buffer=BufferStandard.PH4,
                temperatures=STANDARD_TEMPERATURES,
                ph_values=STANDARD_PH4,
                nominal_ph=BufferStandard.PH4.nominal_ph,
            ),
            ph10=ReferenceCurve(
                buffer=BufferStandard.PH10,
                temperatures=STANDARD_TEMPERATURES,
                ph_values=STANDARD_PH10,
                nominal_ph=BufferStandard.PH10.nominal_ph,
            ),
        )

    def for_buffer(self, buffer: Union[BufferStandard, str]) -> ReferenceCurve:
        """Look up the curve for a buffer standard.

        Raises:
            ValueError: If `buffer` does not name a known buffer standard.
        """
        curves = {BufferStandard.PH4: self.ph4, BufferStandard.PH10: self.ph10}
        return curves[BufferStandard(buffer)]


def interpolate(curve: ReferenceCurve, temperature: float) -> Optional[float]:
    """Piecewise-linear lookup of a buffer pH.

    Args:
        curve: Reference curve to sample.
        temperature: Temperature in degrees C.

    Returns:
        The interpolated pH. A temperature that equals a control point returns
        that point's table value exactly. None if the temperature is outside
        the table or not a finite number.
    """
    t = float(temperature)
    if not math.isfinite(t) or not curve.covers(t):
        return None

    temps = np.asarray(curve.temperatures)
    # Index of the last control point at or below t
    i = int(np.searchsorted(temps, t, side="right")) - 1
    if curve.temperatures[i] == t:
        return curve.ph_values[i]

    t0, t1 = curve.temperatures[i], curve.temperatures[i + 1]
    p0, p1 = curve.ph_values[i], curve.ph_values[i + 1]
    return p0 + (p1 - p0) * (t - t0) / (t1 - t0)


_reference_curves: Optional[ReferenceCurveSet] = None


def get_reference_curves() -> ReferenceCurveSet:
    """Get the process-wide standard curve set, creating it on first use."""
    global _reference_curves
    if _reference_curves is None:
        _reference_curves = ReferenceCurveSet.standard()
    return _reference_curves
