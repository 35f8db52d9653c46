"""
Core data models for caliph.

All models use Pydantic for validation and are immutable once created.
"""

import math
from collections.abc import Sequence
from typing import Any, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CalibrationModel(BaseModel):
    """Linear calibration of a pH electrode: corrected = slope * measured + offset.

    The fit-quality metrics are advisory only. Coefficients may be non-finite
    when they come from a degenerate fit (both buffer readings identical).
    """

    model_config = ConfigDict(frozen=True)

    slope: float = Field(..., description="Gain correction")
    offset: float = Field(..., description="Offset correction in pH units")
    rms: Optional[float] = Field(default=None, description="Root-mean-square error of the fit")
    r_squared: Optional[float] = Field(default=None, description="Goodness of fit")

    @classmethod
    def identity(cls) -> "CalibrationModel":
        """Model that leaves readings unchanged."""
        return cls(slope=1.0, offset=0.0)

    @property
    def coefficients(self) -> tuple[float, float]:
        """(slope, offset) pair."""
        return (self.slope, self.offset)

    @property
    def is_finite(self) -> bool:
        """True unless the fit was degenerate."""
        return math.isfinite(self.slope) and math.isfinite(self.offset)

    def with_slope(self, slope: float) -> "CalibrationModel":
        """Copy of this model with a different slope."""
        return self.model_copy(update={"slope": float(slope)})

    def with_offset(self, offset: float) -> "CalibrationModel":
        """Copy of this model with a different offset."""
        return self.model_copy(update={"offset": float(offset)})

    def is_close(self, other: "CalibrationModel", abs_tol: float = 1e-9) -> bool:
        """Compare coefficients within an absolute tolerance, ignoring metrics."""
        return math.isclose(self.slope, other.slope, rel_tol=0.0, abs_tol=abs_tol) and math.isclose(
            self.offset, other.offset, rel_tol=0.0, abs_tol=abs_tol
        )

    def predict(self, measured: Any) -> Any:
        """Apply the calibration to a reading or an array of readings."""
        return self.slope * measured + self.offset

    def summary(self) -> str:
        """Generate a one-line summary string."""
        text = f"Slope: {self.slope:.5f}, Offset: {self.offset:.5f}"
        if self.rms is not None:
            text += f", RMS: {self.rms:.5f}"
        if self.r_squared is not None:
            text += f", R2: {self.r_squared:.5f}"
        return text


class MeasurementPair(BaseModel):
    """Raw electrode readings taken in the pH 4 and pH 10 buffers at one temperature."""

    model_config = ConfigDict(frozen=True)

    ph4: float = Field(..., description="Reading in the pH 4.01 buffer")
    ph10: float = Field(..., description="Reading in the pH 10.01 buffer")

    @field_validator("ph4", "ph10", mode="before")
    @classmethod
    def convert_numpy_scalar(cls, v: Any) -> Any:
        """Accept numpy scalars."""
        if isinstance(v, np.generic):
            return v.item()
        return v

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "MeasurementPair":
        """Build from a two-element sequence ordered (pH 4, pH 10)."""
        values = list(values)
        if len(values) != 2:
            raise ValueError(f"Expected two buffer readings, got {len(values)}")
        return cls(ph4=values[0], ph10=values[1])

    def as_tuple(self) -> tuple[float, float]:
        """Readings ordered (pH 4, pH 10)."""
        return (self.ph4, self.ph10)
