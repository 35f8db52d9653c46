"""
caliph - two-point calibration for pH meters.

Converts raw pH electrode readings into calibrated pH values:

- Temperature-dependent reference curves for pH 4.01 and pH 10.01 buffers
- Linear calibration (slope, offset) fitted by ordinary least squares
- Fit quality metrics (RMS error, R-squared)
- Conversion of new readings with a stored or explicit calibration
- Command-line tools `caliph` and `conph`
"""

__version__ = "0.2.0"

# Core models
from caliph.core.exceptions import CaliphError, CalibrationRecordError, SeriesLengthError
from caliph.core.models import CalibrationModel, MeasurementPair
from caliph.core.types import BufferStandard

# Configuration
from caliph.config import Settings, configure, get_settings

# Calculations
from caliph.calculations import FitEvaluation, covariance, evaluate, fit, mean, predict, variance

# Reference curves
from caliph.curves import ReferenceCurve, ReferenceCurveSet, get_reference_curves, interpolate

# Calibration
from caliph.calibration import (
    PhCalibrator,
    format_record,
    load_record,
    parse_record,
    ph_calibration,
    ph_convert,
    reference_ph,
    save_record,
)

__all__ = [
    "__version__",
    # Core
    "BufferStandard",
    "CalibrationModel",
    "CalibrationRecordError",
    "CaliphError",
    "MeasurementPair",
    "SeriesLengthError",
    # Config
    "Settings",
    "configure",
    "get_settings",
    # Calculations
    "FitEvaluation",
    "covariance",
    "evaluate",
    "fit",
    "mean",
    "predict",
    "variance",
    # Reference curves
    "ReferenceCurve",
    "ReferenceCurveSet",
    "get_reference_curves",
    "interpolate",
    # Calibration
    "PhCalibrator",
    "format_record",
    "load_record",
    "parse_record",
    "ph_calibration",
    "ph_convert",
    "reference_ph",
    "save_record",
]
