"""
Core data models, types and errors for caliph.
"""

from caliph.core.exceptions import (
    CaliphError,
    CalibrationRecordError,
    SeriesLengthError,
)
from caliph.core.models import (
    CalibrationModel,
    MeasurementPair,
)
from caliph.core.types import BufferStandard

__all__ = [
    # Models
    "CalibrationModel",
    "MeasurementPair",
    # Types
    "BufferStandard",
    # Errors
    "CaliphError",
    "CalibrationRecordError",
    "SeriesLengthError",
]
