"""
Domain-specific types and enumerations for pH calibration.
"""

from enum import Enum


class BufferStandard(str, Enum):
    """Buffer solutions used as two-point calibration references."""

    PH4 = "ph4"
    PH10 = "ph10"

    @property
    def nominal_ph(self) -> float:
        """pH printed on the buffer bottle (value at 25 degrees C)."""
        return _NOMINAL_PH[self]


_NOMINAL_PH = {
    BufferStandard.PH4: 4.01,
    BufferStandard.PH10: 10.01,
}
