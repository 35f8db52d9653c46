"""
Buffer reference curves and temperature interpolation.
"""

from caliph.curves.reference import (
    STANDARD_PH4,
    STANDARD_PH10,
    STANDARD_TEMPERATURES,
    ReferenceCurve,
    ReferenceCurveSet,
    get_reference_curves,
    interpolate,
)

__all__ = [
    "STANDARD_PH4",
    "STANDARD_PH10",
    "STANDARD_TEMPERATURES",
    "ReferenceCurve",
    "ReferenceCurveSet",
    "get_reference_curves",
    "interpolate",
]
