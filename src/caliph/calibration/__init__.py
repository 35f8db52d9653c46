"""
Calibration module for two-point pH meter calibration.

Example usage:

    from caliph.calibration import ph_calibration, ph_convert, save_record

    model = ph_calibration([3.97, 10.2], temperature=22.3)
    print(model.summary())
    save_record(model)

    corrected = ph_convert(3.5, model)
"""

from caliph.calibration.record import (
    format_record,
    load_record,
    parse_record,
    save_record,
)
from caliph.calibration.routines import (
    PhCalibrator,
    ph_calibration,
    ph_convert,
    reference_ph,
)

__all__ = [
    # Routines
    "PhCalibrator",
    "ph_calibration",
    "ph_convert",
    "reference_ph",
    # Record
    "format_record",
    "load_record",
    "parse_record",
    "save_record",
]
