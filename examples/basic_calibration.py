#!/usr/bin/env python3
"""
Basic Calibration Example

This example demonstrates the two-point workflow:
1. Look up the buffer pH values at the measurement temperature
2. Fit slope and offset from the electrode readings
3. Save the calibration record
4. Correct a few sample readings with it
"""

from pathlib import Path

from caliph import (
    MeasurementPair,
    load_record,
    ph_calibration,
    ph_convert,
    reference_ph,
    save_record,
)


def main():
    temperature = 22.3
    readings = MeasurementPair(ph4=3.97, ph10=10.2)
    record_path = Path("calibration.ph")

    print("=" * 50)
    print("pH Meter Calibration - Basic Example")
    print("=" * 50)

    ph4_ref, ph10_ref = reference_ph(temperature)
    print(f"\nBuffer values at {temperature} C:")
    print(f"  pH 4.01 buffer:  {ph4_ref:.4f}")
    print(f"  pH 10.01 buffer: {ph10_ref:.4f}")

    model = ph_calibration(readings, temperature)
    print("\nCalibration:")
    print(f"  {model.summary()}")

    save_record(model, record_path)
    print(f"\nSaved to {record_path}")

    stored = load_record(record_path)
    print("\nCorrected samples:")
    for raw in (3.5, 6.8, 7.0, 8.25):
        print(f"  {raw:6.3f} -> {ph_convert(raw, stored):6.4f}")


if __name__ == "__main__":
    main()
