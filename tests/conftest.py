"""
Shared fixtures for caliph tests.
"""

import os

import pytest

from caliph.calibration.routines import PhCalibrator
from caliph.config import configure
from caliph.core.models import CalibrationModel, MeasurementPair
from caliph.curves.reference import ReferenceCurveSet


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Give every test fresh settings built from a clean environment."""
    for name in list(os.environ):
        if name.startswith("CALIPH_"):
            monkeypatch.delenv(name, raising=False)
    configure()
    yield
    configure()


@pytest.fixture
def standard_curves():
    """Standard pH 4.01 / pH 10.01 buffer curves."""
    return ReferenceCurveSet.standard()


@pytest.fixture
def calibrator(standard_curves):
    """Calibrator using the standard buffer curves."""
    return PhCalibrator(standard_curves)


@pytest.fixture
def sample_measurements():
    """Readings from the documented example: pH 4 buffer read 3.97, pH 10 read 10.2."""
    return MeasurementPair(ph4=3.97, ph10=10.2)


@pytest.fixture
def sample_model():
    """Calibration that adds a small constant offset."""
    return CalibrationModel(slope=1.0, offset=0.0495)


@pytest.fixture
def record_path(tmp_path):
    """Path for a calibration record inside a temporary directory."""
    return tmp_path / "calibration.ph"
