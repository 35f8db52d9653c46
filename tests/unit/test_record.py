"""
Tests for the plain-text calibration record.
"""

import pytest

from caliph.calibration.record import format_record, load_record, parse_record, save_record
from caliph.config import configure
from caliph.core.exceptions import CalibrationRecordError
from caliph.core.models import CalibrationModel


class TestFormatAndParse:
    """Tests for the pure record functions."""

    def test_format(self):
        model = CalibrationModel(slope=1.0, offset=0.0495)
        assert format_record(model) == "1.0\t0.0495\n"

    def test_format_is_lossless(self):
        model = CalibrationModel(slope=0.9630818619582664, offset=0.18656500802568238)
        parsed = parse_record(format_record(model))

        assert parsed.slope == model.slope
        assert parsed.offset == model.offset

    def test_metrics_are_not_stored(self):
        model = CalibrationModel(slope=1.0, offset=0.0, rms=0.1, r_squared=0.9)
        parsed = parse_record(format_record(model))

        assert parsed.rms is None
        assert parsed.r_squared is None

    @pytest.mark.parametrize(
        "text",
        [
            "1.1\t0.02\n",
            "1.1 0.02",
            "  1.1\n\n0.02  ",
            "slope 1.1 offset 0.02",
            "1.1 0.02 99.0",
        ],
    )
    def test_parse_whitespace_variants(self, text):
        model = parse_record(text)
        assert model.coefficients == (1.1, 0.02)

    @pytest.mark.parametrize("text", ["", "1.5", "slope offset", "\n\t\n"])
    def test_parse_too_few_numbers(self, text):
        with pytest.raises(CalibrationRecordError, match="Expected slope and offset"):
            parse_record(text)


class TestRecordFiles:
    """Tests for saving and loading record files."""

    def test_save_and_load(self, record_path):
        model = CalibrationModel(slope=0.96828, offset=0.16052)

        written = save_record(model, record_path)
        loaded = load_record(record_path)

        assert written == record_path
        assert record_path.read_text() == "0.96828\t0.16052\n"
        assert loaded.is_close(model, abs_tol=0.0)

    def test_save_creates_parent_directories(self, tmp_path):
        path = tmp_path / "meter" / "electrode-a" / "calibration.ph"
        save_record(CalibrationModel.identity(), path)
        assert path.exists()

    def test_default_path_from_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CALIPH_CALIBRATION_RECORD_PATH", str(tmp_path / "lab.ph"))
        configure()

        save_record(CalibrationModel(slope=1.1, offset=0.02))

        assert (tmp_path / "lab.ph").read_text() == "1.1\t0.02\n"
        assert load_record().coefficients == (1.1, 0.02)

    def test_load_missing_file(self, record_path):
        with pytest.raises(CalibrationRecordError, match="not found") as exc_info:
            load_record(record_path)

        assert exc_info.value.details["path"] == str(record_path)

    def test_load_malformed_file(self, record_path):
        record_path.write_text("garbage\n")

        with pytest.raises(CalibrationRecordError) as exc_info:
            load_record(record_path)

        assert exc_info.value.details["path"] == str(record_path)
