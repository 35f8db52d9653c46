"""
Tests for the caliph / conph command-line tools.
"""

import pytest
from typer.testing import CliRunner

from caliph.cli import app, calibrate_app, convert_app


@pytest.fixture
def runner():
    return CliRunner()


class TestCalibrateCommand:
    """Tests for `caliph`."""

    def test_calibrate_at_default_temperature(self, runner):
        result = runner.invoke(calibrate_app, ["3.97", "10.2"])

        assert result.exit_code == 0, result.output
        assert "Calibrating" in result.output
        assert "0.96308" in result.output
        assert "0.18657" in result.output

    def test_calibrate_with_temperature(self, runner):
        result = runner.invoke(calibrate_app, ["3.97", "10.2", "-t", "22.3"])

        assert result.exit_code == 0, result.output
        assert "0.96828" in result.output
        assert "0.16052" in result.output

    def test_calibrate_store(self, runner, record_path):
        result = runner.invoke(
            calibrate_app, ["3.97", "10.2", "--store", "--record", str(record_path)]
        )

        assert result.exit_code == 0, result.output
        assert "Saved to" in result.output
        slope, offset = (float(v) for v in record_path.read_text().split())
        assert slope == pytest.approx(0.96308, abs=1e-5)
        assert offset == pytest.approx(0.18657, abs=1e-5)

    def test_calibrate_does_not_store_by_default(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(calibrate_app, ["3.97", "10.2"])

        assert result.exit_code == 0
        assert not (tmp_path / "calibration.ph").exists()

    def test_identical_readings_fail(self, runner):
        result = runner.invoke(calibrate_app, ["7.0", "7.0"])

        assert result.exit_code == 1
        assert "undefined" in result.output

    def test_out_of_range_temperature_notice(self, runner):
        result = runner.invoke(calibrate_app, ["3.97", "10.2", "-t", "120"])

        assert result.exit_code == 0, result.output
        assert "outside the ph4 buffer table" in result.output
        assert "outside the ph10 buffer table" in result.output
        # Nominal buffers give the same model as 25 C
        assert "0.96308" in result.output

    def test_in_range_temperature_has_no_notice(self, runner):
        result = runner.invoke(calibrate_app, ["3.97", "10.2", "-t", "22.3"])
        assert "outside" not in result.output

    def test_missing_argument(self, runner):
        result = runner.invoke(calibrate_app, ["3.97"])
        assert result.exit_code != 0


class TestConvertCommand:
    """Tests for `conph`."""

    def test_convert_from_record(self, runner, record_path):
        record_path.write_text("1.0\t0.0495\n")

        result = runner.invoke(convert_app, ["3.5", "--record", str(record_path)])

        assert result.exit_code == 0, result.output
        assert "Converting" in result.output
        assert "3.5495" in result.output

    def test_convert_custom(self, runner):
        result = runner.invoke(convert_app, ["3.5", "-c", "-s", "1.1", "-o", "0.02"])

        assert result.exit_code == 0, result.output
        assert "3.8700" in result.output

    def test_custom_requires_slope_and_offset(self, runner):
        result = runner.invoke(convert_app, ["3.5", "-c", "-s", "1.1"])
        assert result.exit_code == 2

    def test_slope_requires_custom(self, runner):
        result = runner.invoke(convert_app, ["3.5", "-s", "1.1", "-o", "0.02"])
        assert result.exit_code == 2

    def test_missing_record(self, runner, tmp_path):
        result = runner.invoke(convert_app, ["3.5", "--record", str(tmp_path / "absent.ph")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_ph_decimals_setting(self, runner, monkeypatch):
        monkeypatch.setenv("CALIPH_DISPLAY_PH_DECIMALS", "2")
        from caliph.config import configure

        configure()
        result = runner.invoke(convert_app, ["3.5", "-c", "-s", "1.1", "-o", "0.02"])

        assert "3.87" in result.output
        assert "3.8700" not in result.output


class TestCombinedApp:
    """Tests for the `caliph-tool` command group."""

    def test_round_trip(self, runner, record_path):
        calibrated = runner.invoke(
            app, ["calibrate", "3.97", "10.2", "-t", "22.3", "-s", "-r", str(record_path)]
        )
        converted = runner.invoke(app, ["convert", "3.97", "-r", str(record_path)])

        assert calibrated.exit_code == 0, calibrated.output
        assert converted.exit_code == 0, converted.output
        # The pH 4 buffer reading converts to the buffer's pH at 22.3 C
        assert "4.0046" in converted.output

    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "calibrate" in result.output
        assert "convert" in result.output
