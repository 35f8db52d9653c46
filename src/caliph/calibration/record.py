"""
Plain-text calibration record: slope and offset separated by whitespace.

`format_record` and `parse_record` are pure; `save_record` and `load_record`
are thin file wrappers for the command-line tools.
"""

from pathlib import Path
from typing import Optional

from caliph.config import get_settings
from caliph.core.exceptions import CalibrationRecordError
from caliph.core.logging import get_logger
from caliph.core.models import CalibrationModel

logger = get_logger(__name__)


def format_record(model: CalibrationModel) -> str:
    """Render a model as "slope<TAB>offset" with full float precision."""
    return f"{model.slope!r}\t{model.offset!r}\n"


def parse_record(text: str) -> CalibrationModel:
    """Read slope and offset from record text.

    Tokens that are not numbers are skipped; the first two numbers are
    taken as slope then offset.

    Raises:
        CalibrationRecordError: If fewer than two numbers are present.
    """
    numbers = []
    for token in text.split():
        try:
            numbers.append(float(token))
        except ValueError:
            continue
        if len(numbers) == 2:
            break

    if len(numbers) < 2:
        raise CalibrationRecordError(
            f"Expected slope and offset, found {len(numbers)} number(s)",
            details={"text": text[:80]},
        )
    return CalibrationModel(slope=numbers[0], offset=numbers[1])


def save_record(model: CalibrationModel, path: Optional[Path] = None) -> Path:
    """Write a calibration record to disk.

    Args:
        model: Calibration to store.
        path: Destination file. Defaults to the configured record path.

    Returns:
        The path written.
    """
    path = Path(path or get_settings().calibration.record_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_record(model), encoding="utf-8")
    logger.info(f"Saved calibration record to {path}")
    return path


def load_record(path: Optional[Path] = None) -> CalibrationModel:
    """Load a calibration record from disk.

    Raises:
        CalibrationRecordError: If the file is missing or malformed.
    """
    path = Path(path or get_settings().calibration.record_path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CalibrationRecordError(
            f"Calibration record not found: {path}",
            details={"path": str(path)},
        ) from e

    try:
        model = parse_record(text)
    except CalibrationRecordError as e:
        e.details["path"] = str(path)
        raise
    logger.debug(f"Loaded calibration record from {path}: {model.summary()}")
    return model
