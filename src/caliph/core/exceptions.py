"""
Exception hierarchy for caliph.

Errors carry a machine-readable code, optional details, and a flag telling
callers whether retrying or substituting a value makes sense.
"""

from typing import Any


class CaliphError(Exception):
    """Base exception for all caliph errors."""

    error_code: str = "CALIPH_ERROR"
    default_message: str = "An error occurred"
    default_recoverable: bool = True

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        recoverable: bool | None = None,
    ):
        """
        Initialize the error.

        Args:
            message: Technical error message
            error_code: Override default error code
            details: Additional error details
            recoverable: Override whether the caller may continue
        """
        self.message = message or self.default_message
        self.error_code = error_code or self.__class__.error_code
        self.details = details or {}
        self.recoverable = self.default_recoverable if recoverable is None else recoverable

        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        result: dict[str, Any] = {
            "error_code": self.error_code,
            "message": self.message,
            "recoverable": self.recoverable,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class SeriesLengthError(CaliphError, ValueError):
    """Paired sample sequences differ in length.

    Raised by the statistics layer and never handled inside the library:
    a regression over mismatched pairs has no meaningful result.
    """

    error_code = "SERIES_LENGTH_MISMATCH"
    default_message = "x and y must be of equal length."
    default_recoverable = False

    def __init__(self, len_x: int, len_y: int):
        super().__init__(
            f"x and y must be of equal length (got {len_x} and {len_y}).",
            details={"len_x": len_x, "len_y": len_y},
        )


class CalibrationRecordError(CaliphError):
    """A stored calibration record is missing or cannot be parsed."""

    error_code = "CALIBRATION_RECORD_INVALID"
    default_message = "Invalid calibration record"
