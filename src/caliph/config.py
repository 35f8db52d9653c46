"""
Configuration management for the caliph pH calibration tools.

Uses pydantic-settings for environment-based configuration with validation.
All settings can be overridden via environment variables with CALIPH_ prefix.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class CalibrationSettings(BaseSettings):
    """Settings for two-point calibration and the stored calibration record."""

    model_config = SettingsConfigDict(env_prefix="CALIPH_CALIBRATION_")

    # Temperature assumed when the user does not give one (degrees Celsius)
    default_temperature: float = Field(default=25.0, ge=-50.0, le=200.0)

    # Plain-text record holding "slope<TAB>offset"
    record_path: Path = Field(default=Path("calibration.ph"))


class DisplaySettings(BaseSettings):
    """Settings for console output of the command-line tools."""

    model_config = SettingsConfigDict(env_prefix="CALIPH_DISPLAY_")

    coefficient_decimals: int = Field(default=5, ge=1, le=12)
    ph_decimals: int = Field(default=4, ge=1, le=12)
    colored: bool = Field(default=True)


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings."""

    model_config = SettingsConfigDict(
        env_prefix="CALIPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="caliph")
    debug: bool = Field(default=False)

    # Only warnings and errors reach stderr unless raised
    log_level: str = Field(default="WARNING")
    log_file: Optional[Path] = Field(default=None)
    log_json: bool = Field(default=False)

    # Subsettings
    calibration: CalibrationSettings = Field(default_factory=CalibrationSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        level = str(v).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global settings instance - lazy loaded
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None, **kwargs) -> Settings:
    """
    Configure the global settings.

    Args:
        settings: Optional Settings instance to use directly
        **kwargs: Settings overrides

    Returns:
        The configured Settings instance
    """
    global _settings
    if settings is not None:
        _settings = settings
    elif kwargs:
        _settings = Settings(**kwargs)
    else:
        _settings = Settings()
    return _settings
