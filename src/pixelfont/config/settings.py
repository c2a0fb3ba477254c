"""Configuration settings for pixelfont."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FontConfig(BaseModel):
    """Naming and metrics of the compiled font.

    All distances are in pixels of the source bitmaps, which are also the
    font's design units.
    """

    family_name: str = Field(
        default="Pixel",
        min_length=1,
        description="Font family name",
    )
    style_name: str = Field(
        default="Regular",
        min_length=1,
        description="Style (subfamily) name",
    )
    version: float = Field(
        default=1.0,
        ge=0.0,
        lt=32768.0,
        description="Font revision, stored as 16.16 fixed point",
    )
    vendor_id: str = Field(
        default="    ",
        min_length=4,
        max_length=4,
        description="Four-character OS/2 vendor tag",
    )
    units_per_em: int | None = Field(
        default=None,
        ge=16,
        le=16384,
        description="Design units per em (None = twice the cell height)",
    )
    descent: int = Field(
        default=0,
        ge=0,
        description="Pixel rows below the baseline",
    )
    line_gap: int = Field(
        default=0,
        ge=0,
        description="Extra spacing between lines",
    )
    timestamp: datetime | None = Field(
        default=None,
        description="Creation and modification time (None = now)",
    )

    @field_validator("vendor_id")
    @classmethod
    def _ascii_vendor(cls, value: str) -> str:
        if not value.isascii():
            raise ValueError("vendor_id must be ASCII")
        return value

    def resolve_units_per_em(self, cell_height: int) -> int:
        """Units per em for a given cell height."""
        if self.units_per_em is not None:
            return self.units_per_em
        return max(16, cell_height * 2)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


class CompilerSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CompilerSettings:
    """Get default application settings."""
    return CompilerSettings()
