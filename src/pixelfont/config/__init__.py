"""Configuration management for pixelfont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Naming and metrics of the compiled font
- LoggingConfig: Logging settings
- CompilerSettings: Main application settings
"""

from pixelfont.config.settings import (
    CompilerSettings,
    FontConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "CompilerSettings",
    "FontConfig",
    "LoggingConfig",
    "get_default_settings",
]
