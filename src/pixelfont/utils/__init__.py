"""Utility functions for pixelfont.

This module provides utility functions including:

- Logging setup and configuration
- Compilation statistics
"""

from pixelfont.utils.logging import (
    CompileLogger,
    CompileStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "CompileLogger",
    "CompileStats",
    "configure_logging",
    "get_logger",
]
