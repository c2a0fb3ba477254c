"""Command-line interface for pixelfont.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Build a font from a JSON glyph source
- Build the built-in sample alphabet
- Verbose/quiet output modes
"""

from pixelfont.cli.app import cli, main

__all__ = ["cli", "main"]
