"""CLI application entry point for pixelfont.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from pixelfont import __version__
from pixelfont.cli.output import (
    console,
    print_error,
    print_header,
    print_source_info,
    print_step,
    print_success,
    print_table_sizes,
)
from pixelfont.config import CompilerSettings, FontConfig, LoggingConfig
from pixelfont.core import FontCompiler
from pixelfont.domain import Sprite
from pixelfont.exceptions import FontSaveError, PixelFontError, SourceFileError
from pixelfont.io import load_source
from pixelfont.samples import SAMPLE_HEIGHT, SAMPLE_WIDTH, sample_glyphs, sample_notdef
from pixelfont.utils import configure_logging

app = typer.Typer(
    name="pixelfont",
    help="Compile bitmap glyphs into TrueType fonts.",
    add_completion=False,
    no_args_is_help=True,
)

DEFAULT_SAMPLE_OUTPUT = Path("pixelfont-sample.ttf")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]pixelfont[/bold blue] v{__version__}")
        raise typer.Exit()


OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Output font path"),
]
FamilyOption = Annotated[
    str,
    typer.Option("--family", help="Font family name"),
]
StyleOption = Annotated[
    str,
    typer.Option("--style", help="Font style name"),
]
UnitsPerEmOption = Annotated[
    int | None,
    typer.Option(
        "--units-per-em",
        help="Design units per em (default: twice the cell height)",
        min=16,
        max=16384,
    ),
]
DescentOption = Annotated[
    int,
    typer.Option("--descent", help="Pixel rows below the baseline", min=0),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Verbose console output"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compile bitmap glyphs into TrueType fonts."""


def _make_settings(
    family: str,
    style: str,
    units_per_em: int | None,
    descent: int,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
) -> CompilerSettings:
    """Build settings from CLI arguments, exiting on invalid values."""
    try:
        return CompilerSettings(
            font=FontConfig(
                family_name=family,
                style_name=style,
                units_per_em=units_per_em,
                descent=descent,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1) from None


def _compile_and_save(
    settings: CompilerSettings,
    label: str,
    width: int,
    height: int,
    notdef: Sprite,
    glyphs: list[tuple[str, Sprite]],
    ligatures: list[tuple[str, Sprite]],
    output: Path,
    quiet: bool,
    verbose: bool,
) -> None:
    """Compile glyphs, save the font and report the result."""
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_source_info(label, width, height, len(glyphs), len(ligatures))
        print_step("Compiling")

    compiler = FontCompiler(settings, logger=logger)
    font = compiler.compile(width, height, notdef, glyphs, ligatures)

    if not quiet:
        print_step("Writing")
    font.save(output)

    if not quiet:
        print_success(output, font.stats)
        if verbose:
            print_table_sizes(font.stats)


def _check_options(verbose: bool, quiet: bool) -> None:
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)


@app.command()
def build(
    source: Annotated[
        Path,
        typer.Argument(help="Path to a JSON glyph source file", show_default=False),
    ],
    output: OutputOption = None,
    family: FamilyOption = "Pixel",
    style: StyleOption = "Regular",
    units_per_em: UnitsPerEmOption = None,
    descent: DescentOption = 0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Compile a JSON glyph source into a TrueType font.

    Example:
        pixelfont build glyphs.json -o glyphs.ttf
    """
    _check_options(verbose, quiet)

    if not source.is_file():
        print_error(
            f"Source file not found: {source}",
            details=f"The file '{source}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    settings = _make_settings(family, style, units_per_em, descent, log_file, log_level, quiet)
    output_path = output if output is not None else source.with_suffix(".ttf")

    if not quiet:
        print_header(__version__)
        print_step("Loading source")

    try:
        glyph_source = load_source(source)
        _compile_and_save(
            settings,
            str(source),
            glyph_source.width,
            glyph_source.height,
            glyph_source.notdef_sprite(),
            glyph_source.glyph_sprites(),
            glyph_source.ligature_sprites(),
            output_path,
            quiet,
            verbose,
        )
    except SourceFileError as e:
        print_error(f"Could not read source: {e.path}", details=e.reason)
        raise typer.Exit(code=1) from None
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1) from None
    except PixelFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def sample(
    output: OutputOption = None,
    family: FamilyOption = "Pixel",
    style: StyleOption = "Regular",
    units_per_em: UnitsPerEmOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Compile the built-in 8x8 lowercase alphabet.

    Example:
        pixelfont sample -o sample.ttf
    """
    _check_options(verbose, quiet)
    settings = _make_settings(family, style, units_per_em, 0, log_file, log_level, quiet)
    output_path = output if output is not None else DEFAULT_SAMPLE_OUTPUT

    if not quiet:
        print_header(__version__)

    try:
        _compile_and_save(
            settings,
            "built-in alphabet",
            SAMPLE_WIDTH,
            SAMPLE_HEIGHT,
            sample_notdef(),
            sample_glyphs(),
            [],
            output_path,
            quiet,
            verbose,
        )
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1) from None
    except PixelFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
