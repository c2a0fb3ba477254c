"""Rich console output helpers for the CLI."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from pixelfont.utils import CompileStats

console = Console()

SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print the banner shown before the first step."""
    console.print(f"\n[bold]pixelfont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print the name of the step about to run."""
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(source: str, width: int, height: int, glyphs: int, ligatures: int) -> None:
    """Print what is about to be compiled.

    Args:
        source: Source file path or a label for built-in glyphs
        width: Cell width in pixels
        height: Cell height in pixels
        glyphs: Number of character glyphs
        ligatures: Number of ligatures
    """
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(
        f"  {width}x{height} cell {SYM_DOT} {glyphs} glyphs {SYM_DOT} {ligatures} ligatures"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown size"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    return f"{size_bytes / 1024:.0f} KB"


def print_table_sizes(stats: CompileStats) -> None:
    """Print the size of every table written."""
    table = Table(box=None, padding=(0, 2), show_header=False)
    table.add_column("tag", style="bold")
    table.add_column("bytes", justify="right")
    for tag, length in sorted(stats.table_sizes.items()):
        table.add_row(tag, f"{length:,}")
    console.print(table)


def print_success(output_path: Path, stats: CompileStats) -> None:
    """Print where the font went and what it contains.

    Args:
        output_path: Saved font file
        stats: Statistics of the compilation
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}")

    line = Text("  ")
    line.append(str(output_path), style="bold")
    line.append(f" ({format_file_size(output_path)})")
    console.print(line)

    console.print(
        f"  {stats.glyph_count} glyphs {SYM_DOT} {stats.contour_count} contours {SYM_DOT} "
        f"{stats.point_count} points {SYM_DOT} {stats.ligature_count} ligatures"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print an error, with an optional second line of detail.

    Both strings are printed literally, so brackets in them are not markup.
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
