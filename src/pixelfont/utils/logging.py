"""Logging utilities for pixelfont."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class CompileStats:
    """Statistics from a compilation run."""

    glyph_count: int = 0
    empty_glyph_count: int = 0
    contour_count: int = 0
    point_count: int = 0
    ligature_count: int = 0
    table_sizes: dict[str, int] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate compilation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def font_size(self) -> int:
        """Sum of the unpadded table sizes."""
        return sum(self.table_sizes.values())


def get_logger(name: str = "pixelfont") -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that emits through the standard logging module.

    Nothing is printed until logging is configured, either by
    :func:`configure_logging` or by the host application.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


CONSOLE_HANDLER = "pixelfont.console"
FILE_HANDLER = "pixelfont.file"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(),
]


def _level(name: str) -> int:
    return logging.getLevelName(name.upper())


def _replace_handler(root: logging.Logger, handler: logging.Handler, name: str) -> None:
    """Install ``handler`` as ``name``, closing any earlier one of that name."""
    for old in [h for h in root.handlers if h.get_name() == name]:
        root.removeHandler(old)
        old.close()
    handler.set_name(name)
    root.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Route structured logs to the console and, optionally, a file.

    Calling this again replaces the handlers installed by an earlier call.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Level for console output
        file_level: Level for file output
        quiet: Only show errors on the console

    Returns:
        Logger for the pixelfont namespace
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    if log_file is not None:
        to_file = logging.FileHandler(log_file, encoding="utf-8")
        to_file.setLevel(_level(file_level))
        to_file.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        _replace_handler(root, to_file, FILE_HANDLER)

    to_console = logging.StreamHandler()
    to_console.setLevel(logging.ERROR if quiet else _level(console_level))
    to_console.setFormatter(logging.Formatter("%(message)s"))
    _replace_handler(root, to_console, CONSOLE_HANDLER)

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pixelfont")
    logger.debug("Logging configured", log_file=str(log_file) if log_file else None)
    return logger


class CompileLogger:
    """Logger for tracking compilation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CompileStats()

    def log_glyph(self, glyph_id: int, name: str, contours: int, points: int) -> None:
        """Log a traced glyph."""
        self._logger.debug(
            "Glyph traced",
            glyph_id=glyph_id,
            glyph=name,
            contours=contours,
            points=points,
        )
        self._stats.glyph_count += 1
        self._stats.contour_count += contours
        self._stats.point_count += points
        if contours == 0:
            self._stats.empty_glyph_count += 1

    def log_ligature(self, sequence: str, pattern: tuple[int, ...], replacement: int) -> None:
        """Log a resolved ligature."""
        self._logger.debug(
            "Ligature resolved",
            sequence=sequence,
            pattern=list(pattern),
            replacement=replacement,
        )
        self._stats.ligature_count += 1

    def log_table(self, tag: str, offset: int, length: int, checksum: int) -> None:
        """Log a table written to the font file."""
        self._logger.debug(
            "Table written",
            tag=tag,
            offset=offset,
            length=length,
            checksum=f"0x{checksum:08X}",
        )
        self._stats.table_sizes[tag] = length

    def log_error(self, error: Exception) -> None:
        """Log a failed compilation."""
        self._logger.error(
            "Compilation failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> CompileStats:
        """Get current compilation statistics."""
        return self._stats
