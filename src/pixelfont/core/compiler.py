"""Bitmap font compilation.

This module turns a set of same-sized bitmaps into a complete TrueType font.

Key components:
- FontCompiler: Validates input, traces glyphs and builds every table
- Font: A compiled font, ready to write or save
- bitmap_font: Convenience wrapper around FontCompiler
"""

import os
import tempfile
import time
from collections.abc import Iterable
from datetime import datetime, timezone
from io import BytesIO
from pathlib import Path
from typing import BinaryIO

import structlog

from pixelfont.config import CompilerSettings, FontConfig
from pixelfont.domain import Glyph, GlyphId, Ligature, Rect, Sprite
from pixelfont.exceptions import (
    FieldOverflowError,
    FontSaveError,
    GlyphError,
    MissingCharacterError,
)
from pixelfont.io.sfnt import TableRecord, write_sfnt
from pixelfont.tables import (
    Cmap,
    FontTable,
    Glyf,
    Gsub,
    Head,
    Hhea,
    Hmtx,
    Loca,
    Name,
    Os2,
    Post,
    glyph_from_sprite,
)
from pixelfont.tables.cmap import check_code
from pixelfont.tables.post import NOTDEF_NAME, glyph_name, ligature_name
from pixelfont.utils import CompileLogger, CompileStats, get_logger

# Glyph coordinates are int16 and glyph ids are uint16
MAX_CELL_SIZE = 0x7FFF
MAX_GLYPH_COUNT = 0xFFFF


class Font:
    """A compiled font.

    Holds the finished tables. Every size and range limit was checked while
    compiling, so writing can only fail in the output sink.

    Attributes:
        tables: Every table of the font
        glyph_names: Glyph names in glyph id order
        stats: Statistics collected while compiling and writing
    """

    def __init__(
        self,
        tables: list[FontTable],
        glyph_names: list[str],
        compile_logger: CompileLogger,
    ) -> None:
        self.tables = tables
        self.glyph_names = glyph_names
        self._compile_logger = compile_logger

    @property
    def stats(self) -> CompileStats:
        return self._compile_logger.stats

    def table(self, tag: bytes) -> FontTable | None:
        """Get the table with the given tag, if the font has one."""
        return next((table for table in self.tables if table.tag == tag), None)

    def _on_table(self, record: TableRecord) -> None:
        self._compile_logger.log_table(
            record.tag.decode("ascii"), record.offset, record.length, record.checksum
        )

    def write(self, sink: BinaryIO) -> None:
        """Write the font file to a seekable binary stream.

        Args:
            sink: Destination stream

        Raises:
            OSError: Propagated unchanged from the stream
        """
        write_sfnt(sink, self.tables, on_table=self._on_table)

    def to_bytes(self) -> bytes:
        """The complete font file as bytes."""
        buffer = BytesIO()
        self.write(buffer)
        return buffer.getvalue()

    def save(self, path: Path | str) -> Path:
        """Save the font file.

        The font is written to a temporary file next to ``path`` and renamed
        into place, so a failure never leaves a partial file behind.

        Args:
            path: Destination file

        Returns:
            The path written

        Raises:
            FontSaveError: If the file cannot be written
        """
        path = Path(path)
        try:
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
        except OSError as e:
            raise FontSaveError(str(path), e.strerror or str(e)) from e

        try:
            with os.fdopen(fd, "wb") as sink:
                self.write(sink)
            os.replace(temp_name, path)
        except OSError as e:
            Path(temp_name).unlink(missing_ok=True)
            raise FontSaveError(str(path), e.strerror or str(e)) from e
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

        self._compile_logger.stats.end_time = time.time()
        return path


class FontCompiler:
    """Compiles bitmaps into a TrueType font.

    Glyph ids are assigned as follows: 0 is the missing glyph, characters
    follow in code point order, and ligature glyphs come last in the order
    they were given.

    Example:
        compiler = FontCompiler()
        font = compiler.compile(8, 8, box, [("a", sprite_a)])
        font.save("pixel.ttf")
    """

    def __init__(
        self,
        settings: CompilerSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the compiler.

        Args:
            settings: Compiler settings (defaults apply when None)
            logger: Structured logger (a quiet library logger when None)
        """
        self.settings = settings or CompilerSettings()
        self.logger = logger or get_logger(__name__)

    @property
    def font_config(self) -> FontConfig:
        return self.settings.font

    def compile(
        self,
        width: int,
        height: int,
        notdef: Sprite,
        glyphs: Iterable[tuple[str, Sprite]],
        ligatures: Iterable[tuple[str, Sprite]] = (),
    ) -> Font:
        """Compile bitmaps into a font.

        Args:
            width: Cell width in pixels, also the advance width
            height: Cell height in pixels
            notdef: Bitmap of the missing glyph
            glyphs: (character, bitmap) pairs
            ligatures: (character sequence, bitmap) pairs

        Returns:
            The compiled font

        Raises:
            GlyphError: If a bitmap has the wrong size or an input repeats
            CharacterRangeError: If a character is outside the BMP
            MissingCharacterError: If a ligature uses an unknown character
            CoordinateRangeError: If an outline exceeds the int16 range
            FieldOverflowError: If a count or size outgrows its field, such as
                too many cmap segments or an overlong ligature name
            OffsetOverflowError: If the ligature table needs offsets beyond 0xFFFF
        """
        compile_logger = CompileLogger(self.logger)
        compile_logger.stats.start_time = time.time()

        try:
            font = self._compile(width, height, notdef, glyphs, ligatures, compile_logger)
        except Exception as e:
            compile_logger.log_error(e)
            raise

        compile_logger.stats.end_time = time.time()
        self.logger.info(
            "Font compiled",
            glyphs=compile_logger.stats.glyph_count,
            ligatures=compile_logger.stats.ligature_count,
            tables=len(font.tables),
            duration_seconds=round(compile_logger.stats.duration_seconds, 3),
        )
        return font

    def _check_sprite(self, sprite: Sprite, width: int, height: int, label: str) -> None:
        if (sprite.width, sprite.height) != (width, height):
            raise GlyphError(
                f"{label} is {sprite.width}x{sprite.height}, expected {width}x{height}"
            )

    def _compile(
        self,
        width: int,
        height: int,
        notdef: Sprite,
        glyphs: Iterable[tuple[str, Sprite]],
        ligatures: Iterable[tuple[str, Sprite]],
        compile_logger: CompileLogger,
    ) -> Font:
        config = self.font_config
        if width <= 0 or height <= 0:
            raise GlyphError(f"cell size must be positive, got {width}x{height}")
        if max(width, height) > MAX_CELL_SIZE:
            raise FieldOverflowError("cell size", max(width, height), MAX_CELL_SIZE)
        if config.descent > height:
            raise GlyphError(f"descent {config.descent} exceeds cell height {height}")

        # Characters
        self._check_sprite(notdef, width, height, "missing glyph")
        by_char: dict[str, Sprite] = {}
        for char, sprite in glyphs:
            if len(char) != 1:
                raise GlyphError(f"expected a single character, got {char!r}")
            check_code(char)
            if char in by_char:
                raise GlyphError(f"duplicate glyph for {char!r}")
            self._check_sprite(sprite, width, height, f"glyph {char!r}")
            by_char[char] = sprite

        chars = sorted(by_char)
        char_ids: dict[str, GlyphId] = {char: index for index, char in enumerate(chars, start=1)}

        # Ligatures
        ligature_sprites: list[Sprite] = []
        ligature_rules: list[Ligature] = []
        ligature_sequences: list[str] = []
        for sequence, sprite in ligatures:
            if sequence in ligature_sequences:
                raise GlyphError(f"duplicate ligature for {sequence!r}")
            self._check_sprite(sprite, width, height, f"ligature {sequence!r}")
            pattern = []
            for char in sequence:
                if char not in char_ids:
                    raise MissingCharacterError(sequence, char)
                pattern.append(char_ids[char])
            replacement = len(chars) + 1 + len(ligature_rules)
            ligature_rules.append(Ligature(tuple(pattern), replacement))
            ligature_sprites.append(sprite)
            ligature_sequences.append(sequence)
            compile_logger.log_ligature(sequence, tuple(pattern), replacement)

        glyph_count = 1 + len(chars) + len(ligature_rules)
        if glyph_count > MAX_GLYPH_COUNT:
            raise FieldOverflowError("glyph count", glyph_count, MAX_GLYPH_COUNT)

        # Outlines, in glyph id order
        sprites = [notdef, *(by_char[char] for char in chars), *ligature_sprites]
        names = [
            NOTDEF_NAME,
            *(glyph_name(char) for char in chars),
            *(ligature_name(sequence) for sequence in ligature_sequences),
        ]
        outlines: list[Glyph] = []
        for glyph_id, (sprite, name) in enumerate(zip(sprites, names)):
            glyph = glyph_from_sprite(sprite, config.descent)
            outlines.append(glyph)
            compile_logger.log_glyph(glyph_id, name, glyph.contour_count, glyph.point_count)

        return Font(
            self._build_tables(width, height, chars, ligature_rules, outlines, names),
            names,
            compile_logger,
        )

    def _build_tables(
        self,
        width: int,
        height: int,
        chars: list[str],
        ligatures: list[Ligature],
        outlines: list[Glyph],
        names: list[str],
    ) -> list[FontTable]:
        config = self.font_config
        units_per_em = config.resolve_units_per_em(height)
        ascender = height - config.descent
        descender = -config.descent
        moment = config.timestamp or datetime.now(timezone.utc)

        glyf = Glyf(outlines)
        loca = Loca(glyf.offsets())
        codes = [ord(char) for char in chars]
        hmtx = Hmtx.monospace(width, outlines)

        bounds = Rect()
        inked = [glyph.rect for glyph in outlines if not glyph.is_empty()]
        if inked:
            bounds = inked[0]
            for rect in inked[1:]:
                bounds = bounds.union(rect)

        gsub = Gsub(ligatures) if ligatures else None

        def top_of(char: str) -> int:
            if char in chars:
                glyph = outlines[chars.index(char) + 1]
                if not glyph.is_empty():
                    return glyph.rect.y_max
            return ascender

        tables: list[FontTable] = [
            glyf,
            loca,
            Cmap(codes),
            Head(
                units_per_em=units_per_em,
                created=moment,
                modified=moment,
                bounds=bounds,
                index_to_loc_format=loca.index_to_loc_format,
                lowest_rec_ppem=height,
                font_revision=config.version,
            ),
            hmtx,
            Hhea(ascender, descender, config.line_gap, outlines, hmtx),
            glyf.maxp(),
            Name.for_font(config.family_name, config.style_name, config.version),
            Os2(
                units_per_em=units_per_em,
                avg_char_width=width,
                ascender=ascender,
                descender=descender,
                line_gap=config.line_gap,
                x_height=top_of("x"),
                cap_height=top_of("H"),
                first_char_index=min(codes, default=0),
                last_char_index=max(codes, default=0),
                max_context=gsub.max_context if gsub else 1,
                vendor_id=config.vendor_id,
            ),
            Post(names),
        ]
        if gsub is not None:
            tables.append(gsub)
        return tables


def bitmap_font(
    width: int,
    height: int,
    notdef: Sprite,
    glyphs: Iterable[tuple[str, Sprite]],
    ligatures: Iterable[tuple[str, Sprite]] = (),
    config: FontConfig | None = None,
) -> Font:
    """Compile bitmaps into a font.

    Args:
        width: Cell width in pixels
        height: Cell height in pixels
        notdef: Bitmap of the missing glyph
        glyphs: (character, bitmap) pairs
        ligatures: (character sequence, bitmap) pairs
        config: Font naming and metrics (defaults apply when None)

    Returns:
        The compiled font

    Raises:
        PixelFontError: If the input is invalid
    """
    settings = CompilerSettings(font=config) if config is not None else None
    return FontCompiler(settings).compile(width, height, notdef, glyphs, ligatures)
