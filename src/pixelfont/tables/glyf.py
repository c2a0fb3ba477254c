"""Glyph outline table ('glyf').

Every glyph is a simple glyph whose points all lie on the curve. A glyph is
stored as a header and contour end indices, then an empty instruction block,
the per-point flags, and the X and Y coordinate deltas. The flags are
run-length compressed and each delta is written in the shortest form.

https://learn.microsoft.com/en-us/typography/opentype/spec/glyf
"""

import io
from enum import IntFlag
from itertools import groupby
from typing import BinaryIO

from pixelfont.core.contours import find_contours
from pixelfont.domain import Glyph, Sprite
from pixelfont.exceptions import CoordinateRangeError, FieldOverflowError
from pixelfont.io.packing import i16, u8, u16
from pixelfont.tables.base import FontTable
from pixelfont.tables.maxp import Maxp


class GlyphFlag(IntFlag):
    """Per-point flags of a simple glyph."""

    ON_CURVE = 0x01
    X_SHORT = 0x02
    Y_SHORT = 0x04
    REPEAT = 0x08
    X_SAME_OR_POSITIVE = 0x10
    Y_SAME_OR_POSITIVE = 0x20


MAX_REPEAT = 256
MAX_CONTOURS = 0x7FFF
MAX_POINTS = 0xFFFF


def glyph_from_sprite(sprite: Sprite, descent: int = 0) -> Glyph:
    """Trace a sprite into a glyph.

    Args:
        sprite: Bitmap to trace
        descent: Pixel rows below the baseline; points move down by this much

    Returns:
        Glyph with tight bounds
    """
    contours = [[(x, y - descent) for x, y in contour] for contour in find_contours(sprite)]
    return Glyph.from_contours(contours)


def encode_delta(delta: int, short: GlyphFlag, same_or_positive: GlyphFlag) -> tuple[GlyphFlag, bytes]:
    """Encode one coordinate delta in its shortest form.

    Args:
        delta: Change from the previous point's coordinate
        short: The axis's short-vector flag
        same_or_positive: The axis's same/positive flag

    Returns:
        Tuple of (flags for this axis, bytes for the coordinate stream)

    Raises:
        CoordinateRangeError: If the delta does not fit in int16
    """
    if delta == 0:
        return same_or_positive, b""
    if abs(delta) <= 0xFF:
        flag = short | same_or_positive if delta > 0 else short
        return flag, u8(abs(delta))
    if not -0x8000 <= delta <= 0x7FFF:
        raise CoordinateRangeError(delta)
    return GlyphFlag(0), i16(delta)


def compress_flags(flags: list[GlyphFlag]) -> bytes:
    """Run-length compress a flag stream.

    A run of two or more equal flags becomes the flag with REPEAT set followed
    by the number of extra repetitions. Runs longer than 256 are split.

    Examples:
        >>> compress_flags([GlyphFlag.ON_CURVE] * 3)
        b'\\t\\x02'
    """
    out = bytearray()
    for flag, run in groupby(flags):
        count = len(list(run))
        while count:
            chunk = min(count, MAX_REPEAT)
            if chunk == 1:
                out.append(flag)
            else:
                out.append(flag | GlyphFlag.REPEAT)
                out.append(chunk - 1)
            count -= chunk
    return bytes(out)


def encode_glyph(glyph: Glyph) -> bytes:
    """Encode a simple glyph, padded to an even length.

    Empty glyphs encode to no bytes at all.

    Args:
        glyph: Glyph to encode

    Returns:
        Encoded glyph data

    Raises:
        CoordinateRangeError: If two consecutive points are too far apart
        FieldOverflowError: If the glyph has more contours or points than
            the header fields can count
    """
    if glyph.is_empty():
        return b""
    if glyph.contour_count > MAX_CONTOURS:
        raise FieldOverflowError("contour count", glyph.contour_count, MAX_CONTOURS)
    if glyph.point_count > MAX_POINTS:
        raise FieldOverflowError("point count", glyph.point_count, MAX_POINTS)

    out = io.BytesIO()
    rect = glyph.rect
    out.write(i16(glyph.contour_count))
    for value in (rect.x_min, rect.y_min, rect.x_max, rect.y_max):
        out.write(i16(value))

    end = -1
    for contour in glyph.contours:
        end += len(contour)
        out.write(u16(end))

    out.write(u16(len(glyph.instructions)))
    out.write(glyph.instructions)

    flags = []
    xs = io.BytesIO()
    ys = io.BytesIO()
    x = y = 0
    for contour in glyph.contours:
        for px, py in contour:
            x_flag, x_bytes = encode_delta(px - x, GlyphFlag.X_SHORT, GlyphFlag.X_SAME_OR_POSITIVE)
            y_flag, y_bytes = encode_delta(py - y, GlyphFlag.Y_SHORT, GlyphFlag.Y_SAME_OR_POSITIVE)
            flags.append(GlyphFlag.ON_CURVE | x_flag | y_flag)
            xs.write(x_bytes)
            ys.write(y_bytes)
            x, y = px, py

    out.write(compress_flags(flags))
    out.write(xs.getvalue())
    out.write(ys.getvalue())

    # each glyph must be u16-aligned
    if out.tell() % 2:
        out.write(b"\0")
    return out.getvalue()


class Glyf(FontTable):
    """The glyph outline table, in glyph id order."""

    tag = b"glyf"

    def __init__(self, glyphs: list[Glyph]) -> None:
        self.glyphs = glyphs
        self._encoded = [encode_glyph(glyph) for glyph in glyphs]

    def write(self, writer: BinaryIO) -> None:
        for data in self._encoded:
            writer.write(data)

    def offsets(self) -> list[int]:
        """Start offset of every glyph plus the end of the last one."""
        offsets = [0]
        for data in self._encoded:
            offsets.append(offsets[-1] + len(data))
        return offsets

    def maxp(self) -> Maxp:
        """Maximum profile matching these glyphs."""
        return Maxp(
            num_glyphs=len(self.glyphs),
            max_points=max((g.point_count for g in self.glyphs), default=0),
            max_contours=max((g.contour_count for g in self.glyphs), default=0),
            max_size_of_instructions=max((len(g.instructions) for g in self.glyphs), default=0),
        )
