"""PostScript table ('post'), format 2.0 with glyph names."""

from collections.abc import Sequence
from typing import BinaryIO

from fontTools.agl import UV2AGL
from fontTools.ttLib.standardGlyphOrder import standardGlyphOrder

from pixelfont.exceptions import FieldOverflowError
from pixelfont.io.packing import fixed, i16, u8, u16, u32
from pixelfont.tables.base import FontTable

NOTDEF_NAME = ".notdef"
MAX_NAME_LENGTH = 255

_STANDARD_INDEX = {name: index for index, name in enumerate(standardGlyphOrder)}


def glyph_name(char: str) -> str:
    """Adobe Glyph List name of a character, or ``uniXXXX``."""
    code = ord(char)
    return UV2AGL.get(code, f"uni{code:04X}")


def ligature_name(sequence: str) -> str:
    """Name of a ligature glyph: component names joined by underscores."""
    return "_".join(glyph_name(char) for char in sequence)


class Post(FontTable):
    """Glyph names and PostScript printing hints.

    Names found in the standard Macintosh glyph order are stored by index;
    all others are stored as Pascal strings after the index array.
    """

    tag = b"post"

    def __init__(
        self,
        glyph_names: Sequence[str],
        underline_position: int = 0,
        underline_thickness: int = 1,
        is_fixed_pitch: bool = True,
    ) -> None:
        """Build the table.

        Raises:
            FieldOverflowError: If a name is longer than its one-byte length
                prefix can hold
        """
        self.glyph_names = list(glyph_names)
        for name in self.glyph_names:
            if len(name) > MAX_NAME_LENGTH:
                raise FieldOverflowError(f"length of glyph name {name[:20]}...", len(name), MAX_NAME_LENGTH)
        self.underline_position = underline_position
        self.underline_thickness = underline_thickness
        self.is_fixed_pitch = is_fixed_pitch

    def write(self, writer: BinaryIO) -> None:
        writer.write(u32(0x00020000))  # version 2.0
        writer.write(fixed(0))  # italicAngle
        writer.write(i16(self.underline_position))
        writer.write(i16(self.underline_thickness))
        writer.write(u32(int(self.is_fixed_pitch)))
        writer.write(b"\0" * 16)  # min/max memory usage

        writer.write(u16(len(self.glyph_names)))
        custom: list[str] = []
        for name in self.glyph_names:
            if name in _STANDARD_INDEX:
                writer.write(u16(_STANDARD_INDEX[name]))
            else:
                writer.write(u16(len(standardGlyphOrder) + len(custom)))
                custom.append(name)
        for name in custom:
            raw = name.encode("ascii")
            writer.write(u8(len(raw)))
            writer.write(raw)
