"""OS/2 and Windows metrics table ('OS/2'), version 4."""

from dataclasses import dataclass, field
from typing import BinaryIO

from pixelfont.io.packing import i16, u16, u32
from pixelfont.tables.base import FontTable

WEIGHT_REGULAR = 400
WIDTH_MEDIUM = 5
FS_SELECTION_REGULAR = 1 << 6
FS_SELECTION_USE_TYPO_METRICS = 1 << 7


@dataclass
class Os2(FontTable):
    """Windows-specific metrics.

    Sizes that have no natural pixel-font value (sub- and superscripts,
    strikeout) are derived from the em size.
    """

    tag = b"OS/2"

    units_per_em: int
    avg_char_width: int
    ascender: int
    descender: int
    line_gap: int
    x_height: int
    cap_height: int
    first_char_index: int
    last_char_index: int
    max_context: int = 1
    vendor_id: str = "    "
    weight_class: int = WEIGHT_REGULAR
    width_class: int = WIDTH_MEDIUM
    fs_selection: int = FS_SELECTION_REGULAR | FS_SELECTION_USE_TYPO_METRICS
    panose: bytes = field(default=bytes(10))
    default_char: int = 0
    break_char: int = 0x20

    def write(self, writer: BinaryIO) -> None:
        em = self.units_per_em
        script_size = em * 2 // 3
        script_offset = em // 3

        writer.write(u16(4))  # version
        writer.write(i16(self.avg_char_width))
        writer.write(u16(self.weight_class))
        writer.write(u16(self.width_class))
        writer.write(u16(0))  # fsType: installable embedding
        writer.write(i16(script_size))  # ySubscriptXSize
        writer.write(i16(script_size))  # ySubscriptYSize
        writer.write(i16(0))  # ySubscriptXOffset
        writer.write(i16(script_offset // 2))  # ySubscriptYOffset
        writer.write(i16(script_size))  # ySuperscriptXSize
        writer.write(i16(script_size))  # ySuperscriptYSize
        writer.write(i16(0))  # ySuperscriptXOffset
        writer.write(i16(script_offset))  # ySuperscriptYOffset
        writer.write(i16(max(1, em // 16)))  # yStrikeoutSize
        writer.write(i16(self.x_height // 2))  # yStrikeoutPosition
        writer.write(i16(0))  # sFamilyClass
        writer.write(self.panose)
        writer.write(b"\0" * 16)  # ulUnicodeRange1-4
        writer.write(self.vendor_id.encode("ascii"))
        writer.write(u16(self.fs_selection))
        writer.write(u16(self.first_char_index))
        writer.write(u16(self.last_char_index))
        writer.write(i16(self.ascender))  # sTypoAscender
        writer.write(i16(self.descender))  # sTypoDescender
        writer.write(i16(self.line_gap))  # sTypoLineGap
        writer.write(u16(self.ascender))  # usWinAscent
        writer.write(u16(-self.descender))  # usWinDescent
        writer.write(u32(0))  # ulCodePageRange1
        writer.write(u32(0))  # ulCodePageRange2
        writer.write(i16(self.x_height))
        writer.write(i16(self.cap_height))
        writer.write(u16(self.default_char))
        writer.write(u16(self.break_char))
        writer.write(u16(self.max_context))
