"""Font header table ('head')."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntFlag
from typing import BinaryIO

from pixelfont.domain import Rect
from pixelfont.io.packing import fixed, i16, i64, u16, u32
from pixelfont.tables.base import FontTable

MAGIC_NUMBER = 0x5F0F3CF5
FONT_EPOCH = datetime(1904, 1, 1, tzinfo=timezone.utc)

# Byte offset of checkSumAdjustment inside the table
CHECKSUM_ADJUSTMENT_OFFSET = 8


class HeadFlags(IntFlag):
    BASELINE_AT_Y0 = 1 << 0
    LSB_AT_X0 = 1 << 1
    INSTRUCTIONS_DEPEND_ON_SIZE = 1 << 2
    INTEGER_SCALING = 1 << 3


def font_timestamp(moment: datetime) -> int:
    """Seconds since 1904-01-01 UTC, the epoch of font date fields.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int((moment - FONT_EPOCH).total_seconds())


@dataclass
class Head(FontTable):
    """Global font information.

    ``checksum_adjustment`` is normally left at zero; the container writer
    patches it once the whole file is known.
    """

    tag = b"head"

    units_per_em: int
    created: datetime
    modified: datetime
    bounds: Rect
    index_to_loc_format: int
    lowest_rec_ppem: int
    font_revision: float = 1.0
    flags: HeadFlags = HeadFlags.BASELINE_AT_Y0 | HeadFlags.INTEGER_SCALING
    mac_style: int = 0
    font_direction_hint: int = 2
    checksum_adjustment: int = 0

    def write(self, writer: BinaryIO) -> None:
        writer.write(u32(0x00010000))  # version
        writer.write(fixed(self.font_revision))
        writer.write(u32(self.checksum_adjustment))
        writer.write(u32(MAGIC_NUMBER))
        writer.write(u16(self.flags))
        writer.write(u16(self.units_per_em))
        writer.write(i64(font_timestamp(self.created)))
        writer.write(i64(font_timestamp(self.modified)))
        writer.write(i16(self.bounds.x_min))
        writer.write(i16(self.bounds.y_min))
        writer.write(i16(self.bounds.x_max))
        writer.write(i16(self.bounds.y_max))
        writer.write(u16(self.mac_style))
        writer.write(u16(self.lowest_rec_ppem))
        writer.write(i16(self.font_direction_hint))
        writer.write(i16(self.index_to_loc_format))
        writer.write(i16(0))  # glyphDataFormat
